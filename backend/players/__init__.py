"""
Player implementations for the snake simulation.

Players decide which direction the snake takes on each tick. The game
loop in main.py asks the player once per tick and hands the answer to
SnakeGame.set_direction().
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .registry import get_player_class, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'AVAILABLE_PLAYERS',
]
