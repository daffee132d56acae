"""
Domain entities for the snake simulation core.

This module contains the game entities and the per-tick state machine.
They are independent of how the game is displayed or how input is read.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    MOVED, ATE, WALL, SELF, BOARD_FULL, NOOP,
)
from .errors import InvalidBoardError, BoardFullError
from .snake import Snake
from .game_state import GameState
from .game import SnakeGame

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'MOVED', 'ATE', 'WALL', 'SELF', 'BOARD_FULL', 'NOOP',
    'InvalidBoardError', 'BoardFullError',
    'Snake',
    'GameState',
    'SnakeGame',
]
