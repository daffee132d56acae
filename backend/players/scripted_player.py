"""
Scripted player - replays a fixed list of moves.
"""

from typing import Iterable, List

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the given moves in order, one per tick. Once the script runs
    out it keeps the snake's current direction.
    """

    name = "scripted"

    def __init__(self, moves: Iterable[str]):
        self.moves: List[str] = [m.upper() for m in moves]
        for move in self.moves:
            if move not in VALID_MOVES:
                raise ValueError(f"Unknown move {move!r} in script.")
        self.index = 0

    def get_move(self, game_state: GameState) -> str:
        if self.index >= len(self.moves):
            return game_state.direction
        move = self.moves[self.index]
        self.index += 1
        return move
