"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS, OPPOSITES, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        body = game_state.body
        head_x, head_y = body[0]
        width, height = game_state.width, game_state.height

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls (moving below 0 is clamped onto the head itself)
        # 3. Hit own body, tail included since it has not moved yet
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITES[game_state.direction]:
                continue

            dx, dy = DIRECTION_DELTAS[move]
            new_x, new_y = head_x + dx, head_y + dy
            if new_x < 0 or new_y < 0:
                continue
            if width is not None and (new_x >= width or new_y >= height):
                continue
            if (new_x, new_y) in body:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
