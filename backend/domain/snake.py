"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self'
        death_round: The round number when the snake died
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} alive={self.alive}>"
