"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        round_number: how many moves the snake has made so far
        body: list of (x, y), head first
        food: (x, y) of the food cell, or None once the board is full
        direction: direction the snake will move on the next tick
        score: food eaten so far
        game_over: whether the round has ended
        death_reason: 'wall', 'self', 'board_full' or None
        width, height: board dimensions of the last tick (None before the first tick)
    """

    def __init__(
        self,
        round_number: int,
        body: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        direction: str,
        score: int,
        game_over: bool,
        death_reason: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ):
        self.round_number = round_number
        self.body = body
        self.food = food
        self.direction = direction
        self.score = score
        self.game_over = game_over
        self.death_reason = death_reason
        self.width = width
        self.height = height

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    def print_board(self, width: Optional[int] = None, height: Optional[int] = None) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first (top of the board). Cells outside the
        board, e.g. after a shrink, are left out.
        """
        width = width if width is not None else self.width
        height = height if height is not None else self.height
        if width is None or height is None:
            raise ValueError("Board size is unknown; pass width and height.")

        board = [['.' for _ in range(width)] for _ in range(height)]

        if self.food is not None:
            fx, fy = self.food
            if fx < width and fy < height:
                board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.body):
            if x >= width or y >= height:
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(height)]
        result.append("   " + " ".join(str(i % 10) for i in range(width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; cells become [x, y] lists."""
        return {
            "round_number": self.round_number,
            "body": [list(cell) for cell in self.body],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction,
            "score": self.score,
            "game_over": self.game_over,
            "death_reason": self.death_reason,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, head={self.head}, "
            f"length={len(self.body)}, food={self.food}, score={self.score}>"
        )
