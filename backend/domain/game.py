"""
Single-snake simulation core.

SnakeGame owns the body, the food cell, the score and the game-over flag.
The driver feeds it at most one direction change and one tick per frame;
the board size is passed on every tick so the play field may change
between calls. Collisions are ordinary outcomes returned from tick(),
not exceptions.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from .constants import (
    ATE,
    BOARD_FULL,
    DIRECTION_DELTAS,
    LOST,
    MOVED,
    NOOP,
    OPPOSITES,
    SELF,
    START_DIRECTION,
    START_FOOD,
    START_HEAD,
    VALID_MOVES,
    WALL,
    WON,
)
from .errors import BoardFullError, InvalidBoardError
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def _check_cell(cell: Cell, what: str) -> Cell:
    x, y = cell
    if x < 0 or y < 0:
        raise ValueError(f"{what} has a negative coordinate: {(x, y)}.")
    return (x, y)


def _check_board(width, height) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidBoardError(f"Board {name} must be a positive integer, got {value!r}.")


class SnakeGame:
    """
    Manages:
      - Snake body and direction
      - Food
      - Score
      - Game-over flag and result
      - History for replay

    A body passed in is checked for distinct, non-negative cells only, not
    for contiguity, so harnesses can set up arbitrary positions. Food set
    to None is placed after the first legal move.
    """

    def __init__(
        self,
        body: Optional[Iterable[Cell]] = None,
        food: Optional[Cell] = START_FOOD,
        direction: str = START_DIRECTION,
        rng: Optional[random.Random] = None,
    ):
        cells = [_check_cell(c, "Snake cell") for c in (body if body is not None else [START_HEAD])]
        if not cells:
            raise ValueError("Snake body needs at least one cell.")
        if len(set(cells)) != len(cells):
            raise ValueError(f"Snake body overlaps itself: {cells}.")
        # No food means it is placed after the first move
        if food is not None:
            food = _check_cell(food, "Food")
            if food in cells:
                raise ValueError(f"Food {food} is on the snake body.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")

        self.snake = Snake(cells)
        self.food: Optional[Cell] = food
        self.direction = direction
        self.score = 0
        self.round_number = 0
        self.game_over = False
        self.result: Optional[str] = None
        self.rng = rng if rng is not None else random.Random()

        # Board size seen on the last tick
        self.width: Optional[int] = None
        self.height: Optional[int] = None

        self.history: List[GameState] = []

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self.snake.positions)

    @property
    def head(self) -> Cell:
        return self.snake.head

    @property
    def death_reason(self) -> Optional[str]:
        return self.snake.death_reason

    def set_direction(self, direction: str) -> bool:
        """
        Change the direction used by the next tick.

        A reversal of the current direction is ignored, since the head
        would run straight into its own neck. Returns True when the
        change was accepted.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        if direction == OPPOSITES[self.direction]:
            logger.debug("Ignoring reversal %s -> %s", self.direction, direction)
            return False
        self.direction = direction
        return True

    def tick(self, width: int, height: int) -> str:
        """
        Advance the game by one step on a width x height board.

        Returns one of MOVED, ATE, WALL, SELF, BOARD_FULL, or NOOP when the
        game was already over. Raises InvalidBoardError for non-positive
        dimensions. Food left outside a shrunk board stays where it is.
        """
        _check_board(width, height)
        if self.game_over:
            return NOOP

        self.width, self.height = width, height

        new_head = self._next_head()

        # Check for collisions with walls
        if new_head[0] >= width or new_head[1] >= height:
            self._end_with_death(WALL)
            return WALL

        # Check for collisions with self (tail included)
        if new_head in self.snake:
            self._end_with_death(SELF)
            return SELF

        self.snake.positions.appendleft(new_head)
        self.round_number += 1

        if new_head != self.food:
            self.snake.positions.pop()
            # Food not placed yet goes down after the move, so it cannot be eaten this tick
            if self.food is None:
                logger.debug("Placing first food on the %dx%d board", width, height)
                if not self._replace_food(width, height):
                    return BOARD_FULL
            return MOVED

        self.score += 1
        logger.debug("Ate food at %s, score %d", new_head, self.score)
        if not self._replace_food(width, height):
            return BOARD_FULL
        return ATE

    def _next_head(self) -> Cell:
        hx, hy = self.snake.head
        dx, dy = DIRECTION_DELTAS[self.direction]
        # Moving below 0 clamps to 0 instead of leaving the board
        return (max(hx + dx, 0), max(hy + dy, 0))

    def _replace_food(self, width: int, height: int) -> bool:
        """Move the food to a free cell; end the round as won if there is none."""
        try:
            self.food = self._random_free_cell(width, height)
        except BoardFullError:
            self.food = None
            self.game_over = True
            self.result = WON
            self.snake.death_reason = BOARD_FULL
            logger.info("Board full after %d rounds, score %d", self.round_number, self.score)
            return False
        return True

    def _random_free_cell(self, width: int, height: int) -> Cell:
        """
        Return a random cell (x, y) not occupied by the snake.

        Rejection sampling over the whole board. Raises BoardFullError when
        every cell of the board is taken, instead of looping forever.
        """
        occupied = sum(1 for x, y in self.snake.positions if x < width and y < height)
        if occupied >= width * height:
            raise BoardFullError(f"No free cell on a {width}x{height} board.")

        while True:
            cell = (self.rng.randint(0, width - 1), self.rng.randint(0, height - 1))
            if cell not in self.snake:
                return cell

    def _end_with_death(self, reason: str) -> None:
        self.game_over = True
        self.result = LOST
        self.snake.alive = False
        self.snake.death_reason = reason
        self.snake.death_round = self.round_number
        logger.info("Game over: %s at round %d, score %d", reason, self.round_number, self.score)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            round_number=self.round_number,
            body=list(self.snake.positions),
            food=self.food,
            direction=self.direction,
            score=self.score,
            game_over=self.game_over,
            death_reason=self.snake.death_reason,
            width=self.width,
            height=self.height,
        )

    def record_history(self) -> None:
        self.history.append(self.get_current_state())

    def __repr__(self):
        return (
            f"<SnakeGame round={self.round_number}, head={self.head}, "
            f"length={len(self.snake)}, score={self.score}, game_over={self.game_over}>"
        )
