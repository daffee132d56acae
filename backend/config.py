"""
Runtime configuration for the snake simulation driver.

Values come from the environment (a .env file is loaded first) and can be
overridden on the command line by main.py.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_MAX_ROUNDS = 500
DEFAULT_TICK_SECONDS = 0.0


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_rounds: int = DEFAULT_MAX_ROUNDS
    seed: Optional[int] = None
    tick_seconds: float = DEFAULT_TICK_SECONDS

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}")
        if self.max_rounds <= 0:
            raise ValueError(f"max_rounds must be positive, got {self.max_rounds}")
        if self.tick_seconds < 0:
            raise ValueError(f"tick_seconds cannot be negative, got {self.tick_seconds}")
        return self


def _env_value(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


def load_config() -> GameConfig:
    """
    Build a GameConfig from SNAKE_* environment variables.

    Raises:
        ValueError: if a variable cannot be parsed or is out of range
    """
    return GameConfig(
        width=_env_value('SNAKE_BOARD_WIDTH', int, DEFAULT_WIDTH),
        height=_env_value('SNAKE_BOARD_HEIGHT', int, DEFAULT_HEIGHT),
        max_rounds=_env_value('SNAKE_MAX_ROUNDS', int, DEFAULT_MAX_ROUNDS),
        seed=_env_value('SNAKE_SEED', int, None),
        tick_seconds=_env_value('SNAKE_TICK_SECONDS', float, DEFAULT_TICK_SECONDS),
    ).validate()
