"""
Registry for player implementations.

Maps player keys (e.g. 'random', 'scripted') to player classes so the
command line can pick a player by name.
"""

from typing import Dict, List, Type

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    RandomPlayer.name: RandomPlayer,
    ScriptedPlayer.name: ScriptedPlayer,
}

AVAILABLE_PLAYERS: List[str] = sorted(PLAYER_CLASSES)


def get_player_class(key: str) -> Type[Player]:
    """
    Get the player class for a key.

    Raises:
        ValueError: if the key is not registered
    """
    try:
        return PLAYER_CLASSES[key]
    except KeyError:
        raise ValueError(
            f"Unknown player {key!r}. Available: {', '.join(AVAILABLE_PLAYERS)}"
        ) from None
