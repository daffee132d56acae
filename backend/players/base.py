"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state once per tick and returns
    the direction it wants the snake to take.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
