"""
Exceptions raised by the simulation core.
"""


class InvalidBoardError(ValueError):
    """Board dimensions passed to a tick are not positive integers."""


class BoardFullError(Exception):
    """No free cell is left on the board to place food on."""
