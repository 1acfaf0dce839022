"""Errors raised by the game engine.

All of these are usage errors reported synchronously to the caller. None
of them leave a previously returned GameState modified.
"""


class GameError(Exception):
    """Base class for rule violations and configuration errors."""


class InvalidConfiguration(GameError, ValueError):
    """Board dimensions are not positive integers."""


class InvalidCoordinate(GameError):
    """A (row, cell) pair does not address a wall on this board."""

    def __init__(self, row: int, cell: int, message: str):
        self.row = row
        self.cell = cell
        super().__init__(message)


class AlreadyClaimed(GameError):
    """The targeted wall has already been claimed."""

    def __init__(self, row: int, cell: int):
        self.row = row
        self.cell = cell
        super().__init__(f"Wall at row {row}, cell {cell} is already claimed")


class GameOver(GameError):
    """A move was attempted after every square was owned."""
