"""Exceptions raised by the puzzle engine."""

from .models import CellPosition


class PuzzleError(Exception):
    """Base class for puzzle engine errors."""


class InvalidInput(PuzzleError, ValueError):
    """Raised when a round cannot be built from the given word data."""


class DuplicatePosition(PuzzleError):
    """Raised when a placement would reuse an occupied cell."""

    def __init__(self, position: CellPosition):
        self.position = CellPosition(*position)
        super().__init__(f"Position ({self.position.col}, {self.position.row}) is already occupied")
