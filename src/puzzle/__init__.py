"""Hex-board puzzle engine: geometry, placement rules and option selection."""

from .models import CellPosition, Placement, ValidationResult, OptionSet, Round
from .errors import PuzzleError, InvalidInput, DuplicatePosition
from .grid import neighbors, are_adjacent, frontier
from .ledger import PlacementLedger
from .validator import PlacementValidator
from .options import select_options, normalize_forms, is_usable_form, OPTION_COUNT

__all__ = [
    # Models
    "CellPosition",
    "Placement",
    "ValidationResult",
    "OptionSet",
    "Round",
    # Errors
    "PuzzleError",
    "InvalidInput",
    "DuplicatePosition",
    # Geometry
    "neighbors",
    "are_adjacent",
    "frontier",
    # Board state
    "PlacementLedger",
    "PlacementValidator",
    # Options
    "select_options",
    "normalize_forms",
    "is_usable_form",
    "OPTION_COUNT",
]
