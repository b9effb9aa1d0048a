"""
Placement validation for the hex board.

Rules, checked in order:
1. The target cell must be free (applies to the first card too)
2. The first card may go on any free cell
3. Every later card must touch exactly one previously placed card

Rule 3 keeps the solved tiles a single connected chain/tree: touching two
placed cards at once is rejected just like touching none.
"""

import logging
from typing import List, Literal, Tuple

from .grid import frontier
from .ledger import PlacementLedger
from .models import CellPosition, ValidationResult


logger = logging.getLogger(__name__)

BoardState = Literal["EMPTY", "IN_PROGRESS"]


class PlacementValidator:
    """Decides whether a card may be placed on a cell. Reads the ledger, never writes it."""

    def __init__(self, ledger: PlacementLedger):
        self.ledger = ledger

    @property
    def state(self) -> BoardState:
        return "IN_PROGRESS" if len(self.ledger) else "EMPTY"

    def validate(self, position: Tuple[int, int], is_first_card: bool = False) -> ValidationResult:
        """
        Check a candidate placement against the board.

        Args:
            position: The (col, row) cell the learner dropped the card on
            is_first_card: Whether the caller treats this as the opening tile

        Returns:
            ValidationResult with is_valid, a human-readable reason and a code
        """
        position = CellPosition(*position)

        if self.ledger.is_occupied(position):
            result = ValidationResult(
                is_valid=False,
                reason="Position already occupied",
                code="POSITION_OCCUPIED",
            )
        elif is_first_card or not self.ledger.history():
            result = ValidationResult(
                is_valid=True,
                reason="First card placement",
                code="FIRST_CARD",
            )
        else:
            count = self.ledger.count_adjacent_placements(position)
            if count == 0:
                result = ValidationResult(
                    is_valid=False,
                    reason="Card must be adjacent to exactly one previous card",
                    code="NOT_ADJACENT",
                )
            elif count > 1:
                result = ValidationResult(
                    is_valid=False,
                    reason="Card cannot be adjacent to multiple previous cards",
                    code="MULTIPLE_ADJACENT",
                )
            else:
                result = ValidationResult(
                    is_valid=True,
                    reason="Valid placement adjacent to one card",
                    code="VALID",
                )

        logger.debug(
            "Validated %s (first card: %s, placed: %d): %s",
            tuple(position), is_first_card, len(self.ledger), result.code,
        )
        return result

    def valid_positions(self) -> List[CellPosition]:
        """
        All free cells where the next card could legally go.

        Returns an empty list while the board is empty, since any cell is
        acceptable for the opening tile.
        """
        if not self.ledger.history():
            return []

        candidates = frontier(self.ledger.occupied_positions())
        return sorted(
            p for p in candidates
            if not self.ledger.is_occupied(p) and self.ledger.count_adjacent_placements(p) == 1
        )
