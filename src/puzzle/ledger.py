import logging
from typing import Dict, Iterable, List, Optional, Tuple
from pydantic import BaseModel, PrivateAttr

from .errors import DuplicatePosition
from .grid import are_adjacent
from .models import CellPosition, Placement


logger = logging.getLogger(__name__)


class PlacementLedger(BaseModel):
    """
    Records the tiles placed while solving one phrase.

    Keeps placements in game order and tracks which cells they occupy.
    A cell is occupied iff exactly one recorded placement sits on it.
    Placements only enter through record(); read them with history().
    """

    _placements: List[Placement] = PrivateAttr(default_factory=list)
    _occupied: Dict[CellPosition, str] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_placements(cls, placements: Iterable[Placement]) -> "PlacementLedger":
        """
        Build a ledger by recording placements in order.

        Raises:
            DuplicatePosition: If two placements share a cell
        """
        ledger = cls()
        for placement in placements:
            ledger.record(placement)
        return ledger

    def __len__(self) -> int:
        return len(self._placements)

    def record(self, placement: Placement) -> None:
        """
        Append a placement and mark its cell occupied.

        Args:
            placement: The validated placement to record

        Raises:
            DuplicatePosition: If the cell already holds a tile
        """
        if placement.position in self._occupied:
            logger.error(
                "Refusing placement %s at %s: cell already holds %s",
                placement.id, tuple(placement.position), self._occupied[placement.position],
            )
            raise DuplicatePosition(placement.position)

        self._placements.append(placement)
        self._occupied[placement.position] = placement.id
        logger.debug(
            "Tile %s placed at %s with correct word %r",
            placement.id, tuple(placement.position), placement.correct_word,
        )

    def is_occupied(self, position: Tuple[int, int]) -> bool:
        """Check if a cell already holds a tile."""
        return CellPosition(*position) in self._occupied

    def history(self) -> Tuple[Placement, ...]:
        """Placements in the order they were made."""
        return tuple(self._placements)

    def occupied_positions(self) -> Tuple[CellPosition, ...]:
        return tuple(p.position for p in self._placements)

    def last_placement(self) -> Optional[Placement]:
        return self._placements[-1] if self._placements else None

    def last_correct_word(self) -> Optional[str]:
        last = self.last_placement()
        return last.correct_word if last else None

    def last_position(self) -> Optional[CellPosition]:
        last = self.last_placement()
        return last.position if last else None

    def count_adjacent_placements(self, position: Tuple[int, int]) -> int:
        """Number of recorded tiles touching the given cell."""
        return sum(1 for p in self._placements if are_adjacent(position, p.position))

    def adjacent_placement(self, position: Tuple[int, int]) -> Optional[Placement]:
        """
        The tile touching the given cell, when exactly one does.

        Returns:
            The single neighbouring placement, or None for zero or several
        """
        touching = [p for p in self._placements if are_adjacent(position, p.position)]
        return touching[0] if len(touching) == 1 else None

    def reset(self) -> None:
        """Clear all placements. Used when a new phrase starts."""
        self._placements = []
        self._occupied.clear()
        logger.debug("Placement ledger reset")

    def get_state(self) -> Dict:
        """
        Get a summary of the ledger.

        Useful for serialization and logging.

        Returns:
            Dictionary containing ledger state
        """
        last_position = self.last_position()
        return {
            "total_placements": len(self._placements),
            "last_correct_word": self.last_correct_word(),
            "last_position": tuple(last_position) if last_position else None,
        }
