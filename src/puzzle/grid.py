"""Flat-top hexagonal grid geometry.

Cells are addressed as (col, row). Odd columns sit half a cell lower than
even columns, so the two diagonal neighbours on each side depend on the
parity of the column.
"""

from typing import Iterable, Set, Tuple

from .models import CellPosition


def _as_position(position: Tuple[int, int]) -> CellPosition:
    return position if isinstance(position, CellPosition) else CellPosition(*position)


def neighbors(position: Tuple[int, int]) -> Set[CellPosition]:
    """Return the six cells touching the given cell."""
    col, row = _as_position(position)

    # Python's % is non-negative, so negative columns get the right parity
    diagonal_row = row - 1 if col % 2 == 0 else row + 1

    return {
        CellPosition(col, row - 1),  # top
        CellPosition(col, row + 1),  # bottom
        CellPosition(col - 1, row),
        CellPosition(col + 1, row),
        CellPosition(col - 1, diagonal_row),
        CellPosition(col + 1, diagonal_row),
    }


def are_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """Check whether two cells share an edge."""
    return _as_position(b) in neighbors(a)


def frontier(positions: Iterable[Tuple[int, int]]) -> Set[CellPosition]:
    """All cells touching at least one of the given cells, excluding those cells."""
    occupied = {_as_position(p) for p in positions}
    cells: Set[CellPosition] = set()
    for position in occupied:
        cells |= neighbors(position)
    return cells - occupied
