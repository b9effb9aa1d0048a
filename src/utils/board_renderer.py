from typing import Dict, Iterable, List, Tuple

from ..puzzle.ledger import PlacementLedger
from ..puzzle.models import CellPosition


CELL_WIDTH = 10


def _cell_label(position: CellPosition, words: Dict[CellPosition, str], marked: set, width: int) -> str:
    if position in words:
        text = words[position][:width]
        return f"<{text:^{width}}>"
    text = f"{position.col},{position.row}"
    if position in marked:
        return f"({('*' + text):^{width}})"
    return f"[{text:^{width}}]"


def render_board(
    ledger: PlacementLedger,
    cols: int,
    rows: int,
    marked: Iterable[Tuple[int, int]] = (),
    width: int = CELL_WIDTH,
) -> str:
    """
    Render a flat-top hex board as text.

    Each cell spans two text lines so odd columns can sit half a cell lower
    than even ones. Placed tiles show their word in <angle brackets>, marked
    cells (e.g. legal next moves) show a * before their coordinates.
    """
    words = {p.position: p.correct_word for p in ledger.history()}
    marked_cells = {CellPosition(*p) for p in marked}
    blank = " " * (width + 2)

    lines: List[str] = []
    for line in range(rows * 2 + 1):
        parts = []
        for col in range(cols):
            offset = line - col % 2
            if offset % 2 == 0 and 0 <= offset // 2 < rows:
                parts.append(_cell_label(CellPosition(col, offset // 2), words, marked_cells, width))
            else:
                parts.append(blank)
        lines.append(" ".join(parts).rstrip())

    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def in_bounds(position: Tuple[int, int], cols: int, rows: int) -> bool:
    """Check whether a cell lies on a board of the given size."""
    col, row = position
    return 0 <= col < cols and 0 <= row < rows
