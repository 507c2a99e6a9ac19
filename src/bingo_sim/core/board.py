"""Bingo board state: a grid of cells marked as numbers are drawn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple


@dataclass
class Cell:
    value: int
    marked: bool = False


@dataclass
class Board:
    """R x C grid of cells. Rows must all have the same length."""

    cells: List[List[Cell]]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(self.cells[0])
        for idx, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Ragged board: row {idx + 1} has {len(row)} cells, expected {width}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Board":
        return cls(cells=[[Cell(int(v)) for v in row] for row in rows])

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.cells), len(self.cells[0])

    def values(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self.cells]

    def copy(self) -> "Board":
        return Board(cells=[[Cell(c.value, c.marked) for c in row] for row in self.cells])

    def mark(self, value: int) -> bool:
        """Mark every cell holding `value`.

        Returns True if at least one previously unmarked cell was marked.
        """
        changed = False
        for row in self.cells:
            for cell in row:
                if cell.value == value and not cell.marked:
                    cell.marked = True
                    changed = True
        return changed

    def is_complete(self) -> bool:
        """A full row or a full column is marked. Diagonals do not count."""
        if any(all(cell.marked for cell in row) for row in self.cells):
            return True
        n_rows, n_cols = self.shape
        return any(
            all(self.cells[i][j].marked for i in range(n_rows)) for j in range(n_cols)
        )

    def unmarked_sum(self) -> int:
        return sum(cell.value for row in self.cells for cell in row if not cell.marked)

    def marked_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.marked)

    def render(self) -> str:
        width = max(len(str(cell.value)) for row in self.cells for cell in row)
        lines = []
        for row in self.cells:
            parts = []
            for cell in row:
                text = str(cell.value).rjust(width)
                parts.append(f"[{text}]" if cell.marked else f" {text} ")
            lines.append("".join(parts).rstrip())
        return "\n".join(lines)
