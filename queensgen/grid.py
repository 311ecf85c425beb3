from __future__ import annotations

from typing import Iterator, List, Sequence, Set, Tuple

from queensgen.errors import OutOfBoundsError

Cell = Tuple[int, int]

# Label of a cell that belongs to no region yet.
UNASSIGNED = -1

DIRS4 = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class Grid:
    """
    A width x width board of region labels, stored row-major.

    Cells are (row, col) tuples. Labels are plain ints; the generator uses
    queen column indices 0..width-1, and UNASSIGNED for cells not yet
    given a region.
    """

    def __init__(self, width: int, fill: int = UNASSIGNED):
        if width < 1:
            raise ValueError("Grid needs at least 1 column.")
        self.width = width
        self._labels: List[int] = [fill] * (width * width)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        width = len(rows)
        if any(len(row) != width for row in rows):
            raise ValueError("Grid rows must form a square table.")
        grid = cls(width)
        grid._labels = [int(label) for row in rows for label in row]
        return grid

    def _index(self, cell: Cell) -> int:
        if not self.in_bounds(cell):
            raise OutOfBoundsError(cell, self.width)
        r, c = cell
        return r * self.width + c

    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.width and 0 <= c < self.width

    def color_of(self, cell: Cell) -> int:
        return self._labels[self._index(cell)]

    def set_color(self, cell: Cell, label: int) -> None:
        self._labels[self._index(cell)] = label

    def fill_all(self, label: int) -> None:
        self._labels = [label] * (self.width * self.width)

    def relabel(self, old: int, new: int) -> None:
        self._labels = [new if label == old else label for label in self._labels]

    def cells(self) -> Iterator[Cell]:
        for r in range(self.width):
            for c in range(self.width):
                yield (r, c)

    def neighbors(self, cell: Cell) -> List[Cell]:
        r, c = cell
        out = []
        for dr, dc in DIRS4:
            nb = (r + dr, c + dc)
            if self.in_bounds(nb):
                out.append(nb)
        return out

    def labels(self) -> Set[int]:
        return set(self._labels)

    def copy(self) -> "Grid":
        clone = Grid(self.width)
        clone._labels = list(self._labels)
        return clone

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        w = self.width
        return tuple(tuple(self._labels[r * w:(r + 1) * w]) for r in range(w))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self._labels == other._labels

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, rows={self.rows()!r})"


__all__ = ["Cell", "UNASSIGNED", "DIRS4", "Grid"]
