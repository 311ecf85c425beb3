from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Set, Tuple

from queensgen.errors import SearchExhaustedError
from queensgen.grid import Cell, Grid


class PartialPlacement:
    """
    Queens placed so far, one per column from column 0 upward.

    Shared by the random placement search and the solution counter; the
    depth of the search is the number of queens placed.
    """

    def __init__(self, width: int, grid: Optional[Grid] = None):
        self.width = width
        self.grid = grid
        self.queens: List[Cell] = []
        self.used_rows: Set[int] = set()
        self.used_labels: Counter = Counter()

    @property
    def depth(self) -> int:
        return len(self.queens)

    def is_complete(self) -> bool:
        return len(self.queens) == self.width

    def can_place(self, cell: Cell, check_label: bool = True) -> bool:
        r, _ = cell
        if r in self.used_rows:
            return False
        if check_label and self.grid is not None:
            if self.used_labels[self.grid.color_of(cell)]:
                return False
        # no touching the queen in the previous column
        if self.queens:
            last_r, _ = self.queens[-1]
            if abs(r - last_r) == 1:
                return False
        return True

    def push(self, cell: Cell) -> None:
        self.queens.append(cell)
        self.used_rows.add(cell[0])
        if self.grid is not None:
            self.used_labels[self.grid.color_of(cell)] += 1

    def pop(self) -> Cell:
        cell = self.queens.pop()
        self.used_rows.discard(cell[0])
        if self.grid is not None:
            self.used_labels[self.grid.color_of(cell)] -= 1
        return cell


# ============================================================
# Random queen skeleton (one per row/column, no touching)
# ============================================================
def place_randomly(width: int, rng: Optional[random.Random] = None) -> Tuple[Tuple[Cell, ...], bool]:
    """Returns (queens, success); queens are ordered by column."""

    rng = rng or random
    if width < 1:
        return (), False

    state = PartialPlacement(width)

    def backtrack() -> bool:
        if state.is_complete():
            return True
        c = state.depth
        rows = [r for r in range(width) if state.can_place((r, c), check_label=False)]
        rng.shuffle(rows)
        for r in rows:
            state.push((r, c))
            if backtrack():
                return True
            state.pop()
        return False

    if backtrack():
        return tuple(state.queens), True
    return (), False


def place_queens(width: int, rng: Optional[random.Random] = None) -> Tuple[Cell, ...]:
    queens, ok = place_randomly(width, rng)
    if not ok:
        raise SearchExhaustedError(f"no queen placement exists for width {width}")
    return queens


__all__ = ["PartialPlacement", "place_randomly", "place_queens"]
