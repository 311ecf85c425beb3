"""
Exact solution counting for a region labeling, plus checks for a
player's queen placement.

Rules: one queen per row, one per column, one per region, and no two
queens touching (diagonals included).
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set, Tuple

from queensgen.grid import Cell, Grid
from queensgen.placement import PartialPlacement


def touches(r1, c1, r2, c2):
    return abs(r1 - r2) <= 1 and abs(c1 - c2) <= 1


# ============================================================
# Uniqueness oracle
# ============================================================
def count_solutions(grid: Grid, limit: int = 2) -> int:
    """
    Count valid queen placements on grid, stopping once limit is reached.

    Columns are filled left to right and rows tried in ascending order.
    The grid is only read.
    """
    N = grid.width
    state = PartialPlacement(N, grid)
    solutions = 0

    def dfs():
        nonlocal solutions
        if state.is_complete():
            solutions += 1
            return
        c = state.depth
        for r in range(N):
            if solutions >= limit:
                return
            if state.can_place((r, c)):
                state.push((r, c))
                dfs()
                state.pop()

    dfs()
    return solutions


def has_exactly_one_solution(grid: Grid) -> bool:
    return count_solutions(grid, limit=2) == 1


def find_one_solution(grid: Grid) -> Optional[Tuple[Cell, ...]]:
    """
    Returns the first solution in search order, sorted by row, or None if
    the labeling is unsatisfiable.
    """
    N = grid.width
    state = PartialPlacement(N, grid)

    def dfs() -> bool:
        if state.is_complete():
            return True
        c = state.depth
        for r in range(N):
            if state.can_place((r, c)):
                state.push((r, c))
                if dfs():
                    return True
                state.pop()
        return False

    if not dfs():
        return None
    return tuple(sorted(state.queens))


# ============================================================
# Player validity + solved
# ============================================================
def invalid_queens(queens: Iterable[Cell], grid: Grid) -> Set[Cell]:
    invalid = set()
    qs = list(queens)
    N = grid.width

    row = [0] * N
    col = [0] * N
    reg: Dict[int, int] = {}

    for r, c in qs:
        row[r] += 1
        col[c] += 1
        rid = grid.color_of((r, c))
        reg[rid] = reg.get(rid, 0) + 1

    for r, c in qs:
        if row[r] > 1 or col[c] > 1 or reg.get(grid.color_of((r, c)), 0) > 1:
            invalid.add((r, c))

    for i in range(len(qs)):
        r1, c1 = qs[i]
        for j in range(i + 1, len(qs)):
            r2, c2 = qs[j]
            if touches(r1, c1, r2, c2):
                invalid.add((r1, c1))
                invalid.add((r2, c2))

    return invalid


def is_solved(queens: Iterable[Cell], grid: Grid) -> bool:
    qs = set(queens)
    if len(qs) != grid.width:
        return False
    if invalid_queens(qs, grid):
        return False
    # every region must hold one of the queens
    return {grid.color_of(q) for q in qs} == grid.labels()


__all__ = [
    "touches",
    "count_solutions",
    "has_exactly_one_solution",
    "find_one_solution",
    "invalid_queens",
    "is_solved",
]
