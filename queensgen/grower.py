"""Region growth: spread grown regions into the base region one cell at a time."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from queensgen.connectivity import queen_for_label, would_disconnect_region
from queensgen.grid import Cell, Grid
from queensgen.solver import has_exactly_one_solution

logger = logging.getLogger(__name__)

Spread = Tuple[Cell, int]


def possible_spreads(
    grid: Grid,
    queens: Sequence[Cell],
    excluded_label: int,
    continuous: bool = True,
) -> List[Spread]:
    """
    Every (cell, label) move that recolors a base cell into a bordering
    grown region.

    A base cell bordering the same region from two sides is listed twice.
    With continuous set, moves that would cut any region off from its
    queen are left out.
    """
    queen_set = set(queens)
    queen_of = queen_for_label(queens, grid)
    spreads: List[Spread] = []

    for cell in grid.cells():
        label = grid.color_of(cell)
        if label == excluded_label:
            continue
        for nb in grid.neighbors(cell):
            if grid.color_of(nb) != excluded_label:
                continue
            if nb in queen_set:
                continue
            if continuous and would_disconnect_region(grid, nb, label, queen_of):
                continue
            spreads.append((nb, label))

    return spreads


def grow_once(
    grid: Grid,
    queens: Sequence[Cell],
    excluded_label: int,
    continuous: bool = True,
    rng: Optional[random.Random] = None,
) -> bool:
    """
    Try one spread. Keeps the first shuffled candidate that leaves the grid
    with exactly one solution and returns True; otherwise the grid is left
    unchanged and False is returned.
    """
    rng = rng or random
    spreads = possible_spreads(grid, queens, excluded_label, continuous)
    rng.shuffle(spreads)
    logger.debug("%d spread candidates", len(spreads))

    for cell, label in spreads:
        replaced = grid.color_of(cell)
        grid.set_color(cell, label)
        if has_exactly_one_solution(grid):
            logger.debug("spread %s -> %d", cell, label)
            return True
        grid.set_color(cell, replaced)

    logger.debug("no spread kept")
    return False


__all__ = ["Spread", "possible_spreads", "grow_once"]
