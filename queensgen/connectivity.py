"""Region connectivity checks (4-directional flood fill)."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

from queensgen.errors import NoQueenForColorError
from queensgen.grid import Cell, Grid

logger = logging.getLogger(__name__)


def connected(grid: Grid, start: Cell, target: Cell) -> bool:
    """True if target is reachable from start through cells of start's label."""

    if not grid.in_bounds(start) or not grid.in_bounds(target):
        return False
    label = grid.color_of(start)
    if grid.color_of(target) != label:
        return False
    if start == target:
        return True

    stack = [start]
    seen = {start}
    while stack:
        cell = stack.pop()
        for nb in grid.neighbors(cell):
            if nb in seen or grid.color_of(nb) != label:
                continue
            if nb == target:
                return True
            seen.add(nb)
            stack.append(nb)
    return False


def queen_for_label(queens: Iterable[Cell], grid: Grid) -> Dict[int, Cell]:
    return {grid.color_of(q): q for q in queens}


def queen_of_label(queen_of: Mapping[int, Cell], label: int) -> Cell:
    try:
        return queen_of[label]
    except KeyError:
        raise NoQueenForColorError(label) from None


def connects_to_queen(grid: Grid, cell: Cell, queen_of: Mapping[int, Cell]) -> bool:
    """Whether cell still reaches the queen that owns its label.

    A label without a queen means the generator state is inconsistent;
    that is logged and reported as not connected.
    """

    try:
        queen = queen_of_label(queen_of, grid.color_of(cell))
    except NoQueenForColorError as exc:
        logger.error("ERROR! %s", exc)
        return False
    return connected(grid, cell, queen)


def would_disconnect_region(grid: Grid, cell: Cell, label: int, queen_of: Mapping[int, Cell]) -> bool:
    """
    Return True if relabeling cell to label would cut a neighbouring cell
    off from its queen.

    The probe runs on a copy, so grid is never touched.
    """

    probe = grid.copy()
    probe.set_color(cell, label)

    for nb in probe.neighbors(cell):
        if probe.color_of(nb) == label:
            continue
        if not connects_to_queen(probe, nb, queen_of):
            return True
    return False


__all__ = [
    "connected",
    "queen_for_label",
    "queen_of_label",
    "connects_to_queen",
    "would_disconnect_region",
]
