"""
Queens puzzle generation.

Algorithm:
1. Place one queen per column at random (no shared rows, no touching)
2. Give each queen's cell its own label (its column index)
3. Pick one queen's label as the base and paint every other cell with it
4. Repeatedly spread the other regions into the base, keeping the
   solution unique after every accepted spread
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from queensgen.config import MAX_SPREADS, GeneratorConfig
from queensgen.connectivity import connected
from queensgen.errors import IncompletePuzzleError
from queensgen.grid import UNASSIGNED, Cell, Grid
from queensgen.grower import grow_once
from queensgen.placement import place_queens

logger = logging.getLogger(__name__)

ProgressFn = Callable[[int, int], None]


@dataclass(frozen=True)
class Puzzle:
    """A finished board: region labels plus its unique queen placement."""

    width: int
    regions: Tuple[Tuple[int, ...], ...]
    queens: Tuple[Cell, ...]
    queen_labels: Tuple[int, ...]
    base_label: int = UNASSIGNED
    spreads: int = 0

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        queens: Sequence[Cell],
        base_label: int = UNASSIGNED,
        spreads: int = 0,
    ) -> "Puzzle":
        if len(queens) != grid.width:
            raise IncompletePuzzleError(
                f"Tried to make a board with {len(queens)} of {grid.width} queens"
            )
        if len({r for r, _ in queens}) != grid.width:
            raise IncompletePuzzleError("Tried to make a board with two queens on one row")

        by_row = tuple(sorted(queens))
        return cls(
            width=grid.width,
            regions=grid.rows(),
            queens=by_row,
            queen_labels=tuple(grid.color_of(q) for q in by_row),
            base_label=base_label,
            spreads=spreads,
        )

    def label_of(self, cell: Cell) -> int:
        r, c = cell
        return self.regions[r][c]

    def is_queen(self, cell: Cell) -> bool:
        return cell in self.queens

    def queen_columns(self) -> Tuple[int, ...]:
        """Column of each row's queen, by ascending row."""
        return tuple(c for _, c in self.queens)

    def to_grid(self) -> Grid:
        return Grid.from_rows(self.regions)

    def regions_connected(self) -> bool:
        grid = self.to_grid()
        for label, queen in zip(self.queen_labels, self.queens):
            for cell in grid.cells():
                if grid.color_of(cell) == label and not connected(grid, cell, queen):
                    return False
        return True


# ============================================================
# Puzzle generation
# ============================================================
def generate_puzzle(
    width: int,
    continuous_base: bool = True,
    rng: Optional[random.Random] = None,
    max_spreads: int = MAX_SPREADS,
    progress: Optional[ProgressFn] = None,
) -> Puzzle:
    rng = rng or random

    # Get the queen structure
    queens = place_queens(width, rng)
    grid = Grid(width)
    for queen in queens:
        grid.set_color(queen, queen[1])

    # Set excluded color
    base_label = rng.randrange(width)
    grid.relabel(UNASSIGNED, base_label)
    logger.info("Base color (excluded): %d", base_label)
    logger.info("Completed base board.")

    total = min(width * width, max_spreads)
    logger.info("Spreading colors around %d times", total)
    accepted = 0
    for i in range(total):
        if grow_once(grid, queens, base_label, continuous_base, rng):
            accepted += 1
        if progress is not None:
            progress(i + 1, total)
    logger.info("Kept %d of %d spreads", accepted, total)

    return Puzzle.from_grid(grid, queens, base_label=base_label, spreads=accepted)


class PuzzleGenerator:
    """Generates puzzles for one config, with its own random generator."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)

    def generate(self, progress: Optional[ProgressFn] = None) -> Puzzle:
        cfg = self.config
        return generate_puzzle(
            cfg.width,
            continuous_base=cfg.continuous_base,
            rng=self.rng,
            max_spreads=cfg.max_spreads,
            progress=progress,
        )


__all__ = ["Puzzle", "ProgressFn", "generate_puzzle", "PuzzleGenerator"]
