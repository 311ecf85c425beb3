import pytest

from queensgen.generator import Puzzle
from queensgen.grid import Grid

# One queen per column: rows 1, 3, 0, 2. Labels 1..3 are single cells,
# everything else belongs to the base label 0.
FOUR_QUEENS = ((1, 0), (3, 1), (0, 2), (2, 3))
FOUR_ROWS = [
    [0, 0, 2, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 3],
    [0, 1, 0, 0],
]


@pytest.fixture
def four_grid():
    return Grid.from_rows(FOUR_ROWS)


@pytest.fixture
def four_puzzle(four_grid):
    return Puzzle.from_grid(four_grid, FOUR_QUEENS, base_label=0)


@pytest.fixture
def four_queens():
    return FOUR_QUEENS
