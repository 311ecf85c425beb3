import dataclasses
import random

import pytest

from queensgen.config import GeneratorConfig
from queensgen.errors import IncompletePuzzleError
from queensgen.generator import Puzzle, PuzzleGenerator, generate_puzzle
from queensgen.grid import Grid
from queensgen.solver import find_one_solution, has_exactly_one_solution, is_solved


@pytest.mark.parametrize("width", [4, 5, 6, 7])
def test_generated_puzzle_properties(width):
    puzzle = generate_puzzle(width, rng=random.Random(width * 31))
    grid = puzzle.to_grid()

    rows = [r for r, _ in puzzle.queens]
    cols = [c for _, c in puzzle.queens]
    assert rows == list(range(width))
    assert sorted(cols) == list(range(width))
    assert sorted(puzzle.queen_labels) == list(range(width))
    assert grid.labels() == set(range(width))

    by_col = sorted(puzzle.queens, key=lambda q: q[1])
    for (r1, _), (r2, _) in zip(by_col, by_col[1:]):
        assert abs(r1 - r2) != 1

    assert has_exactly_one_solution(grid)
    assert find_one_solution(grid) == puzzle.queens
    assert is_solved(puzzle.queens, grid)
    assert puzzle.regions_connected()


def test_queen_labels_are_their_columns():
    puzzle = generate_puzzle(6, rng=random.Random(2))
    for (r, c), label in zip(puzzle.queens, puzzle.queen_labels):
        assert label == c
        assert puzzle.label_of((r, c)) == c
    assert 0 <= puzzle.base_label < 6


def test_non_continuous_still_unique():
    puzzle = generate_puzzle(6, continuous_base=False, rng=random.Random(9))
    assert has_exactly_one_solution(puzzle.to_grid())


def test_zero_spreads_leaves_seed_board():
    puzzle = generate_puzzle(5, rng=random.Random(4), max_spreads=0)
    assert puzzle.spreads == 0
    counts = {}
    for row in puzzle.regions:
        for label in row:
            counts[label] = counts.get(label, 0) + 1
    assert counts[puzzle.base_label] == 25 - 4
    assert all(n == 1 for label, n in counts.items() if label != puzzle.base_label)


def test_progress_reports_every_attempt():
    calls = []
    generate_puzzle(4, rng=random.Random(0), progress=lambda done, total: calls.append((done, total)))
    assert calls == [(i, 16) for i in range(1, 17)]


def test_same_seed_same_puzzle():
    a = generate_puzzle(6, rng=random.Random(77))
    b = generate_puzzle(6, rng=random.Random(77))
    assert a == b


def test_puzzle_generator_uses_config_seed():
    config = GeneratorConfig(width=5, seed=123)
    a = PuzzleGenerator(config).generate()
    b = PuzzleGenerator(config).generate()
    assert a == b
    assert a.width == 5


def test_puzzle_is_frozen(four_puzzle):
    with pytest.raises(dataclasses.FrozenInstanceError):
        four_puzzle.width = 9


def test_puzzle_accessors(four_puzzle):
    assert four_puzzle.queens == ((0, 2), (1, 0), (2, 3), (3, 1))
    assert four_puzzle.queen_columns() == (2, 0, 3, 1)
    assert four_puzzle.queen_labels == (2, 0, 3, 1)
    assert four_puzzle.is_queen((1, 0))
    assert not four_puzzle.is_queen((0, 0))
    assert four_puzzle.regions_connected()


def test_incomplete_puzzle_is_rejected(four_grid, four_queens):
    with pytest.raises(IncompletePuzzleError):
        Puzzle.from_grid(four_grid, four_queens[:3])
    with pytest.raises(IncompletePuzzleError):
        Puzzle.from_grid(four_grid, [(0, 0), (0, 1), (2, 2), (3, 3)])


def test_split_region_is_reported():
    grid = Grid.from_rows([
        [0, 1, 0, 2],
        [0, 1, 3, 2],
        [0, 3, 3, 2],
        [0, 1, 3, 2],
    ])
    puzzle = Puzzle.from_grid(grid, [(0, 0), (1, 1), (2, 2), (3, 3)])
    assert not puzzle.regions_connected()
