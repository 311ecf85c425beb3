import pytest

from queensgen.grid import Grid
from queensgen.solver import (
    count_solutions,
    find_one_solution,
    has_exactly_one_solution,
    invalid_queens,
    is_solved,
)


def column_grid(width):
    return Grid.from_rows([list(range(width)) for _ in range(width)])


def test_singleton_regions_give_one_solution(four_grid, four_queens):
    assert count_solutions(four_grid) == 1
    assert has_exactly_one_solution(four_grid)
    assert find_one_solution(four_grid) == tuple(sorted(four_queens))


def test_solver_does_not_touch_the_grid(four_grid):
    before = four_grid.copy()
    has_exactly_one_solution(four_grid)
    assert four_grid == before


@pytest.mark.parametrize("width, total", [(4, 2), (5, 14), (6, 90)])
def test_column_regions_count_every_skeleton(width, total):
    grid = column_grid(width)
    assert count_solutions(grid, limit=1000) == total
    assert not has_exactly_one_solution(grid)


def test_count_stops_at_limit():
    assert count_solutions(column_grid(7), limit=2) == 2


def test_single_region_has_no_solution():
    grid = Grid(5, fill=0)
    assert count_solutions(grid) == 0
    assert find_one_solution(grid) is None
    assert not has_exactly_one_solution(grid)


def test_invalid_queens(four_grid):
    # all three sit in region 0; (0, 0) and (1, 0) also share a column
    queens = {(0, 0), (1, 0), (2, 1)}
    assert invalid_queens(queens, four_grid) == {(0, 0), (1, 0), (2, 1)}
    assert invalid_queens({(0, 2), (3, 1)}, four_grid) == set()


def test_is_solved(four_grid, four_queens):
    assert is_solved(four_queens, four_grid)
    assert not is_solved(four_queens[:3], four_grid)
    assert not is_solved([(1, 0), (3, 1), (0, 2), (2, 2)], four_grid)
