import random

import pytest

from queensgen.errors import SearchExhaustedError
from queensgen.grid import Grid
from queensgen.placement import PartialPlacement, place_queens, place_randomly


def assert_valid_skeleton(queens, width):
    assert len(queens) == width
    assert [c for _, c in queens] == list(range(width))
    assert len({r for r, _ in queens}) == width
    for (r1, _), (r2, _) in zip(queens, queens[1:]):
        assert abs(r1 - r2) != 1


@pytest.mark.parametrize("width", range(4, 13))
def test_place_randomly_gives_valid_skeleton(width):
    queens, ok = place_randomly(width, random.Random(width))
    assert ok
    assert_valid_skeleton(queens, width)


def test_width_four_never_places_rows_one_and_two_side_by_side():
    seen = set()
    for seed in range(60):
        queens, ok = place_randomly(4, random.Random(seed))
        assert ok
        rows = [r for r, _ in queens]
        for a, b in zip(rows, rows[1:]):
            assert (a, b) not in {(1, 2), (2, 1)}
        seen.add(tuple(rows))
    # the only two 4x4 skeletons
    assert seen == {(1, 3, 0, 2), (2, 0, 3, 1)}


def test_same_seed_same_placement():
    a, _ = place_randomly(9, random.Random(42))
    b, _ = place_randomly(9, random.Random(42))
    assert a == b


@pytest.mark.parametrize("width", [0, 2, 3])
def test_infeasible_widths_report_failure(width):
    assert place_randomly(width, random.Random(0)) == ((), False)


def test_width_one_is_trivial():
    assert place_randomly(1, random.Random(0)) == (((0, 0),), True)


def test_place_queens_raises_on_exhaustion():
    with pytest.raises(SearchExhaustedError):
        place_queens(3, random.Random(0))


def test_partial_placement_rules():
    grid = Grid.from_rows([[0, 1, 1], [0, 1, 2], [0, 0, 2]])
    state = PartialPlacement(3, grid)
    state.push((0, 0))

    assert not state.can_place((0, 1))  # same row
    assert not state.can_place((1, 1))  # touching the previous queen
    assert not state.can_place((2, 1))  # label 0 already used
    assert state.can_place((2, 1), check_label=False)

    state.push((2, 1))
    assert state.depth == 2
    assert state.pop() == (2, 1)
    assert state.used_labels[0] == 1
    assert not state.is_complete()
