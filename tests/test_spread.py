import pytest

from algodrills.spread import ripen_days, ripen_days_3d


def test_all_ripe_takes_no_days():
    assert ripen_days([[1, 1], [1, 1]]) == 0


def test_unreachable_unripe_gives_minus_one():
    assert ripen_days([[1, -1, 0]]) == -1


@pytest.mark.parametrize("length", [2, 5, 9])
def test_single_row_spreads_one_per_day(length):
    row = [1] + [0] * (length - 1)
    assert ripen_days([row]) == length - 1


def test_empty_cells_do_not_count():
    assert ripen_days([[1, -1], [-1, -1]]) == 0


def test_spreads_from_both_ends():
    assert ripen_days([[1, 0, 0, 0, 1]]) == ripen_days([[1, 0, 0]])


def test_single_layer_matches_flat_version():
    grid = [[0, 0, 0, 0], [0, -1, 0, 0], [0, 0, 0, 1]]
    assert ripen_days_3d([grid]) == ripen_days(grid)


@pytest.mark.parametrize("height", [1, 3, 6])
def test_vertical_column_spreads_by_layer(height):
    stack = [[[1]]] + [[[0]] for _ in range(height - 1)]
    assert ripen_days_3d(stack) == height - 1


def test_3d_unreachable_gives_minus_one():
    stack = [[[1, -1, 0]], [[-1, -1, -1]]]
    assert ripen_days_3d(stack) == -1