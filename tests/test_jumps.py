import pytest

from algodrills.jumps import LIMIT, hide_and_seek, knight_moves


def test_hide_and_seek_example():
    assert hide_and_seek(5, 17) == 4


def test_hide_and_seek_same_position():
    assert hide_and_seek(42, 42) == 0


@pytest.mark.parametrize("n", [1, 7, 50000])
def test_hide_and_seek_single_steps(n):
    assert hide_and_seek(n, n + 1) == 1
    assert hide_and_seek(n, 2 * n) == 1


@pytest.mark.parametrize("start,target", [(10, 3), (100, 0), (5, 4)])
def test_hide_and_seek_backwards_walks(start, target):
    assert hide_and_seek(start, target) == start - target


def test_hide_and_seek_rejects_out_of_range():
    with pytest.raises(ValueError):
        hide_and_seek(0, LIMIT)


def test_knight_moves_examples():
    assert knight_moves(8, (0, 0), (7, 0)) == 5
    assert knight_moves(100, (0, 0), (30, 50)) == 28
    assert knight_moves(10, (1, 1), (1, 1)) == 0


@pytest.mark.parametrize("offset", [(1, 2), (2, 1), (2, -1)])
def test_knight_moves_single_hop(offset):
    start = (3, 3)
    target = (start[0] + offset[0], start[1] + offset[1])
    assert knight_moves(8, start, target) == 1


def test_knight_moves_symmetric():
    assert knight_moves(12, (0, 5), (11, 2)) == knight_moves(12, (11, 2), (0, 5))


def test_knight_moves_unreachable_is_none():
    assert knight_moves(2, (0, 0), (1, 1)) is None


def test_knight_moves_rejects_outside():
    with pytest.raises(ValueError):
        knight_moves(4, (0, 0), (4, 4))