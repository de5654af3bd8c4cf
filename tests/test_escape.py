import pytest

from algodrills.escape import escape_time

SAMPLE = ["####", "#JF#", "#..#", "#..#"]


def _mirror(grid):
    return [row[::-1] for row in grid]


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def test_sample_grid():
    assert escape_time(SAMPLE) == 3


def test_mirrored_and_transposed_grids_agree():
    expected = escape_time(SAMPLE)
    assert escape_time(_mirror(SAMPLE)) == expected
    assert escape_time(_transpose(SAMPLE)) == expected
    assert escape_time(SAMPLE[::-1]) == expected


def test_custom_marks():
    grid = ["####", "#*@.", "####"]
    assert escape_time(grid, "@", "*") == 2


def test_custom_marks_match_default_marks():
    grid = ["###.###", "#*#.#*#", "#.....#", "#.....#", "#..@..#", "#######"]
    renamed = [row.replace("@", "J").replace("*", "F") for row in grid]
    assert escape_time(grid, "@", "*") == escape_time(renamed)


def test_fire_never_makes_escape_faster():
    without_fire = [row.replace("F", ".") for row in SAMPLE]
    assert escape_time(without_fire) <= escape_time(SAMPLE)


def test_enclosed_person_cannot_escape():
    assert escape_time(["###", "#@#", "###"], "@", "*") is None


def test_fire_on_only_exit_blocks_escape():
    open_exit = ["#.#", "#J#", "###"]
    burning_exit = ["#F#", "#J#", "###"]
    assert escape_time(open_exit) is not None
    assert escape_time(burning_exit) is None


def test_no_person_means_no_escape():
    assert escape_time(["...", ".F.", "..."]) is None


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError):
        escape_time(["J..", ".."])


def test_same_marks_are_rejected():
    with pytest.raises(ValueError):
        escape_time(["J"], "J", "J")


def test_wall_mark_is_reserved():
    with pytest.raises(ValueError):
        escape_time(["J"], "#", "F")