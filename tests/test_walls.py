import random

import pytest

from algodrills.grids import shortest_path
from algodrills.walls import shortest_path_breaking_wall

SAMPLE = ["0100", "1110", "1000", "0000", "0111", "0000"]


def _invert(maze):
    return [[1 - int(v) for v in row] for row in maze]


def _random_mazes(count, seed=7):
    rng = random.Random(seed)
    for _ in range(count):
        rows, cols = rng.randint(1, 5), rng.randint(1, 5)
        maze = [[int(rng.random() < 0.4) for _ in range(cols)] for _ in range(rows)]
        maze[0][0] = 0
        maze[-1][-1] = 0
        yield maze


def test_sample_maze():
    assert shortest_path_breaking_wall(SAMPLE) == 15


def test_fully_walled_maze_is_unreachable():
    assert shortest_path_breaking_wall(["0111", "1111", "1111", "1110"]) == -1


def test_single_cell():
    assert shortest_path_breaking_wall([[0]]) == 1


def test_open_maze_matches_plain_search():
    maze = [[0] * 4 for _ in range(3)]
    assert shortest_path_breaking_wall(maze) == shortest_path(_invert(maze))


def test_int_and_string_cells_agree():
    as_ints = [[int(ch) for ch in row] for row in SAMPLE]
    assert shortest_path_breaking_wall(as_ints) == shortest_path_breaking_wall(SAMPLE)


def test_breaking_never_makes_path_longer():
    for maze in _random_mazes(60):
        plain = shortest_path(_invert(maze))
        result = shortest_path_breaking_wall(maze)
        if plain:
            assert 0 < result <= plain


def test_result_respects_manhattan_bound():
    for maze in _random_mazes(60, seed=11):
        result = shortest_path_breaking_wall(maze)
        if result != -1:
            assert result >= len(maze) + len(maze[0]) - 1


def test_single_wall_is_always_breakable():
    maze = ["010", "010", "010"]
    assert shortest_path(_invert(maze)) == 0
    assert shortest_path_breaking_wall(maze) == len(maze) + len(maze[0]) - 1


def test_empty_maze_is_rejected():
    with pytest.raises(ValueError):
        shortest_path_breaking_wall([])


def test_ragged_maze_is_rejected():
    with pytest.raises(ValueError):
        shortest_path_breaking_wall(["00", "0"])