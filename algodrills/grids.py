"""Breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import NamedTuple

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))

Cell = tuple[int, int]


class RegionStats(NamedTuple):
    """How many regions a grid holds and the area of the largest."""

    count: int
    largest: int


def _dimensions(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in _STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def bfs_order(board: Sequence[Sequence[int]], start: Cell = (0, 0)) -> list[Cell]:
    """Return cells in the order a BFS from ``start`` reaches them through cells equal to 1."""
    rows, cols = _dimensions(board)
    if not (0 <= start[0] < rows and 0 <= start[1] < cols):
        raise ValueError(f"start {start} lies outside the board")
    seen = {start}
    queue = deque([start])
    order = []
    while queue:
        cur = queue.popleft()
        order.append(cur)
        for nxt in _neighbours(cur, rows, cols):
            if nxt in seen or board[nxt[0]][nxt[1]] != 1:
                continue
            seen.add(nxt)
            queue.append(nxt)
    return order


def _flood(cells: set[Cell], start: Cell) -> int:
    """Remove the region containing ``start`` from ``cells`` and return its area."""
    cells.discard(start)
    queue = deque([start])
    area = 0
    while queue:
        r, c = queue.popleft()
        area += 1
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            if nxt in cells:
                cells.discard(nxt)
                queue.append(nxt)
    return area


def _regions(cells: Iterable[Cell]) -> list[int]:
    remaining = set(cells)
    areas = []
    for cell in sorted(remaining):
        if cell in remaining:
            areas.append(_flood(remaining, cell))
    return areas


def count_regions(grid: Sequence[Sequence[int]]) -> RegionStats:
    """Count connected regions of non-zero cells and find the largest area."""
    _dimensions(grid)
    painted = (
        (r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value
    )
    areas = _regions(painted)
    return RegionStats(len(areas), max(areas, default=0))


def shortest_path(maze: Sequence[Sequence[int | str]]) -> int:
    """Return the cell count of the shortest path from the top-left to the bottom-right.

    Open cells are 1 (or the character ``"1"``). Returns 0 when the exit is unreachable.
    """
    cells = [[int(value) for value in row] for row in maze]
    rows, cols = _dimensions(cells)
    if rows == 0 or cols == 0:
        raise ValueError("maze must not be empty")
    dist = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        cur = queue.popleft()
        for nxt in _neighbours(cur, rows, cols):
            if cells[nxt[0]][nxt[1]] == 0 or nxt in dist:
                continue
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    return dist.get((rows - 1, cols - 1), -1) + 1


def count_patches(width: int, height: int, cabbages: Iterable[Cell]) -> int:
    """Count connected patches of cabbages planted at ``(x, y)`` in a width x height field."""
    if width < 0 or height < 0:
        raise ValueError("field size must not be negative")
    planted = set()
    for x, y in cabbages:
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"cabbage ({x}, {y}) lies outside the field")
        planted.add((x, y))
    return len(_regions(planted))