"""Shortest maze path when one wall may be broken on the way."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def shortest_path_breaking_wall(maze: Sequence[Sequence[int | str]]) -> int:
    """Return the cell count of the shortest top-left to bottom-right path.

    Cells are 0 (open) or 1 (wall), as ints or digit characters. At most one
    wall may be broken along the path. Returns -1 when the exit is unreachable.
    """
    cells = [[int(value) for value in row] for row in maze]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    if rows == 0 or cols == 0:
        raise ValueError("maze must not be empty")
    if any(len(row) != cols for row in cells):
        raise ValueError("maze rows must all have the same length")

    target = (rows - 1, cols - 1)
    start = (0, 0, False)
    dist = {start: 1}
    queue = deque([start])
    while queue:
        r, c, broken = queue.popleft()
        if (r, c) == target:
            return dist[(r, c, broken)]
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if cells[nr][nc]:
                if broken:
                    continue
                nxt = (nr, nc, True)
            else:
                nxt = (nr, nc, broken)
            if nxt in dist:
                continue
            dist[nxt] = dist[(r, c, broken)] + 1
            queue.append(nxt)
    return -1