"""Days for ripeness to spread through boxes of tomatoes, in two and three dimensions."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

EMPTY = -1
UNRIPE = 0
RIPE = 1

_OFFSETS_2D = ((1, 0), (0, 1), (-1, 0), (0, -1))
_OFFSETS_3D = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (-1, 0, 0),
    (0, -1, 0),
    (0, 0, -1),
)


def _spread(cells: dict[tuple[int, ...], int], offsets: Sequence[tuple[int, ...]]) -> int:
    dist = {pos: 0 for pos, value in cells.items() if value == RIPE}
    queue = deque(dist)
    while queue:
        cur = queue.popleft()
        for offset in offsets:
            nxt = tuple(a + b for a, b in zip(cur, offset))
            if cells.get(nxt, EMPTY) == EMPTY or nxt in dist:
                continue
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    if any(value == UNRIPE and pos not in dist for pos, value in cells.items()):
        return -1
    return max(dist.values(), default=0)


def ripen_days(grid: Sequence[Sequence[int]]) -> int:
    """Return days until every tomato ripens, or -1 if some never will.

    Cells hold 1 (ripe), 0 (unripe) or -1 (empty).
    """
    cells = {
        (r, c): value for r, row in enumerate(grid) for c, value in enumerate(row)
    }
    return _spread(cells, _OFFSETS_2D)


def ripen_days_3d(stack: Sequence[Sequence[Sequence[int]]]) -> int:
    """Like :func:`ripen_days` for a stack of layers, spreading up and down as well."""
    cells = {
        (h, r, c): value
        for h, layer in enumerate(stack)
        for r, row in enumerate(layer)
        for c, value in enumerate(row)
    }
    return _spread(cells, _OFFSETS_3D)