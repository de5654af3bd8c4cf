"""Shortest jump counts on a number line and on a chessboard."""

from __future__ import annotations

from collections import deque

LIMIT = 200_005
"""Positions on the number line range over ``0 .. LIMIT - 1``."""

_KNIGHT = ((-1, -2), (-2, -1), (-1, 2), (-2, 1), (1, -2), (2, -1), (1, 2), (2, 1))


def hide_and_seek(start: int, target: int) -> int:
    """Return the fewest steps (x+1, x-1 or 2x) that take ``start`` to ``target``."""
    for name, value in (("start", start), ("target", target)):
        if not 0 <= value < LIMIT:
            raise ValueError(f"{name} must lie in 0..{LIMIT - 1}")
    if start == target:
        return 0
    dist = {start: 0}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt in (cur + 1, cur - 1, cur * 2):
            if not 0 <= nxt < LIMIT or nxt in dist:
                continue
            if nxt == target:
                return dist[cur] + 1
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    return 0


def knight_moves(size: int, start: tuple[int, int], target: tuple[int, int]) -> int | None:
    """Return the fewest knight moves from ``start`` to ``target`` on a size x size board.

    Returns None when the target cannot be reached.
    """
    for name, (x, y) in (("start", start), ("target", target)):
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"{name} lies outside the board")
    start, target = tuple(start), tuple(target)
    if start == target:
        return 0
    dist = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _KNIGHT:
            nxt = (x + dx, y + dy)
            if not (0 <= nxt[0] < size and 0 <= nxt[1] < size) or nxt in dist:
                continue
            if nxt == target:
                return dist[(x, y)] + 1
            dist[nxt] = dist[(x, y)] + 1
            queue.append(nxt)
    return None