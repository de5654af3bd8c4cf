"""Escaping a maze before a spreading fire reaches you."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

WALL = "#"

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))

Cell = tuple[int, int]


def _starts(grid: Sequence[str], mark: str) -> dict[Cell, int]:
    return {
        (r, c): 0
        for r, row in enumerate(grid)
        for c, ch in enumerate(row)
        if ch == mark
    }


def escape_time(grid: Sequence[str], person: str = "J", fire: str = "F") -> int | None:
    """Return the minutes a person needs to leave the grid ahead of the fire.

    Each minute the person and the fire move one cell up, down, left or right;
    neither passes a wall (``#``). The person may not enter a cell the fire
    reaches at the same time or earlier. Stepping off any edge is an escape.
    Returns None when no escape is possible.
    """
    if person == fire:
        raise ValueError("person and fire must use different marks")
    if WALL in (person, fire):
        raise ValueError(f"{WALL!r} is reserved for walls")
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")

    def inside(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < cols

    fire_time = _starts(grid, fire)
    queue = deque(fire_time)
    while queue:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            if not inside(*nxt) or grid[nxt[0]][nxt[1]] == WALL or nxt in fire_time:
                continue
            fire_time[nxt] = fire_time[(r, c)] + 1
            queue.append(nxt)

    person_time = _starts(grid, person)
    queue = deque(person_time)
    while queue:
        r, c = queue.popleft()
        arrival = person_time[(r, c)] + 1
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            if not inside(*nxt):
                return arrival
            if grid[nxt[0]][nxt[1]] == WALL or nxt in person_time:
                continue
            if nxt in fire_time and arrival >= fire_time[nxt]:
                continue
            person_time[nxt] = arrival
            queue.append(nxt)
    return None