"""Counting colour regions as seen with normal and red-green colour-blind vision."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Sequence
from typing import NamedTuple

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))

BLUE = "B"


class ColorRegions(NamedTuple):
    """Region counts for normal and colour-blind viewers."""

    normal: int
    color_blind: int


def _count(grid: Sequence[str], key: Callable[[str], Hashable]) -> int:
    rows = len(grid)
    seen: set[tuple[int, int]] = set()
    regions = 0
    for r, row in enumerate(grid):
        for c in range(len(row)):
            if (r, c) in seen:
                continue
            regions += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                colour = key(grid[cr][cc])
                for dr, dc in _STEPS:
                    nr, nc = cr + dr, cc + dc
                    if not (0 <= nr < rows and 0 <= nc < len(grid[nr])):
                        continue
                    if (nr, nc) in seen or key(grid[nr][nc]) != colour:
                        continue
                    seen.add((nr, nc))
                    queue.append((nr, nc))
    return regions


def count_color_regions(grid: Sequence[str]) -> ColorRegions:
    """Count same-colour regions; a colour-blind viewer cannot tell red from green."""
    cols = len(grid[0]) if grid else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return ColorRegions(
        normal=_count(grid, lambda ch: ch),
        color_blind=_count(grid, lambda ch: ch == BLUE),
    )