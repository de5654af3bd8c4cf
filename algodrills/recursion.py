"""Recursive drills: countdowns, sums, Z-order indexing, Hanoi, fast powers, quad squares."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import NamedTuple


class SquareCount(NamedTuple):
    """Number of uniform white and blue squares a grid splits into."""

    white: int
    blue: int


def countdown(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(range(n, 0, -1))


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(range(n + 1))


def z_order(n: int, row: int, col: int) -> int:
    """Return the visiting index of ``(row, col)`` in a Z-shaped walk of a 2**n square."""
    if n < 0:
        raise ValueError("n must not be negative")
    side = 1 << n
    if not (0 <= row < side and 0 <= col < side):
        raise ValueError(f"cell ({row}, {col}) lies outside a {side}x{side} square")
    index = 0
    for level in range(n, 0, -1):
        half = 1 << (level - 1)
        lower = row >= half
        right = col >= half
        index += half * half * (2 * lower + right)
        if lower:
            row -= half
        if right:
            col -= half
    return index


def _hanoi_moves(n: int, source: int, via: int, target: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi_moves(n - 1, source, target, via)
    yield source, target
    yield from _hanoi_moves(n - 1, via, source, target)


def hanoi(n: int, source: int = 1, via: int = 2, target: int = 3) -> list[tuple[int, int]]:
    """Return the moves, as ``(from, to)`` pegs, that carry ``n`` discs from source to target."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_hanoi_moves(n, source, via, target))


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus`` by repeated squaring.

    An exponent of zero always gives 1.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base % modulus
    half = mod_pow(base, exponent // 2, modulus)
    result = half * half % modulus
    return result * base % modulus if exponent % 2 else result


def _count(grid: Sequence[Sequence[int]], size: int, row: int, col: int) -> SquareCount:
    if size == 1:
        return SquareCount(0, 1) if grid[row][col] else SquareCount(1, 0)
    half = size // 2
    parts = [
        _count(grid, half, row + dr, col + dc)
        for dr in (0, half)
        for dc in (0, half)
    ]
    for uniform in (SquareCount(0, 1), SquareCount(1, 0)):
        if all(part == uniform for part in parts):
            return uniform
    return SquareCount(
        sum(part.white for part in parts),
        sum(part.blue for part in parts),
    )


def count_squares(grid: Sequence[Sequence[int]]) -> SquareCount:
    """Split a square grid of 0 (white) and 1 (blue) into uniform quadrants and count them."""
    size = len(grid)
    if size == 0 or size & (size - 1):
        raise ValueError("grid side must be a positive power of two")
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")
    return _count(grid, size, 0, 0)