"""Command line that answers batches of escape, knight and cabbage puzzles from stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from algodrills.escape import escape_time
from algodrills.grids import count_patches
from algodrills.jumps import knight_moves


class _Reader:
    """Hands out whitespace-separated words of the input one at a time."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected a number, got {word!r}") from None


def _fire(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.number()):
        width, height = reader.number(), reader.number()
        grid = [reader.word() for _ in range(height)]
        if any(len(row) != width for row in grid):
            raise ValueError(f"grid rows must be {width} cells wide")
        result = escape_time(grid, "@", "*")
        yield "IMPOSSIBLE" if result is None else str(result)


def _knight(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.number()):
        size = reader.number()
        start = (reader.number(), reader.number())
        target = (reader.number(), reader.number())
        moves = knight_moves(size, start, target)
        if moves is not None:
            yield str(moves)


def _cabbage(reader: _Reader) -> Iterator[str]:
    for _ in range(reader.number()):
        width, height, count = reader.number(), reader.number(), reader.number()
        cabbages = [(reader.number(), reader.number()) for _ in range(count)]
        yield str(count_patches(width, height, cabbages))


_SOLVERS = {
    "fire": (_fire, "escape a burning building ('@' person, '*' fire, '#' wall)"),
    "knight": (_knight, "fewest knight moves between two squares"),
    "cabbage": (_cabbage, "count connected cabbage patches"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a batch of puzzles of the chosen kind from stdin and print one answer per line."""
    parser = argparse.ArgumentParser(prog="algodrills")
    commands = parser.add_subparsers(dest="puzzle", required=True)
    for name, (_, help_text) in _SOLVERS.items():
        commands.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    solve = _SOLVERS[args.puzzle][0]
    try:
        answers = list(solve(_Reader(sys.stdin.read())))
    except ValueError as exc:
        parser.error(str(exc))
    for answer in answers:
        print(answer)
    return 0