"""Recursion and breadth-first search exercises, with a command line for batch puzzles."""

__version__ = "0.1.0"

__all__ = [
    "recursion",
    "grids",
    "spread",
    "jumps",
    "escape",
    "colors",
    "walls",
    "cli",
]