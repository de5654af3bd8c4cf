# algodrills

Classic algorithm exercises as plain Python functions: recursive
divide-and-conquer problems and breadth-first searches over grids, a number
line, a chessboard and 3-D stacks. There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

### Recursion: `algodrills.recursion`

| Function | Result |
| --- | --- |
| `countdown(n)` | List of the numbers from `n` down to 1. |
| `sum_to(n)` | `1 + 2 + ... + n`. |
| `z_order(n, row, col)` | Visit index of cell `(row, col)` when a `2**n × 2**n` square is walked in Z order. |
| `hanoi(n, source=1, via=2, target=3)` | List of `(from, to)` peg moves that carry `n` discs from `source` to `target`. |
| `mod_pow(base, exponent, modulus)` | `base ** exponent % modulus` by repeated squaring; an exponent of 0 always gives 1. |
| `count_squares(grid)` | Splits a square 0/1 grid (side a power of two) into quadrants until each piece is one colour; returns `SquareCount(white, blue)`, where 0 is white and 1 is blue. |

Negative sizes or exponents, a non-positive modulus and cells outside the
square raise `ValueError`.

```python
from algodrills.recursion import sum_to, z_order, mod_pow, hanoi

sum_to(100)          # 5050
z_order(2, 3, 1)     # 11
mod_pow(10, 11, 12)  # 4
len(hanoi(3))        # 7
```

### Grid searches: `algodrills.grids`

| Function | Result |
| --- | --- |
| `bfs_order(board, start=(0, 0))` | Cells in the order a breadth-first search from `start` reaches them through cells equal to 1. |
| `count_regions(grid)` | `RegionStats(count, largest)`: number of connected non-zero regions and the area of the largest (0 if none). |
| `shortest_path(maze)` | Number of cells on the shortest path from the top-left to the bottom-right through open cells (`1` or `"1"`); 0 when the exit cannot be reached. |
| `count_patches(width, height, cabbages)` | Number of connected groups among cabbages planted at `(x, y)` in a `width × height` field. |

### Spreading: `algodrills.spread`

Cells hold `1` (ripe), `0` (unripe) or `-1` (empty).

| Function | Result |
| --- | --- |
| `ripen_days(grid)` | Days until every tomato in a 2-D box is ripe, or `-1` if some never ripen. |
| `ripen_days_3d(stack)` | The same for a stack of layers, where ripeness also spreads up and down. |

### Jumps: `algodrills.jumps`

| Function | Result |
| --- | --- |
| `hide_and_seek(start, target)` | Fewest steps of `x+1`, `x-1` or `2x` from `start` to `target`; both must lie in `0 .. LIMIT - 1` (`LIMIT` is 200005). |
| `knight_moves(size, start, target)` | Fewest knight moves between two squares of a `size × size` board, or `None` if unreachable. |

```python
from algodrills.jumps import hide_and_seek, knight_moves

hide_and_seek(5, 17)             # 4
knight_moves(8, (0, 0), (7, 0))  # 5
```

### Escapes, colours and walls

- `algodrills.escape.escape_time(grid, person="J", fire="F")` takes a list
  of strings with `#` for walls. Each minute the person and the fire move one
  cell; the person may not enter a cell the fire reaches at the same time or
  earlier, and stepping off any edge is an escape. Returns the minutes needed,
  or `None` when there is no way out.
- `algodrills.colors.count_color_regions(grid)` takes rows of `R`, `G` and `B`
  and returns `ColorRegions(normal, color_blind)`: the number of same-colour
  regions, and the number when red and green cannot be told apart.
- `algodrills.walls.shortest_path_breaking_wall(maze)` returns the number of
  cells on the shortest top-left to bottom-right path through a 0/1 maze
  (1 is a wall) when at most one wall may be broken, or `-1` if unreachable.

## Command line

The `algodrills` command reads a batch of puzzles of one kind from standard
input and prints one answer per line:

```
algodrills fire < input.txt
algodrills knight < input.txt
algodrills cabbage < input.txt
```

Input is whitespace-separated and starts with the number of cases `T`.

- `fire`: each case is `w h` followed by `h` rows of `w` characters, with `@`
  the person, `*` fire, `#` walls. Prints the escape time or `IMPOSSIBLE`.
- `knight`: each case is the board size, then the start `x y`, then the
  target `x y`. Prints the fewest moves; an unreachable target prints nothing.
- `cabbage`: each case is `M N K` (field width, height and cabbage count),
  then `K` lines of `x y`. Prints the number of patches.

Malformed input makes the command report the problem and exit with status 2.

## What it does not do

Only the three puzzle kinds above have a command; every other exercise is
available as a library function only.