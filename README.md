# mazewalk

mazewalk reads a maze drawn as a grid of characters. It searches from the
start cell towards the destination, first depth-first and then breadth-first.
For each search it prints every cell it visited, in order, and then prints the
maze with the visited cells marked.

## Maze format

The input starts with two integers: the number of rows and the number of
columns. The cells come after them. Whitespace between cells is ignored, and
anything after the last cell that is needed is ignored as well. An error is
raised if a count is negative or if there are too few cells.

| Character | Meaning            |
|-----------|--------------------|
| `O`       | starting point     |
| `x`       | wall               |
| `o`       | open path          |
| `X`       | destination        |
| `@`       | visited (output)   |

A search can move into `o` and `X` cells only. When a maze has more than one
`O`, the search starts from the first one in row order.

Example input:

```
3 4
Ooxx
xoox
xxoX
```

## Installation

```
pip install .
```

## Command line

```
mazewalk < maze.txt
```

This reads the maze from standard input and prints the following:

- a legend of the cell symbols and the neighbour order being used;
- the maze itself;
- for DFS and then for BFS, the visited cells as `(x, y)` lines, then the maze
  with the visited cells marked `@`. The start cell keeps its `O`.

If the maze has no start cell, nothing is searched and no cells are listed.
The maze is printed unchanged after each heading.

Options:

- `-d`, `--order`: the order in which neighbours are added, for example
  `UP->DOWN->LEFT->RIGHT` (the default). Give one to four of the names UP,
  DOWN, LEFT and RIGHT. They may be separated by arrows, commas or braces,
  and upper or lower case both work.
- `--no-color`: print without terminal colours. By default visited cells are
  shown on a magenta background, and the start and destination cells on a
  cyan background.

```
mazewalk-classic < maze.txt
```

This runs only the depth-first search. It prints without colour and lists the
visited cells as `(row, column)`. It marks the start cell `@` along with the
other visited cells. If the destination cannot be reached, it prints
`No solution` in place of the marked maze.

When the input is malformed, both commands print an error message to standard
error and exit with status 1.

## Library use

```python
from mazewalk.maze import parse_maze, render_maze, parse_directions
from mazewalk.search import dfs, bfs

grid = parse_maze("3 4\nOoxx\nxoox\nxxoX\n")
result = bfs(grid, parse_directions("RIGHT->DOWN"))
print(result.found, result.exit)
print(render_maze(result.grid, color=False))
```

- `mazewalk.maze` contains the following:
  - `Position(x, y)`, where `x` is the column and `y` is the row;
  - `Direction`, which has the members `UP`, `DOWN`, `LEFT` and `RIGHT`;
  - `parse_maze` and `read_maze`, which read a maze;
  - `find_start`, which locates the start cell;
  - `in_range`, which checks that a position lies inside the grid;
  - `render_maze`, which turns a grid back into text;
  - `parse_directions`, which reads a neighbour order.
- `mazewalk.search.dfs` and `mazewalk.search.bfs` never change the grid you
  pass in. Each returns a `SearchResult` with these fields:
  - `grid`: the marked copy of the maze;
  - `visits`: every position taken from the stack or queue, in order;
  - `exit`: the destination position, or `None`;
  - `found`: whether the destination was reached.
- `mazewalk.classic.solve_in_place` runs the depth-first search and marks the
  grid you pass in directly.
- `mazewalk.cli.run` and `mazewalk.classic.run` return the full report for a
  maze as a string.

## What it does not do

The marked maze shows every cell a search visited. It does not show the route
from the start to the destination, and there is no function that rebuilds
that route.

## Development

```
pip install -e .[test]
pytest
```