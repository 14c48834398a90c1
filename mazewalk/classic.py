"""The plain depth-first solver: marks the maze in place and prints without colour."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from mazewalk.maze import (
    DEFAULT_DIRECTIONS,
    DEST,
    PASSED,
    PATH,
    START,
    WALL,
    Grid,
    Position,
    find_start,
    in_range,
    parse_maze,
    render_maze,
)
from mazewalk.search import SearchResult

_LEGEND = (
    f"starting point={START}\n"
    f"wall={WALL}\n"
    f"path={PATH}\n"
    f"destination={DEST}\n"
    f"passed={PASSED}\n\n"
)


def solve_in_place(grid: Grid) -> SearchResult:
    """Search depth-first, marking passed cells (the start too) in the grid itself."""
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    result = SearchResult(grid)
    start = find_start(grid)
    stack: list[Position] = [] if start is None else [start]

    while stack:
        pos = stack.pop()
        result.visits.append(pos)
        cell = grid[pos.y][pos.x]
        if cell == DEST:
            result.exit = pos
            break
        if cell == PASSED:
            continue
        grid[pos.y][pos.x] = PASSED
        for direction in DEFAULT_DIRECTIONS:
            nxt = pos.step(direction)
            if in_range(nxt, rows, cols) and grid[nxt.y][nxt.x] in (PATH, DEST):
                stack.append(nxt)
    return result


def run(text: str) -> str:
    """Parse a maze and return the report of the in-place depth-first search."""
    grid = parse_maze(text)
    parts = [_LEGEND, "=====The Maze=====\n", render_maze(grid, color=False)]
    result = solve_in_place(grid)
    parts.append("\n=====DFS=====\n")
    parts.extend(f"({pos.y}, {pos.x})\n" for pos in result.visits)
    parts.append("\n=====After DFS=====\n")
    if result.found:
        parts.append(render_maze(grid, color=False))
    else:
        parts.append("No solution\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a maze from standard input and print the depth-first report."""
    parser = argparse.ArgumentParser(
        prog="mazewalk-classic",
        description="Solve a maze read from standard input depth-first.",
    )
    parser.parse_args(argv)
    try:
        report = run(sys.stdin.read())
    except ValueError as exc:
        print(f"mazewalk-classic: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())