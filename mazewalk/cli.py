"""Command line: show a maze, then its depth-first and breadth-first searches."""

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
    Direction,
    parse_directions,
    parse_maze,
    render_maze,
)
from mazewalk.search import SearchResult, bfs, dfs

_LEGEND = (
    f"starting point={START}\n"
    f"wall={WALL}\n"
    f"path={PATH}\n"
    f"destination={DEST}\n"
    f"passed={PASSED}\n"
)


def _trace(name: str, result: SearchResult) -> str:
    # A maze without a start cell is never searched, so nothing is traced.
    if not result.visits:
        return ""
    steps = "".join(f"({pos.x}, {pos.y})\n" for pos in result.visits)
    return f"\n====={name}=====\n{steps}"


def run(
    text: str,
    directions: Sequence[Direction] = DEFAULT_DIRECTIONS,
    color: bool = True,
) -> str:
    """Parse a maze and return the full report of both searches."""
    grid = parse_maze(text)
    order = tuple(directions)
    parts = [
        _LEGEND,
        f"searching order: {'->'.join(d.name for d in order)}\n\n",
        "=====The Maze=====\n",
        render_maze(grid, color),
    ]
    for name, search in (("DFS", dfs), ("BFS", bfs)):
        result = search(grid, order)
        parts.append(_trace(name, result))
        parts.append(f"\n=====After {name}=====\n")
        parts.append(render_maze(result.grid, color))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a maze from standard input and print the search report."""
    parser = argparse.ArgumentParser(
        prog="mazewalk",
        description="Solve a maze read from standard input with DFS and BFS.",
    )
    parser.add_argument(
        "-d",
        "--order",
        type=parse_directions,
        default=DEFAULT_DIRECTIONS,
        help="neighbour order, e.g. 'UP->DOWN->LEFT->RIGHT'",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="do not highlight cells with terminal colours",
    )
    args = parser.parse_args(argv)
    try:
        report = run(sys.stdin.read(), args.order, args.color)
    except ValueError as exc:
        print(f"mazewalk: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())