"""Depth-first and breadth-first searches from the start cell to the destination."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

from mazewalk.maze import (
    DEFAULT_DIRECTIONS,
    DEST,
    PASSED,
    PATH,
    START,
    Direction,
    Grid,
    Position,
    find_start,
    in_range,
)


@dataclass
class SearchResult:
    """The marked copy of the grid, the cells in visiting order and the exit."""

    grid: Grid
    visits: list[Position] = field(default_factory=list)
    exit: Position | None = None

    @property
    def found(self) -> bool:
        return self.exit is not None


def _copy_grid(grid: Sequence[Sequence[str]]) -> Grid:
    copy = [list(row) for row in grid]
    if copy and any(len(row) != len(copy[0]) for row in copy):
        raise ValueError("maze rows must all have the same length")
    return copy


def _explore(
    grid: Sequence[Sequence[str]],
    directions: Sequence[Direction],
    last_in_first_out: bool,
) -> SearchResult:
    marked = _copy_grid(grid)
    start = find_start(marked)
    if start is None:
        return SearchResult(marked)

    rows = len(marked)
    cols = len(marked[0])
    pending: deque[Position] = deque([start])
    take = pending.pop if last_in_first_out else pending.popleft
    result = SearchResult(marked)

    while pending:
        pos = take()
        result.visits.append(pos)
        cell = marked[pos.y][pos.x]
        if cell == DEST:
            result.exit = pos
            break
        if cell == PASSED:
            continue
        marked[pos.y][pos.x] = PASSED
        for direction in directions:
            nxt = pos.step(direction)
            if in_range(nxt, rows, cols) and marked[nxt.y][nxt.x] in (PATH, DEST):
                pending.append(nxt)

    marked[start.y][start.x] = START
    return result


def dfs(
    grid: Sequence[Sequence[str]],
    directions: Sequence[Direction] = DEFAULT_DIRECTIONS,
) -> SearchResult:
    """Search depth-first; neighbours are pushed in the given order."""
    return _explore(grid, directions, last_in_first_out=True)


def bfs(
    grid: Sequence[Sequence[str]],
    directions: Sequence[Direction] = DEFAULT_DIRECTIONS,
) -> SearchResult:
    """Search breadth-first; neighbours are queued in the given order."""
    return _explore(grid, directions, last_in_first_out=False)