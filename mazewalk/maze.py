"""Maze grids: cell symbols, positions, directions, parsing and rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, TextIO

START = "O"
WALL = "x"
PATH = "o"
DEST = "X"
PASSED = "@"

MAGENTA = "\x1b[45m"
CYAN = "\x1b[46m"
RESET = "\x1b[0m"

Grid = list[list[str]]

_HEADER = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)")
_WORD = re.compile(r"[A-Za-z]+")
_MAX_DIRECTIONS = 4


class Direction(Enum):
    """A unit step on the grid as (dx, dy); y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


DEFAULT_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True)
class Position:
    """A cell of the grid: x is the column, y the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring position one step in the given direction."""
        return Position(self.x + direction.dx, self.y + direction.dy)


def parse_maze(text: str) -> Grid:
    """Parse a maze: a row and a column count, then that many non-blank cells.

    Whitespace between cells is ignored; anything after the last needed cell
    is ignored too.
    """
    header = _HEADER.match(text)
    if header is None:
        raise ValueError("maze must start with its row and column counts")
    rows, cols = int(header.group(1)), int(header.group(2))
    if rows < 0 or cols < 0:
        raise ValueError(f"maze size must not be negative: {rows} x {cols}")
    cells = [ch for ch in text[header.end():] if not ch.isspace()]
    needed = rows * cols
    if len(cells) < needed:
        raise ValueError(
            f"maze of {rows} x {cols} needs {needed} cells, found {len(cells)}"
        )
    return [cells[row * cols:(row + 1) * cols] for row in range(rows)]


def read_maze(stream: TextIO) -> Grid:
    """Read a whole maze from a text stream."""
    return parse_maze(stream.read())


def find_start(grid: Sequence[Sequence[str]]) -> Position | None:
    """Return the first start cell in row-major order, or None."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == START:
                return Position(x, y)
    return None


def in_range(pos: Position, rows: int, cols: int) -> bool:
    """Tell whether a position lies inside a grid of the given size."""
    return 0 <= pos.x < cols and 0 <= pos.y < rows


def _paint(cell: str) -> str:
    if cell == PASSED:
        return f"{MAGENTA}{cell}{RESET}"
    if cell in (START, DEST):
        return f"{CYAN}{cell}{RESET}"
    return cell


def render_maze(grid: Iterable[Iterable[str]], color: bool = True) -> str:
    """Render the grid one row per line, optionally highlighting cells."""
    paint = _paint if color else str
    return "".join("".join(paint(cell) for cell in row) + "\n" for row in grid)


def parse_directions(spec: str) -> tuple[Direction, ...]:
    """Parse a search order such as 'UP->DOWN->LEFT->RIGHT'.

    Braces, commas and arrows between the names are accepted; between one
    and four direction names must be given.
    """
    names = _WORD.findall(spec)
    if not names:
        raise ValueError("no directions given")
    if len(names) > _MAX_DIRECTIONS:
        raise ValueError(
            f"at most {_MAX_DIRECTIONS} directions may be given, got {len(names)}"
        )
    try:
        return tuple(Direction[name.upper()] for name in names)
    except KeyError as exc:
        raise ValueError(f"unknown direction: {exc.args[0]}") from None