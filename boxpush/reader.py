"""Reading and representing the warehouse map and the robot's move list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

ROBOT = "@"
WALL = "#"
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"
EMPTY = "."

DEFAULT_GRID_PATH = "./2d_input.txt"
DEFAULT_MOVES_PATH = "./1d_input.txt"

_log = logging.getLogger(__name__)

_WIDE_TILES = {
    WALL: WALL + WALL,
    BOX: BOX_LEFT + BOX_RIGHT,
    EMPTY: EMPTY + EMPTY,
    ROBOT: ROBOT + EMPTY,
}


class Direction(Enum):
    """A direction the robot can be told to move in."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    def delta(self) -> tuple[int, int]:
        """Return the (dx, dy) step for this direction; y grows downwards."""
        return _DELTAS[self]

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        """Return the direction written as ``char``."""
        try:
            return cls(char)
        except ValueError:
            raise ValueError(f"not a move character: {char!r}") from None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
}


@dataclass
class Location:
    """A column (x) and row (y) on the grid."""

    x: int = 0
    y: int = 0


@dataclass
class Grid:
    """A rectangular-ish map of single-character tiles, stored row by row."""

    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Build a grid with one row per newline-separated line of ``text``."""
        return cls([list(line) for line in text.split("\n")])

    def render(self) -> str:
        """Return the grid as text, each tile preceded by a space."""
        return "".join("".join(f" {tile}" for tile in row) + "\n" for row in self.rows)

    def locate(self, char: str) -> Location:
        """Return where ``char`` is found.

        The last row holding the character wins, taking its first occurrence in
        that row. A character that is absent yields ``Location(0, 0)``.
        """
        found = Location(0, 0)
        for y, row in enumerate(self.rows):
            if char in row:
                found = Location(row.index(char), y)
        return found

    def widened(self) -> "Grid":
        """Return a copy with every tile doubled in width.

        Boxes become ``[]``, the robot gets an empty tile to its right, and any
        character that is not a known tile is dropped.
        """
        return Grid(
            [
                [tile for char in row for tile in _WIDE_TILES.get(char, "")]
                for row in self.rows
            ]
        )

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        return self.rows[y][x]


def parse_moves(text: str) -> list[Direction]:
    """Return the moves written in ``text``, skipping any other character."""
    moves = []
    for char in text:
        try:
            moves.append(Direction.from_char(char))
        except ValueError:
            _log.warning("Error in sequence")
    return moves


def render_moves(moves: Iterable[Direction]) -> str:
    """Return the moves written back as their characters."""
    return "".join(move.value for move in moves)


def read_grid(path: str | Path = DEFAULT_GRID_PATH) -> Grid:
    """Read a grid from the file at ``path``."""
    return Grid.from_text(Path(path).read_text())


def read_moves(path: str | Path = DEFAULT_MOVES_PATH) -> list[Direction]:
    """Read a move list from the file at ``path``."""
    return parse_moves(Path(path).read_text())