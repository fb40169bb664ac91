from __future__ import annotations

import enum
from typing import NamedTuple

import numpy as np


class Heading(enum.Enum):
    """Cardinal directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Heading:
        return _OPPOSITES[self]

    @property
    def orthogonals(self) -> tuple[Heading, Heading]:
        return _ORTHOGONALS[self]

    @classmethod
    def between(cls, src: Position, dst: Position) -> Heading:
        """Heading that takes ``src`` one cell onto ``dst``."""
        return cls((dst.row - src.row, dst.col - src.col))


_OPPOSITES = {
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
}

# Growth tries these in order after going straight.
_ORTHOGONALS = {
    Heading.UP: (Heading.RIGHT, Heading.LEFT),
    Heading.DOWN: (Heading.RIGHT, Heading.LEFT),
    Heading.LEFT: (Heading.DOWN, Heading.UP),
    Heading.RIGHT: (Heading.DOWN, Heading.UP),
}


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Position(NamedTuple):
    row: int
    col: int

    def moved(self, heading: Heading) -> Position:
        return Position(*add_vectors(self, heading.value))


class CellType(enum.IntEnum):
    """Integer codes stored in a snapshot board."""

    EMPTY = 0
    FOOD = 1
    BODY = 2
    HEAD = 3


class Snapshot(NamedTuple):
    """Read-only copy of the board handed to the presentation side."""

    size: int
    cells: np.ndarray  # (size, size) int8 CellType codes, write flag cleared
    head: Position
    food: Position | None
    score: int
    over: bool

    def at(self, pos: Position) -> CellType:
        return CellType(int(self.cells[pos.row, pos.col]))
