"""Fixed-size square board."""

from __future__ import annotations

from collections.abc import Iterator

from .state import Position


class Grid:
    """An N x N coordinate space. Holds nothing but its size."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("Grid size must be at least 1.")
        self.size = size

    def is_valid(self, pos: Position) -> bool:
        """Check whether a position lies on the board."""
        return 0 <= pos.row < self.size and 0 <= pos.col < self.size

    def random_position(self, rng) -> Position:
        """Uniform sample over all cells using ``rng.randrange``."""
        return Position(rng.randrange(self.size), rng.randrange(self.size))

    def cells(self) -> Iterator[Position]:
        """Every position, row by row."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def __repr__(self) -> str:
        return f"Grid({self.size})"
