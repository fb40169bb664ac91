from __future__ import annotations

import logging
import random

import numpy as np

from . import config, food
from .body import Body
from .grid import Grid
from .state import CellType, Heading, Position, Snapshot

logger = logging.getLogger(__name__)


class Simulation:
    """One round of snake: a grid, a body, a food cell and the ``over`` flag.

    ``tick`` applies the rules once. Once ``over`` is set nothing moves until
    ``reset``.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        rng=None,
        start: Position | None = None,
        heading: Heading = Heading.RIGHT,
        food_at: Position | None = None,
    ) -> None:
        self.grid = grid or Grid(config.GRID_SIZE)
        self.rng = rng or random.Random()
        self.body: Body
        self.food: Position | None = None
        self.over = False
        self.reset(start=start, heading=heading, food_at=food_at)

    @property
    def score(self) -> int:
        return len(self.body)

    def reset(
        self,
        start: Position | None = None,
        heading: Heading = Heading.RIGHT,
        food_at: Position | None = None,
    ) -> None:
        """Start a fresh round. ``start`` and ``food_at`` pin the layout."""
        if start is None:
            start = self.grid.random_position(self.rng)
        elif not self.grid.is_valid(start):
            raise ValueError(f"Start {start} is off the board.")
        self.body = Body(start, heading)

        if food_at is None:
            self.food = food.place(self.grid, self.body, self.rng)
        elif not self.grid.is_valid(food_at) or food_at in self.body:
            raise ValueError(f"Food at {food_at} is off the board or on the snake.")
        else:
            self.food = food_at

        self.over = False
        logger.info("New round: head %s heading %s, food %s", start, heading.name, self.food)

    def tick(self) -> None:
        if self.over:
            return

        # The tail vacates its cell during this same advance.
        nxt = self.body.peek_next_head_position()
        hits_body = nxt in self.body and nxt != self.body.tail.position
        if not self.grid.is_valid(nxt) or hits_body:
            self.over = True
            logger.info("Game over at %s with score %d", nxt, self.score)
            return

        self.body.advance()

        if self.body.head.position == self.food:
            eaten = self.food
            self.food = food.place(self.grid, self.body, self.rng, previous=eaten)
            grown = self.body.grow_tail(self.grid)
            if grown is not None and grown == self.food:
                self.food = food.place(self.grid, self.body, self.rng, previous=grown)

    def snapshot(self) -> Snapshot:
        cells = np.zeros((self.grid.size, self.grid.size), dtype=np.int8)
        for row, col in self.body:
            cells[row, col] = CellType.BODY
        head = self.body.head.position
        cells[head.row, head.col] = CellType.HEAD
        if self.food is not None:
            cells[self.food.row, self.food.col] = CellType.FOOD
        cells.setflags(write=False)
        return Snapshot(
            size=self.grid.size,
            cells=cells,
            head=head,
            food=self.food,
            score=self.score,
            over=self.over,
        )
