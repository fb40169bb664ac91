"""Food placement."""

from __future__ import annotations

import logging

from .body import Body
from .grid import Grid
from .state import Position

logger = logging.getLogger(__name__)


def place(grid: Grid, body: Body, rng, previous: Position | None = None) -> Position | None:
    """Pick a free cell for food, avoiding ``previous`` when possible.

    Random sampling first; after ``2 * size**2`` misses fall back to a scan of
    the free cells so a crowded board still terminates. Returns ``None`` only
    when the body covers the whole board.
    """
    for _ in range(2 * grid.size * grid.size):
        pos = grid.random_position(rng)
        if pos not in body and pos != previous:
            logger.debug("Food placed at %s", pos)
            return pos

    free = [pos for pos in grid.cells() if pos not in body]
    if not free:
        logger.warning("Board full; no cell left for food")
        return None
    logger.warning("Food sampling missed; scanning %d free cells", len(free))
    fresh = [pos for pos in free if pos != previous]
    return rng.choice(fresh or free)
