from __future__ import annotations

import logging
import random

import pygame

from . import config
from .grid import Grid
from .logic import Simulation
from .render import draw_state, window_size
from .scheduler import Scheduler
from .state import Heading

logger = logging.getLogger(__name__)

KEY_HEADINGS = {
    pygame.K_UP: Heading.UP,
    pygame.K_k: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_j: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_h: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_l: Heading.RIGHT,
}

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def handle_input(scheduler: Scheduler, events) -> bool:
    """Apply key events straight to the body / scheduler. False means quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in QUIT_KEYS:
            return False
        if event.key == pygame.K_SPACE:
            scheduler.toggle_pause()
            continue
        heading = KEY_HEADINGS.get(event.key)
        if heading is not None:
            scheduler.simulation.body.set_heading(heading)
    return True


def main(
    size: int = config.GRID_SIZE,
    tick_ms: float = config.TICK_MS,
    frame_ms: float = config.FRAME_MS,
    block: int = config.BLOCK,
    seed: int | None = None,
) -> None:
    pygame.init()
    screen = pygame.display.set_mode(window_size(size, block))
    pygame.display.set_caption("gridsnake")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)

    def present(snapshot, paused):
        draw_state(screen, snapshot, paused, font, block)
        pygame.display.flip()

    simulation = Simulation(Grid(size), rng=random.Random(seed))
    scheduler = Scheduler(simulation, tick_ms, frame_ms, on_frame=present)
    scheduler.start()

    running = True
    while running:
        running = handle_input(scheduler, pygame.event.get())
        scheduler.advance(clock.tick(config.LOOP_FPS))

    scheduler.stop()
    pygame.quit()
    logger.info("Final score: %d", simulation.score)
