"""Tests for the pygame key binding, drawing and CLI."""

import random

import pygame
import pytest

from gridsnake import config
from gridsnake.__main__ import build_parser
from gridsnake.game import handle_input
from gridsnake.grid import Grid
from gridsnake.logic import Simulation
from gridsnake.render import draw_state, status_text, window_size
from gridsnake.scheduler import Scheduler
from gridsnake.state import Heading, Position


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.fixture
def scheduler():
    sim = Simulation(Grid(5), rng=random.Random(0), start=Position(2, 2), food_at=Position(0, 0))
    return Scheduler(sim)


class TestHandleInput:
    def test_arrow_and_vi_keys(self, scheduler):
        body = scheduler.simulation.body
        assert handle_input(scheduler, [key(pygame.K_UP)])
        assert body.current_heading is Heading.UP
        handle_input(scheduler, [key(pygame.K_h)])
        assert body.current_heading is Heading.LEFT

    def test_reversal_ignored(self, scheduler):
        handle_input(scheduler, [key(pygame.K_LEFT)])
        assert scheduler.simulation.body.current_heading is Heading.RIGHT

    def test_last_key_wins(self, scheduler):
        handle_input(scheduler, [key(pygame.K_DOWN), key(pygame.K_LEFT)])
        assert scheduler.simulation.body.current_heading is Heading.LEFT

    def test_space_toggles_pause(self, scheduler):
        handle_input(scheduler, [key(pygame.K_SPACE)])
        assert scheduler.paused
        handle_input(scheduler, [key(pygame.K_SPACE)])
        assert not scheduler.paused

    def test_quit(self, scheduler):
        assert not handle_input(scheduler, [pygame.event.Event(pygame.QUIT)])
        assert not handle_input(scheduler, [key(pygame.K_ESCAPE)])
        assert not handle_input(scheduler, [key(pygame.K_q)])


class TestRender:
    def test_cells_painted(self):
        block = 10
        sim = Simulation(Grid(5), rng=random.Random(0), start=Position(2, 2), food_at=Position(0, 4))
        screen = pygame.Surface(window_size(5, block))
        draw_state(screen, sim.snapshot(), block=block)

        def color_at(pos):
            x = pos.col * block + block // 2
            y = config.HUD_HEIGHT + pos.row * block + block // 2
            return tuple(screen.get_at((x, y)))[:3]

        assert color_at(Position(2, 2)) == config.HEAD_COLOR
        assert color_at(Position(0, 4)) == config.FOOD_COLOR
        assert color_at(Position(4, 0)) == config.BG_COLOR

    def test_status_text(self):
        sim = Simulation(Grid(3), rng=random.Random(0), start=Position(1, 2), food_at=Position(0, 0))
        assert status_text(sim.snapshot(), False) == "Score: 1"
        assert status_text(sim.snapshot(), True).endswith("PAUSED")
        sim.tick()
        assert "GAME OVER" in status_text(sim.snapshot(), True)


class TestCli:
    def test_defaults(self):
        ns = build_parser().parse_args([])
        assert ns.size == config.GRID_SIZE
        assert ns.tick_ms == config.TICK_MS
        assert ns.seed is None

    def test_overrides(self):
        ns = build_parser().parse_args(["--size", "8", "--tick-ms", "50", "--seed", "3", "-v"])
        assert (ns.size, ns.tick_ms, ns.seed, ns.verbose) == (8, 50.0, 3, True)

    @pytest.mark.parametrize("args", [["--size", "1"], ["--tick-ms", "0"], ["--frame-ms", "-5"]])
    def test_rejects_bad_values(self, args):
        with pytest.raises(SystemExit):
            build_parser().parse_args(args)

    def test_block_is_a_pixel_count(self, capsys):
        assert build_parser().parse_args(["--block", "1"]).block == 1
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--block", "0"])
        err = capsys.readouterr().err
        assert "positive integer" in err
        assert "board size" not in err
