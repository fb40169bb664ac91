"""Tests for food placement."""

import logging
import random

from gridsnake import food
from gridsnake.body import Body
from gridsnake.grid import Grid
from gridsnake.state import Heading, Position

# Covers every cell of a 3x3 board except (2, 2).
NEARLY_FULL = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 1), (1, 0), (2, 0), (2, 1)]


class TestPlaceSampling:
    def test_skips_body_and_previous(self, scripted):
        body = Body(Position(0, 0))
        rng = scripted([0, 0, 1, 1, 2, 2])
        assert food.place(Grid(5), body, rng, previous=Position(1, 1)) == Position(2, 2)
        assert rng.calls == 6

    def test_first_free_sample_wins(self, scripted):
        body = Body(Position(0, 0))
        assert food.place(Grid(5), body, scripted([3, 4])) == Position(3, 4)

    def test_never_on_body(self):
        grid = Grid(4)
        body = Body.from_positions([(0, 0), (0, 1), (1, 1), (1, 0)], Heading.UP)
        rng = random.Random(5)
        for _ in range(50):
            assert food.place(grid, body, rng) not in body


class TestPlaceFallback:
    def test_single_free_cell_found_by_scan(self, scripted, caplog):
        body = Body.from_positions(NEARLY_FULL, Heading.UP)
        with caplog.at_level(logging.WARNING):
            # Sampling only ever proposes (0, 0), which is taken.
            assert food.place(Grid(3), body, scripted([0])) == Position(2, 2)
        assert "scanning" in caplog.text

    def test_single_free_cell_with_real_rng(self):
        body = Body.from_positions(NEARLY_FULL, Heading.UP)
        assert food.place(Grid(3), body, random.Random(1)) == Position(2, 2)

    def test_previous_reused_when_it_is_the_only_free_cell(self, scripted):
        body = Body.from_positions(NEARLY_FULL, Heading.UP)
        assert food.place(Grid(3), body, scripted([2]), previous=Position(2, 2)) == Position(2, 2)

    def test_full_board_gives_none(self, scripted):
        body = Body.from_positions([(0, 0), (0, 1), (1, 1), (1, 0)], Heading.UP)
        assert food.place(Grid(2), body, scripted([0])) is None
