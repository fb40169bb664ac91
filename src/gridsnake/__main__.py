from __future__ import annotations

import argparse
import logging

from . import config


def _positive_float(value: str) -> float:
    f = float(value)
    if f <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return f


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return n


def _board_size(value: str) -> int:
    n = int(value)
    if n < 2:
        raise argparse.ArgumentTypeError(f"board size must be at least 2: {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play grid snake.")
    parser.add_argument("--size", type=_board_size, default=config.GRID_SIZE, help="Board is SIZE x SIZE cells.")
    parser.add_argument("--tick-ms", type=_positive_float, default=config.TICK_MS, help="Game tick period.")
    parser.add_argument("--frame-ms", type=_positive_float, default=config.FRAME_MS, help="Redraw period.")
    parser.add_argument("--block", type=_positive_int, default=config.BLOCK, help="Pixels per cell.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spawn and food positions.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Deferred so --help does not print the pygame banner.
    from .game import main as run_game

    run_game(size=ns.size, tick_ms=ns.tick_ms, frame_ms=ns.frame_ms, block=ns.block, seed=ns.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
