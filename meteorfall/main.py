"""Command-line entry point: open the window and run the game loop."""

from __future__ import annotations

import argparse
import random

import pygame

from meteorfall.board import Board
from meteorfall.drawing import Renderer
from meteorfall.window import Window

TITLE = "Meteorfall"
WIDTH = 800
HEIGHT = 600
MARGIN = 10.0


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="meteorfall", description="Shoot the falling asteroids.")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for asteroid spawning")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the game until the player loses, the window closes or the frame limit is hit."""
    args = _parse_args(argv)
    window = Window(WIDTH, HEIGHT, TITLE)
    try:
        board = Board(
            MARGIN,
            MARGIN,
            window.width - 2 * MARGIN,
            window.height - 2 * MARGIN,
            window,
            rng=random.Random(args.seed),
        )
        renderer = Renderer(window.surface)
        frames = 0
        while board.playing and not window.closed:
            start = board.clock()
            board.update()
            renderer.begin()
            board.draw(renderer)
            renderer.end()
            end = board.clock()
            window.update()
            board.delta_time = (end - start) / 1000
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())