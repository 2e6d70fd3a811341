"""Entry point for the pygame based game window."""

from __future__ import annotations

import argparse
import asyncio
import logging

import pygame

from . import constants
from .game import SnakeGame
from .render import PygameScreen


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Monster Snake")
    parser.add_argument("--columns", type=int, default=constants.DEFAULT_COLUMNS, help="Grid width in cells")
    parser.add_argument("--rows", type=int, default=constants.DEFAULT_ROWS, help="Grid height in cells")
    parser.add_argument("--cell-size", type=int, default=constants.DEFAULT_CELL_SIZE, help="Cell size in pixels")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


async def run_game(args: argparse.Namespace) -> None:
    screen = PygameScreen(args.columns, args.rows, args.cell_size)
    SnakeGame(screen)
    while True:
        screen.pump_events()
        await asyncio.sleep(constants.EVENT_POLL_INTERVAL)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    try:
        asyncio.run(run_game(args))
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
