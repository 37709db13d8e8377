# -*- coding: utf-8 -*-
"""
Play 4096 with the keyboard: arrows to move, r to start over, escape to quit.
"""
import logging
import shelve
from argparse import ArgumentParser
from contextlib import nullcontext
from typing import Any

from fortyninetysix.config import GameConfig
from fortyninetysix.core import BOARD_SIZE, Direction
from fortyninetysix.envs import FortyNinetySix
from fortyninetysix.utils import MappingScoreStore, MemoryScoreStore

logger = logging.getLogger(__name__)

# ##: Keyboard mapping.
KEYS = {"left": Direction.LEFT, "right": Direction.RIGHT, "up": Direction.UP, "down": Direction.DOWN}


def redraw(game: FortyNinetySix, window: Any):
    """
    Redraw the game board and its status.

    Parameters
    ----------
    game: FortyNinetySix
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(game.board)
    window.set_status(f"score {game.score} | best {game.best} | {game.status}")


def key_handler(game: FortyNinetySix, window: Any, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: FortyNinetySix
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        Key press event, with the key name in ``event.key``
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key in ("r", "R"):
        game.reset()
        redraw(game, window)
        return None

    if event.key in KEYS:
        game.step(KEYS[event.key])
        redraw(game, window)
        return None


def main(argv: list[str] | None = None):
    """Open the game window and play until it is closed."""
    from fortyninetysix.utils.windows import WindowBoard

    parser = ArgumentParser(description="Play 4096")
    parser.add_argument("--best-file", default=None, help="Shelf file keeping the best score between runs")
    parser.add_argument("--target", type=int, default=GameConfig.target, help="Tile value that wins the game")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig(target=args.target)

    with shelve.open(args.best_file) if args.best_file else nullcontext() as shelf:
        store = MappingScoreStore(shelf, key=config.storage_key) if shelf is not None else MemoryScoreStore()
        game = FortyNinetySix(config=config, store=store)
        game.announce_ready()

        window = WindowBoard(title=config.title, size=BOARD_SIZE)
        window.register_key_handler(lambda event: key_handler(game, window, event))
        redraw(game, window)

        # Blocking event loop
        window.show(block=True)

    logger.info("Final score %d, best %d", game.score, game.best)


if __name__ == "__main__":
    main()
