# -*- coding: utf-8 -*-
"""
Play 2048 with the keyboard.

Arrows, WASD or HJKL move the tiles; backspace starts a new game; escape quits.
"""
import argparse
import logging
from typing import Any

from game2048 import Game2048, GameConfig, MoveOnTerminalState
from game2048.utils import key_to_direction
from game2048.utils.windows import WindowBoard

logger = logging.getLogger("manuals_control")


def redraw(game: Game2048, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    game: Game2048
        The game to draw

    window: WindowBoard
        Class to draw the game board
    """
    window.show_state(game.state)


def reset(game: Game2048, window: WindowBoard):
    """
    Reset and redraw the game board.
    """
    game.reset()
    redraw(game, window)


def step(game: Game2048, window: WindowBoard, direction: Any):
    """
    Apply a move and redraw if something moved.

    Parameters
    ----------
    game: Game2048
        The game

    window: WindowBoard
        Class to draw the game board

    direction: Any
        Direction of the move
    """
    try:
        result = game.move(direction)
    except MoveOnTerminalState as error:
        logger.info("%s", error)
        return

    if not result.moved:
        return

    logger.info("score=%d (+%d)", game.score, result.score_delta)
    redraw(game, window)
    if game.is_finished:
        logger.info("game %s", game.status.value)


def key_handler(game: Game2048, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: Game2048
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return

    if event.key == "backspace":
        reset(game, window)
        return

    direction = key_to_direction(event.key)
    if direction is not None:
        step(game, window, direction)


def parse_args() -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(description="Play 2048 in a matplotlib window.")
    parser.add_argument("--size", type=int, default=4, help="board dimension")
    parser.add_argument("--win", type=int, default=2048, help="tile value that wins the game")
    parser.add_argument("--seed", type=int, default=None, help="seed of the random source")
    parser.add_argument("--verbose", action="store_true", help="log every move")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    env = Game2048(config=GameConfig(size=args.size, winning_value=args.win), seed=args.seed)

    window_board = WindowBoard(title="2048 Game", size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
