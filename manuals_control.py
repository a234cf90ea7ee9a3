# -*- coding: utf-8 -*-
"""
Play the sliding-tile game in a Matplotlib window.
"""
import logging
from argparse import ArgumentParser
from typing import Any

from slidetiles.config import MAX_PROB4, MAX_UNDO_LIMIT, SUPPORTED_SIZES, TARGET_VALUES, GameSettings
from slidetiles.core import Direction, make_random_source
from slidetiles.envs import GameSession, GameStatus
from slidetiles.storage import BestScoreStore
from slidetiles.utils import WindowBoard

logger = logging.getLogger(__name__)

# ##: Keyboard bindings.
KEY_DIRECTIONS = {
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "up": Direction.UP,
    "w": Direction.UP,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
}
STATUS_MESSAGES = {
    GameStatus.PLAYING: "",
    GameStatus.WON: "  Congrats!",
    GameStatus.LOST: "  Game over.",
}


def redraw(session: GameSession, window: WindowBoard):
    """
    Redraw the game board with the score line.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board
    """
    caption = f"Score: {session.score}  Best: {session.best_score}{STATUS_MESSAGES[session.status]}"
    window.show_image(session.board, caption)


def key_handler(session: GameSession, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: GameSession
        The game being played

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    key = (event.key or "").lower()
    logger.debug("pressed %s", key)

    if key == "escape":
        window.close()
        return None

    if key == "backspace":
        session.restart()
    elif key == "u":
        if not session.undo():
            return None
    elif key in KEY_DIRECTIONS:
        # ##: Blocked directions leave the window untouched.
        if KEY_DIRECTIONS[key] not in session.legal_directions:
            return None
        session.move(KEY_DIRECTIONS[key])
    else:
        return None

    redraw(session, window)
    return None


def parse_arguments(argv=None):
    """Read the command line."""
    parser = ArgumentParser(description="Play the sliding-tile game.")
    parser.add_argument("--size", type=int, default=4, choices=SUPPORTED_SIZES)
    parser.add_argument("--prob4", type=float, default=0.1, help=f"probability of spawning a 4 (0 to {MAX_PROB4})")
    parser.add_argument("--target", type=int, default=2048, choices=TARGET_VALUES)
    parser.add_argument("--max-undo", type=int, default=10, help=f"undo depth (0 to {MAX_UNDO_LIMIT})")
    parser.add_argument("--best-file", type=str, default=".slidetiles.json")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    if not 0.0 <= args.prob4 <= MAX_PROB4:
        parser.error(f"--prob4 must be within [0, {MAX_PROB4}]")
    if not 0 <= args.max_undo <= MAX_UNDO_LIMIT:
        parser.error(f"--max-undo must be within [0, {MAX_UNDO_LIMIT}]")
    return args


if __name__ == "__main__":
    arguments = parse_arguments()
    logging.basicConfig(level=arguments.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    settings = GameSettings(
        size=arguments.size, prob4=arguments.prob4, target_value=arguments.target, max_undo=arguments.max_undo
    )
    game = GameSession(
        settings=settings, random_source=make_random_source(arguments.seed), store=BestScoreStore(arguments.best_file)
    )

    window_board = WindowBoard(title="2048 Game", size=settings.size)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))

    redraw(game, window_board)

    # Blocking event loop
    window_board.show(block=True)
