# main.py
import logging
import os
import sys

import arcade
from dotenv import load_dotenv

from settings import WIDTH, HEIGHT, TITLE, UPDATE_RATE
from difficulty import DEFAULT_DIFFICULTY, UnknownDifficultyError
from menu_view import MenuView
from score_store import JsonScoreStore
from session import Game

DEFAULT_SCORES = "~/.float_runner/scores.json"


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def create_game() -> Game:
    logger = logging.getLogger(__name__)
    store = JsonScoreStore(os.getenv("FLOAT_RUNNER_SCORES", DEFAULT_SCORES))
    difficulty = os.getenv("FLOAT_RUNNER_DIFFICULTY", DEFAULT_DIFFICULTY)
    try:
        return Game(store, difficulty)
    except UnknownDifficultyError as e:
        logger.error("%s; starting on %s", e, DEFAULT_DIFFICULTY)
        return Game(store, DEFAULT_DIFFICULTY)


def main():
    load_dotenv()
    debug = os.getenv("FLOAT_RUNNER_DEBUG", "false").lower() == "true"
    setup_logging(debug)

    logger = logging.getLogger(__name__)
    logger.info("%s starting...", TITLE)

    try:
        game = create_game()
        window = arcade.Window(WIDTH, HEIGHT, TITLE, resizable=False, update_rate=UPDATE_RATE)
        window.show_view(MenuView(game))
        arcade.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("%s stopped", TITLE)


if __name__ == "__main__":
    main()
