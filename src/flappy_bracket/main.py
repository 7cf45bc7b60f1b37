#!/usr/bin/env python3
"""
main.py: Entry point. Opens the console and hands it to the game loop.
"""

import logging
import sys

from .console import ConsoleInitError, PygameConsole, main_loop
from .data_models import GameConfig
from .game_state import GameState

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = GameConfig()

    try:
        console = PygameConsole(config.screen_width, config.screen_height, config.title)
    except ConsoleInitError as e:
        logger.error("Startup failed: %s", e)
        return 1

    main_loop(console, GameState(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
