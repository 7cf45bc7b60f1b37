"""
game_state.py: The finite state machine that runs menu, play and game-over frames.
"""

import logging
import random
from typing import Optional

from .constants import (
    NAVY, START_PROMPT, RESTART_PROMPT, QUIT_PROMPT, FLAP_HINT, GAME_OVER_TEXT
)
from .console import Console
from .data_models import GameConfig, GameMode, Key, Player
from .physics_core import PhysicsCore
from .render import draw_obstacle, draw_player

logger = logging.getLogger(__name__)


class GameState:
    """
    Holds the player, the next obstacle and the score.
    tick() is called once per rendered frame and runs the handler for the current mode.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.core = PhysicsCore(config=self.config, rng=rng or random.Random())

        self.mode = GameMode.MENU
        self.frame_time = 0.0
        self.score = 0
        self.player = self._new_player()
        self.obstacle = self.core.spawn_obstacle(self.config.screen_width, 0)

    def _new_player(self) -> Player:
        x, y = self.config.player_start
        return Player(x=x, y=y)

    def restart_game(self):
        """Starts a fresh round: new player, score 0, first obstacle one screen ahead."""
        self.player = self._new_player()
        self.frame_time = 0.0
        self.mode = GameMode.PLAYING
        self.obstacle = self.core.spawn_obstacle(self.config.screen_width, 0)
        self.score = 0
        logger.info("Game started")

    def tick(self, console: Console):
        if self.mode == GameMode.MENU:
            self.main_menu(console)
        elif self.mode == GameMode.PLAYING:
            self.playing(console)
        elif self.mode == GameMode.GAME_OVER:
            self.game_over(console)

    # -------- Mode Handlers --------

    def main_menu(self, console: Console):
        console.cls()
        console.print_centered(5, self.config.title)
        console.print_centered(7, START_PROMPT)
        console.print_centered(8, QUIT_PROMPT)
        self._handle_menu_key(console)

    def playing(self, console: Console):
        console.cls_bg(NAVY)

        # 1. Fixed logical tick: at most one physics step per frame
        self.frame_time += console.frame_time_ms
        if self.frame_time > self.config.frame_duration_ms:
            self.frame_time = 0.0
            self.core.gravity_and_move(self.player)

        # 2. Flap is applied on the frame it is pressed
        if console.key == Key.FLAP:
            self.core.flap(self.player)

        # 3. Draw player and HUD
        draw_player(console, self.player)
        console.print(0, 0, FLAP_HINT)
        console.print(0, 1, f"Score: {self.score}")

        if self.config.obstacles:
            draw_obstacle(console, self.obstacle, self.player.x, self.config.screen_height)

            # 4. Score and replace the obstacle once the player is past it
            if self.player.x > self.obstacle.x:
                self.score += 1
                self.obstacle = self.core.spawn_obstacle(
                    self.player.x + self.config.screen_width, self.score)

        # 5. Collision
        if self.core.out_of_bounds(self.player) or self._hit_obstacle():
            self.mode = GameMode.GAME_OVER
            logger.info("Game over with score %d", self.score)

    def game_over(self, console: Console):
        console.cls()
        console.print_centered(5, GAME_OVER_TEXT)
        console.print_centered(6, f"You earned {self.score} points")
        console.print_centered(7, RESTART_PROMPT)
        console.print_centered(8, QUIT_PROMPT)
        self._handle_menu_key(console)

    # -------- Helpers --------

    def _hit_obstacle(self) -> bool:
        return self.config.obstacles and self.core.hit_test(self.obstacle, self.player)

    def _handle_menu_key(self, console: Console):
        """Confirm (re)starts the game, quit asks the console to stop."""
        if console.key == Key.CONFIRM:
            self.restart_game()
        elif console.key == Key.QUIT:
            logger.info("Quit requested from %s", self.mode.value)
            console.request_quit()
