"""
physics_core.py: Deterministic kinematics, obstacle generation and collision logic.
"""

import logging
import random
from dataclasses import dataclass, field

from .constants import (
    OBSTACLE_MIN_WIDTH, OBSTACLE_BASE_MAX_WIDTH, OBSTACLE_WIDTH_SCORE_STEP,
    OBSTACLE_GAP_Y_RANGE, OBSTACLE_BASE_SIZE, OBSTACLE_MIN_SIZE
)
from .data_models import GameConfig, Obstacle, Player

logger = logging.getLogger(__name__)


def obstacle_size(score: int) -> int:
    """Height of the opening for a given score; shrinks by one per point."""
    return max(OBSTACLE_MIN_SIZE, OBSTACLE_BASE_SIZE - score)


def obstacle_width_range(score: int) -> tuple[int, int]:
    """[low, high) bounds for an obstacle's width at a given score."""
    return OBSTACLE_MIN_WIDTH, OBSTACLE_BASE_MAX_WIDTH + score // OBSTACLE_WIDTH_SCORE_STEP


@dataclass
class PhysicsCore:
    """
    Physics shared by every game mode that moves the player.
    All randomness comes from the injected rng so a seeded run is reproducible.
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)

    def gravity_and_move(self, player: Player):
        """Advances the player by one logical tick."""
        # The cap is soft: the increment that crosses it still lands
        if player.velocity <= self.config.terminal_velocity:
            player.velocity += self.config.gravity
        player.y += int(player.velocity)
        player.x += 1
        if player.y < 0:
            player.y = 0

    def flap(self, player: Player):
        player.velocity = self.config.flap_velocity

    def spawn_obstacle(self, x: int, score: int) -> Obstacle:
        """Generates the next obstacle at world column x."""
        low, high = obstacle_width_range(score)
        obstacle = Obstacle(
            x=x,
            width=self.rng.randrange(low, high),
            gap_y=self.rng.randrange(*OBSTACLE_GAP_Y_RANGE),
            size=obstacle_size(score),
        )
        logger.debug("Spawned obstacle %s for score %d", obstacle, score)
        return obstacle

    def hit_test(self, obstacle: Obstacle, player: Player) -> bool:
        """True if the player overlaps the bar outside the opening."""
        return (
            obstacle.x <= player.x <= obstacle.x + obstacle.width
            and (player.y < obstacle.gap_top or player.y > obstacle.gap_bottom)
        )

    def out_of_bounds(self, player: Player) -> bool:
        return player.y > self.config.screen_height
