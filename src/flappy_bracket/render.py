"""
render.py: Draws the player and obstacles onto a console.
"""

from .constants import (
    PLAYER_SCREEN_X, PLAYER_GLYPH, OBSTACLE_GLYPH, BLACK, WHITE, YELLOW
)
from .console import Console
from .data_models import Obstacle, Player


def draw_player(console: Console, player: Player):
    console.set(PLAYER_SCREEN_X, player.y, YELLOW, BLACK, PLAYER_GLYPH)


def draw_obstacle(console: Console, obstacle: Obstacle, player_x: int, screen_height: int):
    """
    Draws both halves of the bar relative to the player's column.
    Cells that fall off screen are left for the console to drop.
    """
    screen_x = obstacle.x - player_x

    # Top half, down to the opening
    for y in range(0, obstacle.gap_top):
        for column in range(obstacle.width):
            console.set(screen_x + column, y, WHITE, BLACK, OBSTACLE_GLYPH)

    # Bottom half, from the opening to the floor
    for y in range(obstacle.gap_bottom, screen_height):
        for column in range(obstacle.width):
            console.set(screen_x + column, y, WHITE, BLACK, OBSTACLE_GLYPH)
