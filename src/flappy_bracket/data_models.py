"""
data_models.py: Data structures for the game state and its configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION_MS, PLAYER_START_X,
    PLAYER_START_Y, GRAVITY, TERMINAL_VELOCITY, FLAP_VELOCITY, TITLE
)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Key(Enum):
    """The keys the game distinguishes; everything else is OTHER."""
    CONFIRM = "confirm"
    QUIT = "quit"
    FLAP = "flap"
    OTHER = "other"


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings handed to the game state and physics at construction."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_duration_ms: float = FRAME_DURATION_MS
    player_start: Tuple[int, int] = (PLAYER_START_X, PLAYER_START_Y)
    gravity: float = GRAVITY
    terminal_velocity: float = TERMINAL_VELOCITY
    flap_velocity: float = FLAP_VELOCITY
    title: str = TITLE
    obstacles: bool = True      # False runs the boundary-only variant


@dataclass
class Player:
    """The physics body steered by the user."""
    x: int
    y: int
    velocity: float = 0.0


@dataclass
class Obstacle:
    """A vertical bar with one opening; x is in world space."""
    x: int
    width: int
    gap_y: int
    size: int

    @property
    def half_size(self) -> int:
        return self.size // 2

    @property
    def gap_top(self) -> int:
        return self.gap_y - self.half_size

    @property
    def gap_bottom(self) -> int:
        return self.gap_y + self.half_size
