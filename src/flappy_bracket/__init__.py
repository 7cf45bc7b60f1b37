"""
Flappy Bracket: a glyph-console Flappy Bird clone.
"""

from .data_models import GameConfig, GameMode, Key, Obstacle, Player
from .game_state import GameState
from .physics_core import PhysicsCore

__all__ = ["GameConfig", "GameMode", "GameState", "Key", "Obstacle", "Player", "PhysicsCore"]
