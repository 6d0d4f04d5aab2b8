"""Single-player Flappy Bird style side-scroller built on pygame."""

from .config import ConfigError, GameConfig
from .data_models import Pipe, Player, Session
from .physics_core import PhysicsCore
from .physics_engine import GameEngine
from .renderer import Renderer

__all__ = [
    "ConfigError",
    "GameConfig",
    "GameEngine",
    "PhysicsCore",
    "Pipe",
    "Player",
    "Renderer",
    "Session",
]
