"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from typing import List

from .config import GameConfig


@dataclass
class Player:
    """The bird. Only y and velocity change during a session."""
    x: float
    y: float
    width: int
    height: int
    velocity: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def from_config(cls, config: GameConfig) -> "Player":
        """Builds a bird at the configured start position, at rest."""
        return cls(
            x=float(config.bird_start_x),
            y=float(config.bird_start_y),
            width=config.bird_width,
            height=config.bird_height,
        )


@dataclass
class Pipe:
    """A top/bottom pipe pair with an opening between top_height and bottom_y."""
    x: float
    top_height: float
    bottom_y: float
    passed: bool = False      # Already counted towards the score?


@dataclass
class Session:
    """Everything that is reset when a new game starts."""
    player: Player
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    game_over: bool = False
    frame_count: int = 0

    @classmethod
    def new(cls, config: GameConfig) -> "Session":
        return cls(player=Player.from_config(config))
