"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import List

from .config import GameConfig
from .data_models import Player, Pipe


class PhysicsCore:
    """
    Stateless physics and geometry rules, parameterised by a GameConfig.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def apply_gravity_and_movement(self, player: Player) -> bool:
        """
        Advances the player by one frame and clamps it to the playfield.
        Returns True when the bird hit the ground.
        """
        player.velocity += self.config.gravity
        player.y += player.velocity

        # 1. Floor
        floor_y = self.config.height - player.height
        if player.y >= floor_y:
            player.y = float(floor_y)
            player.velocity = 0.0
            return True

        # 2. Ceiling
        if player.y < 0:
            player.y = 0.0
            player.velocity = 0.0

        return False

    def lift_velocity(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.lift

    def overlaps(self, player: Player, pipe: Pipe) -> bool:
        """Exact AABB test of the bird against both rectangles of a pipe pair."""
        pipe_right = pipe.x + self.config.pipe_width
        if not (player.x < pipe_right and player.right > pipe.x):
            return False
        return player.y < pipe.top_height or player.bottom > pipe.bottom_y

    def check_collision(self, player: Player, pipes: List[Pipe]) -> bool:
        """Checks the bird against every pipe pair."""
        return any(self.overlaps(player, pipe) for pipe in pipes)

    def has_passed(self, player: Player, pipe: Pipe) -> bool:
        """True once the pipe's right edge is left of the bird's left edge."""
        return pipe.x + self.config.pipe_width < player.x

    def is_off_screen(self, pipe: Pipe) -> bool:
        return pipe.x + self.config.pipe_width < 0
