"""
physics_engine.py: The frame-driven game simulation and its run/game-over state.
"""

import logging
import random
from typing import Callable, List, Optional, Protocol

from .config import GameConfig
from .data_models import Pipe, Session
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


RenderCallback = Callable[[Session], None]
GameOverCallback = Callable[[int], None]


class GameEngine(PhysicsCore):
    """
    Owns one game session and advances it one frame per tick().
    Inherits core physics and collision from PhysicsCore.

    The engine never schedules itself: a driver calls tick() once per frame
    for as long as it returns True.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        render: Optional[RenderCallback] = None,
        on_game_over: Optional[GameOverCallback] = None,
    ):
        super().__init__(config or GameConfig())
        self.rng = rng if rng is not None else random.Random()
        self.render = render
        self.on_game_over = on_game_over
        self.session = Session.new(self.config)

    # -------- Observers --------

    @property
    def score(self) -> int:
        return self.session.score

    @property
    def game_over(self) -> bool:
        return self.session.game_over

    @property
    def running(self) -> bool:
        return not self.session.game_over

    @property
    def pipes(self) -> List[Pipe]:
        return self.session.pipes

    # -------- Input --------

    def reset(self):
        """Starts a fresh session; the driver may resume calling tick()."""
        self.session = Session.new(self.config)
        logger.info("New session started")

    def flap(self):
        """Sets the bird's velocity to the lift impulse, unless the game is over."""
        if self.session.game_over:
            return
        self.session.player.velocity = self.lift_velocity()

    # -------- Simulation --------

    def tick(self) -> bool:
        """
        Runs one frame: physics, pipe spawning, pipe collision/scoring, render.
        Returns True if another tick should be scheduled.
        """
        if self.session.game_over:
            return False

        self.update()
        if self.render is not None:
            self.render(self.session)

        return not self.session.game_over

    def update(self):
        """The simulation half of a frame. Does nothing once the game is over."""
        session = self.session
        if session.game_over:
            return

        # 1. Bird physics
        if self.apply_gravity_and_movement(session.player):
            logger.debug("Bird hit the ground at frame %d", session.frame_count)
            self._end_game()
            return

        # 2. Spawn
        session.frame_count += 1
        self.maybe_spawn_pipe()

        # 3. Move, collide, score, prune
        self.step_pipes()

    def maybe_spawn_pipe(self) -> Optional[Pipe]:
        if self.session.frame_count % self.config.pipe_interval != 0:
            return None
        return self.spawn_pipe()

    def spawn_pipe(self) -> Pipe:
        """Generates a new pipe pair at the right edge with a random opening."""
        top_height = self.rng.randint(
            self.config.min_pipe_height, self.config.max_pipe_height)
        pipe = Pipe(
            x=float(self.config.width),
            top_height=float(top_height),
            bottom_y=float(top_height + self.config.pipe_gap),
        )
        self.session.pipes.append(pipe)
        logger.debug("Spawned pipe with top height %d", top_height)
        return pipe

    def step_pipes(self):
        """Moves every pipe, then checks collisions, scoring and removal in turn."""
        session = self.session
        player = session.player

        for pipe in session.pipes:
            pipe.x -= self.config.pipe_speed

        if self.check_collision(player, session.pipes):
            logger.debug("Bird hit a pipe at frame %d", session.frame_count)
            self._end_game()
            return

        for pipe in session.pipes:
            if not pipe.passed and self.has_passed(player, pipe):
                pipe.passed = True
                session.score += 1
                logger.debug("Score: %d", session.score)

        session.pipes[:] = [p for p in session.pipes if not self.is_off_screen(p)]

    def _end_game(self):
        if self.session.game_over:
            return
        self.session.game_over = True
        logger.info("Game over. Final score: %d", self.session.score)
        if self.on_game_over is not None:
            self.on_game_over(self.session.score)
