"""
config.py: Validated game configuration built from the defaults in constants.py.
"""

from dataclasses import dataclass

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS,
    BIRD_WIDTH, BIRD_HEIGHT, BIRD_START_X, BIRD_START_Y,
    PIPE_WIDTH, PIPE_GAP, PIPE_SPEED, PIPE_SPAWN_INTERVAL, PIPE_MIN_HEIGHT,
    GRAVITY, LIFT,
)


class ConfigError(ValueError):
    """Raised when a GameConfig describes impossible geometry or physics."""


@dataclass(frozen=True)
class GameConfig:
    """Playfield, bird, pipe and physics settings for one game."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    target_fps: int = RENDER_FPS

    bird_width: int = BIRD_WIDTH
    bird_height: int = BIRD_HEIGHT
    bird_start_x: float = BIRD_START_X
    bird_start_y: float = BIRD_START_Y

    gravity: float = GRAVITY
    lift: float = LIFT

    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_speed: float = PIPE_SPEED
    pipe_interval: int = PIPE_SPAWN_INTERVAL
    min_pipe_height: int = PIPE_MIN_HEIGHT

    def __post_init__(self) -> None:
        self.validate()

    @property
    def max_pipe_height(self) -> int:
        """Tallest top pipe that still leaves room for the gap and a bottom pipe."""
        return self.height - self.pipe_gap - self.min_pipe_height

    def validate(self) -> None:
        # 1. Pipe heights are drawn with randint and need whole pixels
        for name in ("height", "pipe_gap", "min_pipe_height", "pipe_interval"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")

        # 2. Sizes and rates
        for name in ("width", "height", "target_fps", "bird_width", "bird_height",
                     "pipe_width", "pipe_gap", "pipe_speed", "pipe_interval"):
            value = getattr(self, name)
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")
        if self.min_pipe_height < 0:
            raise ConfigError(
                f"min_pipe_height must not be negative, got {self.min_pipe_height!r}")

        # 3. Physics
        if self.gravity < 0:
            raise ConfigError(f"gravity must not be negative, got {self.gravity!r}")
        if self.lift >= 0:
            raise ConfigError(f"lift must be negative (upwards), got {self.lift!r}")

        # 4. Bird geometry
        if self.bird_width > self.width or self.bird_height > self.height:
            raise ConfigError(
                f"bird ({self.bird_width}x{self.bird_height}) does not fit in "
                f"the playfield ({self.width}x{self.height})")
        if not 0 <= self.bird_start_x <= self.width - self.bird_width:
            raise ConfigError(
                f"bird_start_x {self.bird_start_x!r} is outside the playfield")
        if not 0 <= self.bird_start_y <= self.height - self.bird_height:
            raise ConfigError(
                f"bird_start_y {self.bird_start_y!r} is outside the playfield")

        # 5. Pipe geometry
        if self.max_pipe_height < self.min_pipe_height:
            raise ConfigError(
                f"pipe_gap {self.pipe_gap} plus two pipes of min_pipe_height "
                f"{self.min_pipe_height} exceeds the playfield height {self.height}")
