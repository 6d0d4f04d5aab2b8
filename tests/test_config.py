from dataclasses import replace

import pytest

from flappy.config import ConfigError, GameConfig
from flappy.physics_engine import GameEngine


def test_defaults_are_valid():
    config = GameConfig()
    assert (config.width, config.height) == (400, 500)
    assert config.max_pipe_height == 300


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)


def test_gap_larger_than_playfield_is_rejected():
    with pytest.raises(ConfigError, match="pipe_gap"):
        GameConfig(pipe_gap=450)


def test_gap_plus_min_heights_must_fit():
    # 500 - 150 - 200 < 200
    with pytest.raises(ConfigError):
        GameConfig(min_pipe_height=200)


def test_gap_plus_min_heights_may_fit_exactly():
    config = GameConfig(min_pipe_height=175)
    assert config.max_pipe_height == config.min_pipe_height


@pytest.mark.parametrize("field", ["width", "height", "pipe_width", "pipe_interval", "pipe_speed"])
def test_non_positive_sizes_are_rejected(field):
    with pytest.raises(ConfigError, match=field):
        GameConfig(**{field: 0})


def test_lift_must_point_up():
    with pytest.raises(ConfigError, match="lift"):
        GameConfig(lift=9)


def test_bird_must_start_inside_playfield():
    with pytest.raises(ConfigError, match="bird_start_y"):
        GameConfig(bird_start_y=480)


def test_replace_revalidates():
    with pytest.raises(ConfigError):
        replace(GameConfig(), gravity=-1)


@pytest.mark.parametrize("field, value", [
    ("pipe_gap", 150.5),
    ("min_pipe_height", 50.5),
    ("height", 500.0),
    ("pipe_interval", True),
])
def test_pipe_geometry_must_be_whole_pixels(field, value):
    with pytest.raises(ConfigError, match=f"{field} must be an integer"):
        GameConfig(**{field: value})


def test_validated_config_can_spawn_pipes():
    engine = GameEngine(GameConfig(pipe_gap=140, min_pipe_height=60))
    pipe = engine.spawn_pipe()
    assert 60 <= pipe.top_height <= 300
