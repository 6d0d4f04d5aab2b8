import pygame
import pytest

from flappy.data_models import Pipe
from flappy.flappy_client import FlappyClient, main, parse_args


@pytest.fixture
def client():
    client = FlappyClient(seed=3)
    client.start_game()
    yield client
    pygame.quit()


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def _crash(client):
    client.engine.pipes.append(Pipe(x=100.0, top_height=50.0, bottom_y=200.0))
    client.engine.tick()
    assert client.engine.game_over


def test_space_and_click_flap(client):
    assert client.handle_event(_key(pygame.K_SPACE))
    assert client.engine.session.player.velocity == -9.0
    client.engine.session.player.velocity = 0.0
    assert client.handle_event(_click((10, 10)))
    assert client.engine.session.player.velocity == -9.0


def test_quit_events(client):
    assert client.handle_event(pygame.event.Event(pygame.QUIT)) is False
    assert client.handle_event(_key(pygame.K_ESCAPE)) is False


def test_game_over_records_final_score(client):
    client.engine.session.score = 2
    _crash(client)
    assert client.final_score == 2


def test_restart_button_resets(client):
    _crash(client)
    assert client.handle_event(_click((0, 0)))
    assert client.engine.game_over
    assert client.handle_event(_click(client.restart_button.center))
    assert client.engine.running
    assert client.final_score is None


def test_restart_key_only_after_game_over(client):
    client.engine.tick()
    frame = client.engine.session.frame_count
    client.handle_event(_key(pygame.K_r))
    assert client.engine.session.frame_count == frame
    _crash(client)
    client.handle_event(_key(pygame.K_r))
    assert client.engine.running
    assert client.engine.session.frame_count == 0


def test_game_over_screen_draws(client):
    _crash(client)
    client.renderer.draw(client.engine.session)
    client._draw_game_over()
    client._draw_hud()


def test_parse_args():
    args = parse_args(["--seed", "5", "--fps", "30", "--log-level", "DEBUG"])
    assert (args.seed, args.fps, args.log_level) == (5, 30, "DEBUG")
    assert parse_args([]).log_level == "WARNING"


def test_main_rejects_bad_config():
    assert main(["--fps", "0"]) == 2
