#!/usr/bin/env python3
"""
flappy_client.py

Window, input handling and frame clock around the GameEngine, plus the
score display and the game-over screen.
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

import pygame

from .config import ConfigError, GameConfig
from .constants import (
    WINDOW_TITLE, TEXT_COLOR, OVERLAY_COLOR, BUTTON_COLOR, BUTTON_HOVER_COLOR
)
from .physics_engine import GameEngine
from .renderer import Renderer

logger = logging.getLogger(__name__)

RESTART_BUTTON_SIZE = (160, 50)


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()

        pygame.init()
        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption(WINDOW_TITLE)

        self.renderer = Renderer(self.screen, self.config)
        self.engine = GameEngine(
            config=self.config,
            rng=random.Random(seed),
            render=self.renderer,
            on_game_over=self._show_game_over,
        )

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 32)

        self.final_score: Optional[int] = None
        self.restart_button = pygame.Rect((0, 0), RESTART_BUTTON_SIZE)
        self.restart_button.center = (self.config.width // 2, self.config.height // 2 + 60)

    def run(self):
        """The main execution loop."""
        self.start_game()

        running = True
        while running:
            self.clock.tick(self.config.target_fps)

            # Inputs are applied before the frame's tick
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False

            if self.engine.running:
                self.engine.tick()
            else:
                self.renderer.draw(self.engine.session)
                self._draw_game_over()

            self._draw_hud()
            pygame.display.flip()

        pygame.quit()

    def start_game(self):
        self.final_score = None
        self.engine.reset()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Applies one pygame event. Returns False when the player asked to quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.engine.flap()
            elif event.key in (pygame.K_r, pygame.K_RETURN) and self.engine.game_over:
                self.start_game()

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.engine.game_over:
                if self.restart_button.collidepoint(event.pos):
                    self.start_game()
            else:
                self.engine.flap()

        return True

    def _show_game_over(self, score: int):
        self.final_score = score

    def _draw_hud(self):
        score_text = self.font.render(f"Score: {self.engine.score}", True, TEXT_COLOR)
        self.screen.blit(score_text, (10, 10))

    def _draw_game_over(self):
        """Translucent overlay with the final score and a restart button."""
        screen = self.screen
        center_x = self.config.width // 2
        center_y = self.config.height // 2

        overlay = pygame.Surface((self.config.width, self.config.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

        title = self.large_font.render("Game Over", True, TEXT_COLOR)
        screen.blit(title, (center_x - title.get_width() // 2, center_y - 80))

        final = self.font.render(f"Final Score: {self.final_score}", True, TEXT_COLOR)
        screen.blit(final, (center_x - final.get_width() // 2, center_y - 20))

        hovered = self.restart_button.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(screen, BUTTON_HOVER_COLOR if hovered else BUTTON_COLOR,
                         self.restart_button, border_radius=8)
        label = self.font.render("Restart", True, TEXT_COLOR)
        screen.blit(label, label.get_rect(center=self.restart_button.center))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for deterministic pipe layouts.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the target frame rate (default: config value).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig() if args.fps is None else GameConfig(target_fps=args.fps)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    client = FlappyClient(config, seed=args.seed)
    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
