"""
renderer.py: Draws a game session onto a pygame surface.
"""

import pygame

from .config import GameConfig
from .constants import (
    BACKGROUND_COLOR, BIRD_COLOR, BIRD_EYE_COLOR, BIRD_EYE_SIZE, PIPE_COLOR
)
from .data_models import Player, Session


class Renderer:
    """Paints the bird and pipes. Holds no game state between frames."""

    def __init__(self, surface: pygame.Surface, config: GameConfig):
        self.surface = surface
        self.config = config

    def __call__(self, session: Session):
        self.draw(session)

    def draw(self, session: Session):
        self.surface.fill(BACKGROUND_COLOR)
        self._draw_bird(session.player)
        self._draw_pipes(session)

    def _draw_bird(self, bird: Player):
        pygame.draw.rect(self.surface, BIRD_COLOR,
                         (bird.x, bird.y, bird.width, bird.height))

        eye_x = bird.x + bird.width * 0.6
        eye_y = bird.y + bird.height * 0.3
        pygame.draw.rect(self.surface, BIRD_EYE_COLOR,
                         (eye_x, eye_y, BIRD_EYE_SIZE, BIRD_EYE_SIZE))

    def _draw_pipes(self, session: Session):
        width = self.config.pipe_width
        for pipe in session.pipes:
            pygame.draw.rect(self.surface, PIPE_COLOR,
                             (pipe.x, 0, width, pipe.top_height))

            bottom_height = self.config.height - pipe.bottom_y
            pygame.draw.rect(self.surface, PIPE_COLOR,
                             (pipe.x, pipe.bottom_y, width, bottom_height))
