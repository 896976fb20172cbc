"""The territory scoreboard: how many cells each player holds."""

from __future__ import annotations

from typing import Protocol

import pygame

from climbwall.config import GREEN, RED

FONT_PATH = "territory/media/fonts/DIN.ttf"
FONT_SIZE = 40
WHITE = (255, 255, 255)
OUTLINE_WIDTH = 2

LEFT_BOX = pygame.Rect(280, 540, 120, 80)
RIGHT_BOX = pygame.Rect(400, 540, 120, 80)
LEFT_TEXT_POS = (300, 545)
RIGHT_TEXT_POS = (420, 545)


class _Scored(Protocol):
    @property
    def score(self) -> int: ...


def _load_font() -> pygame.font.Font | None:
    try:
        pygame.font.init()
        return pygame.font.Font(FONT_PATH, FONT_SIZE)
    except (pygame.error, OSError):
        print(f"Failed to load font for scoreboard: {FONT_PATH}")
        return None


class Scoreboard:
    """Two score cells at the bottom centre of the screen."""

    def __init__(self, left: _Scored, right: _Scored) -> None:
        self.left = left
        self.right = right
        self.font = _load_font()
        self.left_text = str(left.score)
        self.right_text = str(right.score)

    def update(self) -> None:
        self.left_text = str(self.left.score)
        self.right_text = str(self.right.score)

    def render(self, surface: pygame.Surface) -> None:
        for box, fill in ((LEFT_BOX, RED), (RIGHT_BOX, GREEN)):
            pygame.draw.rect(surface, fill, box)
            pygame.draw.rect(surface, WHITE, box, OUTLINE_WIDTH)
        if self.font is None:
            return
        surface.blit(self.font.render(self.left_text, True, WHITE), LEFT_TEXT_POS)
        surface.blit(self.font.render(self.right_text, True, WHITE), RIGHT_TEXT_POS)

    def reset(self) -> None:
        self.left_text = "0"
        self.right_text = "0"