"""Ready buttons that light up while a paddle rests on them."""

from __future__ import annotations

from typing import Iterable

import pygame

from climbwall.hockey_paddle import Paddle
from climbwall.vectors import Vec2

YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)


class ReadyButton:
    """A square area, centred on ``position``, activated by any paddle inside it."""

    def __init__(self, position: Vec2, size: Vec2) -> None:
        self.position = position
        self.size = size
        self.color = YELLOW
        self.activated = False
        self._image: pygame.Surface | None = None

    def set_texture(self, texture: pygame.Surface) -> None:
        """Use ``texture``, stretched to the button's size."""
        self._image = pygame.transform.scale(
            texture, (max(1, round(self.size.x)), max(1, round(self.size.y)))
        )

    def _contains(self, point: Vec2) -> bool:
        half = self.size / 2
        return (
            self.position.x - half.x <= point.x <= self.position.x + half.x
            and self.position.y - half.y <= point.y <= self.position.y + half.y
        )

    def update(self, paddles: Iterable[Paddle]) -> None:
        self.activated = any(self._contains(paddle.position) for paddle in paddles)
        self.color = GREEN if self.activated else YELLOW

    def render(self, surface: pygame.Surface) -> None:
        if self._image is None:
            return
        tinted = self._image.copy()
        tinted.fill((*self.color, 255), special_flags=pygame.BLEND_RGBA_MULT)
        w, h = tinted.get_size()
        surface.blit(tinted, (self.position.x - w / 2, self.position.y - h / 2))