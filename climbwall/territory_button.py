"""Ready buttons for the territory game."""

from __future__ import annotations

from typing import Iterable, Protocol

import pygame

from climbwall.vectors import Vec2

YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)


class _Positioned(Protocol):
    position: Vec2


class ReadyButton:
    """A rectangle centred on ``position``, activated by any paddle inside it."""

    def __init__(self, position: Vec2, size: Vec2) -> None:
        self.position = position
        self.size = size
        self.color = YELLOW
        self.activated = False
        self._image: pygame.Surface | None = None
        self._offset = Vec2()

    def set_texture(self, texture: pygame.Surface) -> None:
        """Use ``texture`` stretched to the button's size.

        The anchor stays at half the button's size in texture pixels, so the
        image sits offset by that anchor scaled to the button.
        """
        tw, th = texture.get_size()
        self._image = pygame.transform.scale(
            texture, (max(1, round(self.size.x)), max(1, round(self.size.y)))
        )
        self._offset = Vec2(self.size.x / 2 * self.size.x / tw, self.size.y / 2 * self.size.y / th)

    def _contains(self, point: Vec2) -> bool:
        half = self.size / 2
        return (
            self.position.x - half.x <= point.x <= self.position.x + half.x
            and self.position.y - half.y <= point.y <= self.position.y + half.y
        )

    def update(self, paddles: Iterable[_Positioned]) -> None:
        self.activated = any(self._contains(paddle.position) for paddle in paddles)
        self.color = GREEN if self.activated else YELLOW

    def render(self, surface: pygame.Surface) -> None:
        if self._image is None:
            return
        tinted = self._image.copy()
        tinted.fill((*self.color, 255), special_flags=pygame.BLEND_RGBA_MULT)
        corner = self.position - self._offset
        surface.blit(tinted, (corner.x, corner.y))