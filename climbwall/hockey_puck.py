"""The air hockey puck and the fading trace it leaves."""

from __future__ import annotations

import math
import sys

import pygame

from climbwall.config import HockeyConfig
from climbwall.vectors import Vec2


def _load_texture(path: str, radius: float) -> pygame.Surface | None:
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        print(f"Failed to load texture: {path}", file=sys.stderr)
        return None
    print(f"Successfully loaded puck texture: {path}")
    side = max(1, round(2 * radius))
    return pygame.transform.scale(image, (side, side))


class Puck:
    """A moving puck that remembers its last few positions."""

    def __init__(
        self,
        radius: float,
        color: tuple,
        position: Vec2,
        velocity: Vec2,
        config: HockeyConfig,
    ) -> None:
        if config.trace_capacity < 1:
            raise ValueError(f"trace capacity must be positive, got {config.trace_capacity}")
        self.radius = radius
        self.color = color
        self.position = position
        self.velocity = velocity
        self.trace = [Vec2()] * config.trace_capacity
        self._current = 0
        self._trace_color = config.trace_color
        self._trace_min_radius = config.trace_min_radius
        self._image = _load_texture(config.texture_puck_path, radius)

    @property
    def capacity(self) -> int:
        return len(self.trace)

    def move_to(self, position: Vec2) -> None:
        self.position = position

    def update(self, delta: float) -> None:
        """Record the current position in the trace, then advance by ``delta`` seconds."""
        self.trace[self._current] = self.position
        self._current = (self._current + 1) % self.capacity
        self.position = self.position + self.velocity * delta

    def trace_points(self) -> list[tuple[float, Vec2]]:
        """Trace circles as (radius, centre), newest first and shrinking."""
        step = (self.radius - self._trace_min_radius) / self.capacity
        points = []
        current_radius = self.radius
        for i in range(self.capacity):
            current_radius -= step
            points.append((current_radius, self.trace[(self._current - i - 1) % self.capacity]))
        return points

    def render(self, surface: pygame.Surface) -> None:
        for radius, centre in self.trace_points():
            if radius <= 0:
                continue
            side = math.ceil(2 * radius) + 2
            blob = pygame.Surface((side, side), pygame.SRCALPHA)
            pygame.draw.circle(blob, self._trace_color, (side / 2, side / 2), radius)
            surface.blit(blob, (centre.x - side / 2, centre.y - side / 2))
        if self._image is not None:
            w, h = self._image.get_size()
            surface.blit(self._image, (self.position.x - w / 2, self.position.y - h / 2))

    def walls_collide(self, width: float, height: float) -> bool:
        """Bounce off the top or bottom wall; True when a wall was hit."""
        x, y = self.position
        if y > self.radius and y < height - self.radius:
            return False
        self.velocity = Vec2(self.velocity.x, -self.velocity.y)
        if y <= self.radius:
            y = self.radius + 1.0
        else:
            y = height - self.radius - 1.0
        self.position = Vec2(x, y)
        return True

    def reset(self, position: Vec2, velocity: Vec2) -> None:
        """Place the puck, give it a new velocity and clear the trace."""
        self.move_to(position)
        self.velocity = velocity
        self.trace = [Vec2()] * self.capacity