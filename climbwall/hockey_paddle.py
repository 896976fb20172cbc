"""Air hockey paddles, steered by keyboard or by a body tracker."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Protocol

import pygame

from climbwall.vectors import Vec2

SCALE_FACTOR = 0.70711
OUTLINE_WIDTH = 5

KeyPressed = Callable[[int], bool]


class Limb(IntEnum):
    """Tracked limb, in the order the tracker reports them."""

    HAND = 0
    ELBOW = 1
    FOOT = 2
    KNEE = 3


class LimbTracker(Protocol):
    """What the games need from a body tracker."""

    def limb_depth(self, limb: Limb, left: bool) -> float: ...

    def limb_position(self, limb: Limb, left: bool) -> Vec2: ...

    def limb_velocity(self, limb: Limb, left: bool) -> Vec2: ...

    def update(self, with_body_mask: bool) -> None: ...


class Paddle:
    """A round paddle with a position and the velocity it moved with last."""

    def __init__(
        self,
        radius: float = 0.0,
        color: tuple = (0, 0, 0),
        position: Vec2 = Vec2(),
        speed: float = 0.0,
        update_time: float = 0.0,
        up: int = pygame.K_w,
        down: int = pygame.K_s,
        left: int = pygame.K_a,
        right: int = pygame.K_d,
    ) -> None:
        self.radius = radius
        self.color = color
        self.position = position
        self.velocity = Vec2()
        self.speed = speed
        self.update_time = update_time
        self.keys = (up, down, left, right)
        self.valid = True
        self._input = Vec2()

    def handle_input(self, is_pressed: KeyPressed) -> None:
        """Read the paddle's four keys into the velocity used by the next update."""
        up, down, left, right = self.keys
        vx = vy = 0.0
        if is_pressed(up):
            vy -= self.speed
        if is_pressed(down):
            vy += self.speed
        if is_pressed(left):
            vx -= self.speed
        if is_pressed(right):
            vx += self.speed
        if vx != 0 and vy != 0:
            vx *= SCALE_FACTOR
            vy *= SCALE_FACTOR
        self._input = Vec2(vx, vy)

    def update(self, tracker: LimbTracker, limb: Limb, left: bool, kinect_control: bool) -> None:
        """Move the paddle, following the tracked limb or the keyboard input."""
        if kinect_control:
            position = velocity = Vec2()
            if tracker.limb_depth(limb, left) > 1:
                position = tracker.limb_position(limb, left)
                velocity = tracker.limb_velocity(limb, left)
            self.position = position
            self.velocity = velocity
        else:
            self.velocity = self._input
            self.position = self.position + self.velocity * self.update_time

    def is_within(self, width: int, height: int, left: bool) -> bool:
        """Whether the paddle is inside its own half of a ``width`` x ``height`` field."""
        x, y = self.position
        half = int(width) // 2
        if y < 0 or y > height:
            return False
        if left:
            return not (x < 0 or x > half)
        return not (x < half or x > width)

    def render(self, surface: pygame.Surface, left: bool) -> None:
        """Draw the paddle: filled in its own half, only a ring outside it."""
        self.valid = self.is_within(surface.get_width(), surface.get_height(), left)
        if self.radius <= 0:
            return
        center = (self.position.x, self.position.y)
        if self.valid:
            pygame.draw.circle(surface, self.color, center, self.radius)
        else:
            pygame.draw.circle(surface, self.color, center, self.radius, OUTLINE_WIDTH)

    def move_to(self, position: Vec2) -> None:
        """Place the paddle at ``position``."""
        self.position = position