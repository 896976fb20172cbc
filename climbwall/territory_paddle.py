"""Territory paddles: round markers steered by keyboard or by a body tracker."""

from __future__ import annotations

import pygame

from climbwall.hockey_paddle import SCALE_FACTOR, KeyPressed, Limb, LimbTracker
from climbwall.vectors import Vec2


class Paddle:
    """A round marker with a position and the velocity it moved with last."""

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

    def move_to(self, position: Vec2) -> None:
        """Place the paddle at ``position``."""
        self.position = position

    def render(self, surface: pygame.Surface) -> None:
        """Draw the paddle as a filled circle."""
        if self.radius > 0:
            pygame.draw.circle(surface, self.color, (self.position.x, self.position.y), self.radius)