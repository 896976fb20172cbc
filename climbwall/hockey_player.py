"""An air hockey player: a score and the paddles it steers."""

from __future__ import annotations

import pygame

from climbwall.hockey_paddle import KeyPressed, Limb, LimbTracker, Paddle
from climbwall.vectors import Vec2

KEYBOARD_SPEED = 800.0

_LEFT_KEYS = (pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d)
_RIGHT_KEYS = (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)


class Player:
    """One side of the table, with one paddle per tracked limb or one keyboard paddle."""

    def __init__(
        self,
        radius: float,
        color: tuple,
        update_time: float,
        tracker: LimbTracker,
        left: bool,
        kinect_control: bool,
    ) -> None:
        self.tracker = tracker
        self.left = left
        self.kinect_control = kinect_control
        self._score = 0
        if kinect_control:
            self.paddles = [Paddle(radius, color, Vec2(), 0.0, 0.0, *_LEFT_KEYS) for _ in Limb]
        else:
            keys = _LEFT_KEYS if left else _RIGHT_KEYS
            self.paddles = [Paddle(radius, color, Vec2(), KEYBOARD_SPEED, update_time, *keys)]

    @property
    def n_limbs(self) -> int:
        return len(self.paddles)

    @property
    def score(self) -> int:
        return self._score

    def handle_input(self, is_pressed: KeyPressed) -> None:
        for paddle in self.paddles:
            paddle.handle_input(is_pressed)

    def update(self) -> None:
        for limb, paddle in zip(Limb, self.paddles):
            paddle.update(self.tracker, limb, self.left, self.kinect_control)

    def render(self, surface: pygame.Surface) -> None:
        for paddle in self.paddles:
            paddle.render(surface, self.left)

    def scored(self) -> None:
        """Count one goal for this player."""
        self._score += 1

    def reset(self) -> None:
        self._score = 0