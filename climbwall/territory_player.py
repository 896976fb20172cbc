"""A territory player: markers that paint map cells and the count of cells held."""

from __future__ import annotations

from typing import Protocol

import pygame

from climbwall.hockey_paddle import KeyPressed, Limb, LimbTracker
from climbwall.territory_paddle import Paddle
from climbwall.vectors import Vec2

KEYBOARD_SPEED = 800.0

_LEFT_KEYS = (pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d)
_RIGHT_KEYS = (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)


class _Grid(Protocol):
    size: int

    def set_enabled(self, i: int, j: int, left: bool) -> None: ...


class Player:
    """One side of the game, with one paddle per tracked limb or one keyboard paddle."""

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
        """Number of cells this player holds."""
        return self._score

    def handle_input(self, is_pressed: KeyPressed) -> None:
        for paddle in self.paddles:
            paddle.handle_input(is_pressed)

    def update(self, game_map: _Grid) -> None:
        """Move every paddle and claim the square of cells it covers."""
        cell = game_map.size
        for limb, paddle in zip(Limb, self.paddles):
            paddle.update(self.tracker, limb, self.left, self.kinect_control)
            reach = int(paddle.radius / cell)
            x_center = int(paddle.position.x / cell)
            y_center = int(paddle.position.y / cell)
            for i in range(x_center - reach, x_center + reach + 1):
                for j in range(y_center - reach, y_center + reach + 1):
                    game_map.set_enabled(i, j, self.left)

    def captured_cell(self) -> None:
        self._score += 1

    def lost_cell(self) -> None:
        self._score -= 1

    def reset(self) -> None:
        self._score = 0