"""Two-dimensional vectors and the small geometry helpers the games share."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence


class _AngleSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vec2:
        if isinstance(k, bool) or not isinstance(k, (int, float)):
            return NotImplemented
        return Vec2(self.x * k, self.y * k)

    def __rmul__(self, k: float) -> Vec2:
        return self.__mul__(k)

    def __truediv__(self, k: float) -> Vec2:
        if isinstance(k, bool) or not isinstance(k, (int, float)):
            return NotImplemented
        return Vec2(self.x / k, self.y / k)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


def len2(v: Vec2) -> float:
    """Squared length of a vector."""
    return v.x * v.x + v.y * v.y


def dot(v1: Vec2, v2: Vec2) -> float:
    """Dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y


def dist2(p1: Vec2, p2: Vec2) -> float:
    """Squared distance between two points."""
    return (p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2


def initial_velocity(speed: float, rng: _AngleSource | None = None) -> Vec2:
    """A velocity of the given speed in a random, not too vertical, direction."""
    source = rng if rng is not None else random
    angle = source.randrange(360)
    if 60 < angle < 150 or 240 < angle < 300:
        angle = (angle + 90) % 360
    radians = math.pi * angle / 180
    return Vec2(math.cos(radians), math.sin(radians)) * speed


def align_center(
    text_size: Sequence[float],
    border_position: Sequence[float],
    border_size: Sequence[float],
) -> Vec2:
    """Top-left corner at which text of ``text_size`` sits centred in a border.

    The text is centred horizontally, and its middle is placed a quarter of
    the border's height below the border's top.
    """
    text_w, text_h = text_size
    bx, by = border_position
    bw, bh = border_size
    return Vec2(bx + bw / 2 - text_w / 2, by + bh / 4 - text_h / 2)