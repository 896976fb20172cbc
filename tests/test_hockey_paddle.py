import pygame
import pytest

from climbwall.hockey_paddle import SCALE_FACTOR, Limb, Paddle
from climbwall.vectors import Vec2


class FakeTracker:
    def __init__(self, depth, position, velocity):
        self.depth = depth
        self.position = position
        self.velocity = velocity
        self.calls = []

    def limb_depth(self, limb, left):
        self.calls.append((limb, left))
        return self.depth

    def limb_position(self, limb, left):
        return self.position

    def limb_velocity(self, limb, left):
        return self.velocity

    def update(self, with_body_mask):
        pass


def pressed(*keys):
    return lambda key: key in keys


def test_single_key_moves_at_full_speed():
    paddle = Paddle(10.0, (255, 0, 0), Vec2(100.0, 100.0), 800.0, 0.5)
    paddle.handle_input(pressed(pygame.K_w))
    paddle.update(None, Limb.HAND, True, False)
    assert paddle.velocity == Vec2(0.0, -800.0)
    assert paddle.position.x == pytest.approx(100.0)
    assert paddle.position.y == pytest.approx(100.0 - 800.0 * 0.5)


def test_diagonal_is_scaled():
    paddle = Paddle(10.0, (255, 0, 0), Vec2(), 800.0, 0.1)
    paddle.handle_input(pressed(pygame.K_s, pygame.K_d))
    paddle.update(None, Limb.HAND, True, False)
    assert paddle.velocity.x == pytest.approx(800.0 * SCALE_FACTOR)
    assert paddle.velocity.y == pytest.approx(800.0 * SCALE_FACTOR)


def test_opposite_keys_cancel():
    paddle = Paddle(10.0, (0, 0, 0), Vec2(5.0, 5.0), 800.0, 1.0)
    paddle.handle_input(pressed(pygame.K_a, pygame.K_d))
    paddle.update(None, Limb.HAND, True, False)
    assert paddle.velocity == Vec2(0.0, 0.0)
    assert paddle.position == Vec2(5.0, 5.0)


def test_custom_keys_are_used():
    paddle = Paddle(10.0, (0, 0, 0), Vec2(), 800.0, 1.0,
                    pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT)
    paddle.handle_input(pressed(pygame.K_w))
    paddle.update(None, Limb.HAND, False, False)
    assert paddle.velocity == Vec2(0.0, 0.0)
    paddle.handle_input(pressed(pygame.K_LEFT))
    paddle.update(None, Limb.HAND, False, False)
    assert paddle.velocity == Vec2(-800.0, 0.0)


def test_tracker_controls_when_close_enough():
    tracker = FakeTracker(2.0, Vec2(30.0, 40.0), Vec2(1.0, 2.0))
    paddle = Paddle(10.0, (0, 0, 0))
    paddle.update(tracker, Limb.FOOT, False, True)
    assert paddle.position == Vec2(30.0, 40.0)
    assert paddle.velocity == Vec2(1.0, 2.0)
    assert tracker.calls == [(Limb.FOOT, False)]


def test_tracker_too_close_resets_to_origin():
    tracker = FakeTracker(1.0, Vec2(30.0, 40.0), Vec2(1.0, 2.0))
    paddle = Paddle(10.0, (0, 0, 0), Vec2(7.0, 7.0))
    paddle.update(tracker, Limb.HAND, True, True)
    assert paddle.position == Vec2(0.0, 0.0)
    assert paddle.velocity == Vec2(0.0, 0.0)


@pytest.mark.parametrize(
    "position, left, expected",
    [
        (Vec2(25.0, 50.0), True, True),
        (Vec2(75.0, 50.0), True, False),
        (Vec2(75.0, 50.0), False, True),
        (Vec2(25.0, 50.0), False, False),
        (Vec2(25.0, -1.0), True, False),
        (Vec2(25.0, 101.0), True, False),
    ],
)
def test_is_within_half(position, left, expected):
    assert Paddle(5.0, (0, 0, 0), position).is_within(100, 100, left) is expected


def test_half_uses_integer_division():
    paddle = Paddle(5.0, (0, 0, 0), Vec2(50.5, 10.0))
    assert paddle.is_within(101, 100, True) is False
    assert paddle.is_within(101, 100, False) is True


def test_render_filled_in_own_half():
    surface = pygame.Surface((100, 100))
    paddle = Paddle(10.0, (255, 0, 0), Vec2(25.0, 50.0))
    paddle.render(surface, True)
    assert paddle.valid is True
    assert tuple(surface.get_at((25, 50)))[:3] == (255, 0, 0)


def test_render_ring_in_other_half():
    surface = pygame.Surface((100, 100))
    paddle = Paddle(10.0, (255, 0, 0), Vec2(75.0, 50.0))
    paddle.render(surface, True)
    assert paddle.valid is False
    assert tuple(surface.get_at((75, 50)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((83, 50)))[:3] == (255, 0, 0)


def test_move_to():
    paddle = Paddle(10.0, (0, 0, 0))
    paddle.move_to(Vec2(3.0, 4.0))
    assert paddle.position == Vec2(3.0, 4.0)