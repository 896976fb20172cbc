import pygame

from climbwall.hockey_button import GREEN, YELLOW, ReadyButton
from climbwall.hockey_paddle import Paddle
from climbwall.vectors import Vec2


def paddle_at(x, y):
    return Paddle(5.0, (0, 0, 0), Vec2(x, y))


def test_inactive_by_default():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    assert button.activated is False
    assert button.color == YELLOW


def test_edge_counts_as_inside():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    button.update([paddle_at(40.0, 60.0)])
    assert button.activated is True
    assert button.color == GREEN


def test_outside_paddle_does_not_activate():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    button.update([paddle_at(39.0, 50.0), paddle_at(50.0, 61.0)])
    assert button.activated is False
    assert button.color == YELLOW


def test_any_paddle_activates_and_leaving_deactivates():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    button.update([paddle_at(0.0, 0.0), paddle_at(50.0, 50.0)])
    assert button.activated is True
    button.update([paddle_at(0.0, 0.0)])
    assert button.activated is False


def test_render_tints_texture():
    texture = pygame.Surface((4, 4))
    texture.fill((255, 255, 255))
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    button.set_texture(texture)
    surface = pygame.Surface((100, 100))
    button.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == YELLOW
    button.update([paddle_at(50.0, 50.0)])
    button.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == GREEN
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_render_without_texture_draws_nothing():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(20.0, 20.0))
    surface = pygame.Surface((100, 100))
    button.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)