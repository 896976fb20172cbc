import pygame

from climbwall.territory_button import GREEN, YELLOW, ReadyButton
from climbwall.territory_paddle import Paddle
from climbwall.vectors import Vec2


def test_paddle_inside_activates():
    button = ReadyButton(Vec2(200.0, 200.0), Vec2(100.0, 100.0))
    button.update([Paddle(10.0, position=Vec2(0.0, 0.0)), Paddle(10.0, position=Vec2(240.0, 160.0))])
    assert button.activated is True
    assert button.color == GREEN


def test_edge_counts_as_inside():
    button = ReadyButton(Vec2(200.0, 200.0), Vec2(100.0, 100.0))
    button.update([Paddle(10.0, position=Vec2(250.0, 150.0))])
    assert button.activated is True


def test_paddle_outside_leaves_it_off():
    button = ReadyButton(Vec2(200.0, 200.0), Vec2(100.0, 100.0))
    button.update([Paddle(10.0, position=Vec2(200.0, 260.0))])
    assert button.activated is False
    assert button.color == YELLOW


def test_no_paddles():
    button = ReadyButton(Vec2(200.0, 200.0), Vec2(100.0, 100.0))
    button.update([])
    assert button.activated is False


def test_render_without_texture_draws_nothing():
    button = ReadyButton(Vec2(50.0, 50.0), Vec2(40.0, 40.0))
    surface = pygame.Surface((100, 100))
    button.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)


def test_render_places_texture_from_anchor():
    button = ReadyButton(Vec2(200.0, 200.0), Vec2(100.0, 100.0))
    texture = pygame.Surface((50, 50))
    texture.fill((255, 255, 255))
    button.set_texture(texture)
    surface = pygame.Surface((400, 400))
    button.render(surface)
    assert tuple(surface.get_at((150, 150)))[:3] == YELLOW
    assert tuple(surface.get_at((250, 250)))[:3] == (0, 0, 0)