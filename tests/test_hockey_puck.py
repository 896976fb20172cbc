import pygame
import pytest

from climbwall.config import HockeyConfig
from climbwall.hockey_puck import Puck
from climbwall.vectors import Vec2


def make_config(tmp_path, **kwargs):
    kwargs.setdefault("texture_puck_path", str(tmp_path / "missing.png"))
    kwargs.setdefault("trace_capacity", 4)
    kwargs.setdefault("trace_min_radius", 2.0)
    return HockeyConfig(**kwargs)


def test_update_moves_and_records_trace(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(50.0, 50.0), Vec2(10.0, -20.0), make_config(tmp_path))
    puck.update(0.5)
    assert puck.position == Vec2(50.0, 50.0) + Vec2(10.0, -20.0) * 0.5
    first = puck.position
    puck.update(0.5)
    centres = [centre for _, centre in puck.trace_points()]
    assert centres[0] == first
    assert centres[1] == Vec2(50.0, 50.0)


def test_trace_radii_shrink_to_minimum(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(), Vec2(), make_config(tmp_path))
    radii = [radius for radius, _ in puck.trace_points()]
    assert len(radii) == puck.capacity
    assert all(a > b for a, b in zip(radii, radii[1:]))
    assert radii[-1] == pytest.approx(2.0)


def test_trace_wraps_around(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(), Vec2(1.0, 0.0), make_config(tmp_path))
    for _ in range(puck.capacity + 2):
        puck.update(1.0)
    centres = [centre for _, centre in puck.trace_points()]
    assert centres[0] == puck.position - Vec2(1.0, 0.0)
    assert len(set(centres)) == puck.capacity


def test_top_wall_bounce(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(50.0, 5.0), Vec2(3.0, -4.0), make_config(tmp_path))
    assert puck.walls_collide(100.0, 100.0) is True
    assert puck.velocity == Vec2(3.0, 4.0)
    assert puck.position == Vec2(50.0, puck.radius + 1.0)


def test_bottom_wall_bounce(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(50.0, 95.0), Vec2(3.0, 4.0), make_config(tmp_path))
    assert puck.walls_collide(100.0, 100.0) is True
    assert puck.velocity == Vec2(3.0, -4.0)
    assert puck.position == Vec2(50.0, 100.0 - puck.radius - 1.0)


def test_no_wall_hit(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(50.0, 50.0), Vec2(3.0, 4.0), make_config(tmp_path))
    assert puck.walls_collide(100.0, 100.0) is False
    assert puck.velocity == Vec2(3.0, 4.0)
    assert puck.position == Vec2(50.0, 50.0)


def test_reset_clears_trace(tmp_path):
    puck = Puck(10.0, (255, 255, 255), Vec2(5.0, 5.0), Vec2(1.0, 1.0), make_config(tmp_path))
    puck.update(1.0)
    puck.reset(Vec2(20.0, 30.0), Vec2(-1.0, 0.0))
    assert puck.position == Vec2(20.0, 30.0)
    assert puck.velocity == Vec2(-1.0, 0.0)
    assert puck.trace == [Vec2()] * puck.capacity


def test_zero_capacity_rejected(tmp_path):
    with pytest.raises(ValueError):
        Puck(10.0, (255, 255, 255), Vec2(), Vec2(), make_config(tmp_path, trace_capacity=0))


def test_render_draws_texture(tmp_path):
    image = pygame.Surface((8, 8))
    image.fill((0, 0, 255))
    path = tmp_path / "puck.png"
    pygame.image.save(image, str(path))
    puck = Puck(10.0, (255, 255, 255), Vec2(50.0, 50.0), Vec2(),
                make_config(tmp_path, texture_puck_path=str(path)))
    surface = pygame.Surface((100, 100))
    puck.render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 255)