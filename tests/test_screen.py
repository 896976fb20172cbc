import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from climbwall.screen import WINDOW_TITLE, get_window  # noqa: E402


def test_window_is_shared():
    first = get_window()
    second = get_window()
    assert first is second


def test_window_is_the_display_surface():
    window = get_window()
    assert pygame.display.get_surface().get_size() == window.get_size()


def test_window_caption():
    window = get_window()
    width, height = window.get_size()
    assert width > 0 and height > 0
    assert pygame.display.get_caption()[0] == WINDOW_TITLE
    assert pygame.display.get_surface().get_size() == (width, height)