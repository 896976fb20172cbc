"""The single full-screen window every game draws into."""

from __future__ import annotations

import functools

import pygame

SCREEN_WIDTH = 1920.0
SCREEN_HEIGHT = 1200.0
WINDOW_SIZE = (1920, 1080)
WINDOW_TITLE = "window"


@functools.lru_cache(maxsize=None)
def get_window() -> pygame.Surface:
    """Open the full-screen window once and return its surface."""
    pygame.display.init()
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.FULLSCREEN)
    pygame.display.set_caption(WINDOW_TITLE)
    return surface