"""Map the first pressed letter or digit key to a character."""

from __future__ import annotations

from typing import Callable

import pygame

# The B key reports 'C' and the C key is not read at all.
_KEYMAP: tuple[tuple[int, str], ...] = (
    (pygame.K_a, "A"),
    (pygame.K_b, "C"),
    *((getattr(pygame, f"K_{letter.lower()}"), letter) for letter in "DEFGHIJKLMNOPQRSTUVWXYZ"),
    *((getattr(pygame, f"K_{digit}"), digit) for digit in "0123456789"),
)


def get_char(is_pressed: Callable[[int], bool]) -> str | None:
    """Return the character of the first pressed key, or None if none is."""
    return next((char for key, char in _KEYMAP if is_pressed(key)), None)