"""The territory field: players, the cell map, scoreboard and ready buttons."""

from __future__ import annotations

from typing import Protocol

import pygame

from climbwall.config import TerritoryConfig
from climbwall.hockey_paddle import KeyPressed, LimbTracker
from climbwall.territory_board import Scoreboard
from climbwall.territory_button import ReadyButton
from climbwall.territory_map import BodyMaskTracker, Map
from climbwall.territory_player import Player
from climbwall.vectors import Vec2

TILE_PATH = "territory/media/textures/tile.jpg"
TILE_SIZE = 97
CELL_SIZE = 30
BLACK = (0, 0, 0)


class TerritoryTracker(LimbTracker, BodyMaskTracker, Protocol):
    """A tracker reporting both limbs and whole-body masks."""


def _load_image(path: str, what: str) -> pygame.Surface | None:
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        print(f"Failed to load {what}: {path}")
        return None
    print(f"Successfully loaded {what}: {path}")
    return image


def _load_tile() -> pygame.Surface | None:
    try:
        image = pygame.image.load(TILE_PATH)
    except (pygame.error, OSError):
        print("Failed to create body texture")
        return None
    w, h = image.get_size()
    return image.subsurface(pygame.Rect(0, 0, min(TILE_SIZE, w), min(TILE_SIZE, h))).copy()


def _present(surface: pygame.Surface) -> None:
    if pygame.display.get_init() and surface is pygame.display.get_surface():
        pygame.display.flip()


class World:
    """Everything on the territory field."""

    def __init__(
        self,
        width: float,
        height: float,
        update_time: float,
        tracker: TerritoryTracker,
        kinect_control: bool,
        config: TerritoryConfig,
        surface: pygame.Surface,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.update_time = update_time
        self.tracker = tracker
        self.kinect_control = kinect_control
        self.config = config
        self.surface = surface
        self.score_changed = False
        self.paused = False
        self.use_paddle_velocity = False

        radius = height / 20
        self.left = Player(radius, config.red, update_time, tracker, True, kinect_control)
        self.right = Player(radius, config.green, update_time, tracker, False, kinect_control)
        self.board = Scoreboard(self.left, self.right)
        self.map = Map(width, height, CELL_SIZE, self.left, self.right, config)
        self.left_ready = ReadyButton(Vec2(width / 4, height / 2), Vec2(width / 10, width / 10))
        self.right_ready = ReadyButton(Vec2(width * 3 / 4, height / 2), Vec2(width / 10, width / 10))

        tile = _load_tile()
        if tile is not None:
            self.map.set_texture(tile)
        # Each ready button shows the hand the opposite player raises.
        left_hand = _load_image(config.texture_left_hand_path, "left hand texture")
        if left_hand is not None:
            self.right_ready.set_texture(left_hand)
        right_hand = _load_image(config.texture_right_hand_path, "right hand texture")
        if right_hand is not None:
            self.left_ready.set_texture(right_hand)

    def process_events(self, is_pressed: KeyPressed) -> None:
        """Read keyboard input for both players unless the tracker steers them."""
        if not self.kinect_control:
            self.left.handle_input(is_pressed)
            self.right.handle_input(is_pressed)

    def update(self) -> None:
        """Claim cells from the body mask, or from the keyboard paddles."""
        self.map.update(self.tracker, self.kinect_control)
        if not self.kinect_control:
            self.left.update(self.map)
            self.right.update(self.map)

    def render(self) -> None:
        self.surface.fill(BLACK)
        self.map.render(self.surface)
        for paddle in (*self.left.paddles, *self.right.paddles):
            paddle.render(self.surface)
        _present(self.surface)

    def reset(self) -> None:
        self.left.reset()
        self.right.reset()
        self.board.reset()