"""Run a territory match in a fixed-step loop, listening for the menu client."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Protocol, Sequence

import pygame

from climbwall.config import TerritoryConfig
from climbwall.hockey_paddle import KeyPressed, Limb
from climbwall.screen import get_window
from climbwall.territory_states import StateManager, StateType
from climbwall.territory_world import TerritoryTracker, World
from climbwall.vectors import Vec2

SERVER_POLL_INTERVAL = 0.5
BUTTON_BYTE = 2
MESSAGE_LENGTH = 5
BACK_BUTTON = 4

STANDALONE_WIDTH = 1024.0
STANDALONE_HEIGHT = 768.0
STANDALONE_FPS = 30.0

_NO_KEYS: frozenset[int] = frozenset()
_EMPTY_CELL = 255


class _DataSource(Protocol):
    def get_data(self) -> list[int]: ...


def _poll_input() -> tuple[list, KeyPressed]:
    if not pygame.display.get_init() or pygame.display.get_surface() is None:
        return [], _NO_KEYS.__contains__
    events = pygame.event.get()
    pressed = pygame.key.get_pressed()
    return events, lambda key: bool(pressed[key])


class _StillTracker:
    """A tracker holding one fixed reading and body mask; by default it sees nobody."""

    def __init__(
        self,
        depth: float = 0.0,
        position: Vec2 | None = None,
        velocity: Vec2 | None = None,
        mask: Sequence[Sequence[int]] = (),
        scale: float = 1.0,
    ) -> None:
        self.depth = depth
        self.position = position if position is not None else Vec2()
        self.velocity = velocity if velocity is not None else Vec2()
        self.mask = [list(row) for row in mask]
        self.scale = scale
        self.frames = 0

    def limb_depth(self, limb: Limb, left: bool) -> float:
        return self.depth

    def limb_position(self, limb: Limb, left: bool) -> Vec2:
        return self.position * 1.0

    def limb_velocity(self, limb: Limb, left: bool) -> Vec2:
        return self.velocity * 1.0

    def update(self, with_body_mask: bool) -> None:
        self.frames += 1

    def body_mask(self) -> Sequence[Sequence[int]]:
        return self.mask

    def simplify_body_mask(self) -> None:
        # Anything that is not one of the two players counts as empty.
        self.mask = [[cell if cell in (0, 1) else _EMPTY_CELL for cell in row] for row in self.mask]

    def project(self, point: Vec2) -> Vec2:
        return point * self.scale


def _run(manager: StateManager, update_time: float, after_frame: Callable[[], None] | None = None) -> None:
    """Step the manager at a fixed rate and render until it exits."""
    previous = time.perf_counter()
    elapsed = 0.0
    while manager.current_state() is not StateType.EXITING:
        events, is_pressed = _poll_input()
        manager.process_events(events, is_pressed)
        now = time.perf_counter()
        elapsed += now - previous
        previous = now

        while elapsed > update_time:
            events, is_pressed = _poll_input()
            manager.process_events(events, is_pressed)
            manager.update(update_time)
            elapsed -= update_time

        manager.render()
        time.sleep(1e-6)

        if after_frame is not None:
            after_frame()


class Starter:
    """Owns the world and state manager of one territory session."""

    def __init__(self, config: TerritoryConfig, tracker: TerritoryTracker, surface: pygame.Surface) -> None:
        self.config = config
        self.tracker = tracker
        self.update_time = 1.0 / config.fps
        self.world = World(
            config.screen_width,
            config.screen_height,
            self.update_time,
            tracker,
            config.kinect_control,
            config,
            surface,
        )
        self.manager = StateManager(StateType.PREPARATION, self.world, tracker, config.kinect_control)
        self.poll_interval = SERVER_POLL_INTERVAL
        self._last_poll = time.perf_counter()

    def start(self, server: _DataSource | None) -> None:
        """Run until the game exits or the client presses its back button."""

        def check_client() -> None:
            if server is None:
                return
            # Several messages may pile up between polls; each carries its button byte.
            data = self.client_data(server)
            if BACK_BUTTON in data[BUTTON_BYTE::MESSAGE_LENGTH]:
                self.manager.activate_state(StateType.EXITING)

        _run(self.manager, self.update_time, check_client)

    def client_data(self, server: _DataSource) -> list[int]:
        """Read the client's messages, at most once per poll interval."""
        if time.perf_counter() - self._last_poll <= self.poll_interval:
            return []
        data = server.get_data()
        self._last_poll = time.perf_counter()
        return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="climbwall-territory", description="Play territory on the wall.")
    parser.parse_args(argv)

    pygame.init()
    try:
        tracker = _StillTracker()
        update_time = 1.0 / STANDALONE_FPS
        world = World(
            STANDALONE_WIDTH, STANDALONE_HEIGHT, update_time, tracker, False, TerritoryConfig(), get_window()
        )
        manager = StateManager(StateType.PREPARATION, world, tracker, False)
        _run(manager, update_time)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())