"""Run an air hockey match in a fixed-step loop, listening for the menu client."""

from __future__ import annotations

import argparse
import time
from typing import Protocol

import pygame

from climbwall.config import HockeyConfig, load_hockey_config
from climbwall.hockey_paddle import KeyPressed, Limb, LimbTracker
from climbwall.hockey_states import StateManager, StateType
from climbwall.hockey_world import World
from climbwall.screen import get_window
from climbwall.vectors import Vec2

DEFAULT_CONFIG_PATH = "Aerohockey/config/Aerohockey_config.txt"
SERVER_POLL_INTERVAL = 0.5
BUTTON_BYTE = 2
MESSAGE_LENGTH = 5
BACK_BUTTON = 4

_NO_KEYS: frozenset[int] = frozenset()


class _DataSource(Protocol):
    def get_data(self) -> list[int]: ...


def _poll_input() -> tuple[list, KeyPressed]:
    if not pygame.display.get_init() or pygame.display.get_surface() is None:
        return [], _NO_KEYS.__contains__
    events = pygame.event.get()
    pressed = pygame.key.get_pressed()
    return events, lambda key: bool(pressed[key])


class _StillTracker:
    """A tracker holding one fixed reading; by default it sees nobody."""

    def __init__(self, depth: float = 0.0, position: Vec2 | None = None, velocity: Vec2 | None = None) -> None:
        self.depth = depth
        self.position = position if position is not None else Vec2()
        self.velocity = velocity if velocity is not None else Vec2()
        self.frames = 0

    def limb_depth(self, limb: Limb, left: bool) -> float:
        return self.depth

    def limb_position(self, limb: Limb, left: bool) -> Vec2:
        return self.position * 1.0

    def limb_velocity(self, limb: Limb, left: bool) -> Vec2:
        return self.velocity * 1.0

    def update(self, with_body_mask: bool) -> None:
        self.frames += 1


class Starter:
    """Owns the world and state manager of one air hockey session."""

    def __init__(self, config: HockeyConfig, tracker: LimbTracker, surface: pygame.Surface) -> None:
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
        previous = time.perf_counter()
        elapsed = 0.0
        while self.manager.current_state() is not StateType.EXITING:
            events, is_pressed = _poll_input()
            self.manager.process_events(events, is_pressed)
            now = time.perf_counter()
            elapsed += now - previous
            previous = now

            while elapsed > self.update_time:
                events, is_pressed = _poll_input()
                self.manager.process_events(events, is_pressed)
                self.manager.update(self.update_time)
                elapsed -= self.update_time

            self.manager.render()
            time.sleep(1e-6)

            if server is None:
                continue
            # Several messages may pile up between polls; each carries its button byte.
            data = self.client_data(server)
            if BACK_BUTTON in data[BUTTON_BYTE::MESSAGE_LENGTH]:
                self.manager.activate_state(StateType.EXITING)

    def client_data(self, server: _DataSource) -> list[int]:
        """Read the client's messages, at most once per poll interval."""
        if time.perf_counter() - self._last_poll <= self.poll_interval:
            return []
        data = server.get_data()
        self._last_poll = time.perf_counter()
        return data


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="climbwall-hockey", description="Play air hockey on the wall.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="settings file to load")
    args = parser.parse_args(argv)

    config = load_hockey_config(args.config)
    pygame.init()
    try:
        Starter(config, _StillTracker(), get_window()).start(None)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())