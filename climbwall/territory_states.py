"""Territory game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Iterable

import pygame

from climbwall.hockey_paddle import KeyPressed
from climbwall.territory_world import BLACK, TerritoryTracker, World

GAME_LENGTH = 30.0
RESULT_LENGTH = 5.0


def _present(surface: pygame.Surface) -> None:
    if pygame.display.get_init() and surface is pygame.display.get_surface():
        pygame.display.flip()


class StateType(IntEnum):
    PREPARATION = 0
    GAME = 1
    RESULT = 2
    EXITING = 3


class State(ABC):
    """A phase of the game that tracks how long it has been active."""

    def __init__(self, state_type: StateType, world: World) -> None:
        self.state_type = state_type
        self.world = world
        self.time_elapsed = 0.0

    def process_events(self, is_pressed: KeyPressed) -> None:
        """Handle input; most states ignore it."""

    def update(self, delta: float) -> None:
        self.time_elapsed += delta

    def render(self) -> None:
        """Draw the state; states without a picture draw nothing."""

    def reset(self) -> None:
        self.time_elapsed = 0.0

    @abstractmethod
    def switch_to(self) -> StateType:
        """The state that should be active next."""

    def __repr__(self) -> str:
        return f"State {int(self.state_type)} {self.time_elapsed:g}"


class StatePreparation(State):
    """Players hold a paddle on their ready button to start."""

    def process_events(self, is_pressed: KeyPressed) -> None:
        self.world.process_events(is_pressed)

    def update(self, delta: float) -> None:
        super().update(delta)
        world = self.world
        world.left.update(world.map)
        world.right.update(world.map)
        world.left_ready.update(world.left.paddles)
        world.right_ready.update(world.right.paddles)

    def render(self) -> None:
        world = self.world
        world.surface.fill(BLACK)
        for paddle in (*world.left.paddles, *world.right.paddles):
            paddle.render(world.surface)
        world.left_ready.render(world.surface)
        world.right_ready.render(world.surface)
        _present(world.surface)

    def switch_to(self) -> StateType:
        if self.world.left_ready.activated and self.world.right_ready.activated:
            return StateType.GAME
        return StateType.PREPARATION


class StateGame(State):
    """The match itself, which lasts a fixed time."""

    def process_events(self, is_pressed: KeyPressed) -> None:
        self.world.process_events(is_pressed)

    def update(self, delta: float) -> None:
        super().update(delta)
        self.world.update()

    def render(self) -> None:
        self.world.render()

    def reset(self) -> None:
        super().reset()
        self.world.reset()

    def switch_to(self) -> StateType:
        if self.time_elapsed > GAME_LENGTH:
            return StateType.RESULT
        return StateType.GAME


class StateResult(State):
    """Shows the number of cells each player holds."""

    def update(self, delta: float) -> None:
        super().update(delta)
        self.world.board.update()

    def render(self) -> None:
        world = self.world
        world.surface.fill(BLACK)
        world.board.render(world.surface)
        _present(world.surface)

    def switch_to(self) -> StateType:
        if self.time_elapsed > RESULT_LENGTH:
            return StateType.EXITING
        return StateType.RESULT


class StateExiting(State):
    """The final state: the game is over."""

    def switch_to(self) -> StateType:
        return StateType.EXITING


class StateManager:
    """Holds one state object per phase and moves between them."""

    def __init__(
        self, initial: StateType, world: World, tracker: TerritoryTracker, kinect_control: bool
    ) -> None:
        self.world = world
        self.tracker = tracker
        self.kinect_control = kinect_control
        self._current = StateType(initial)
        self.states: dict[StateType, State] = {
            StateType.PREPARATION: StatePreparation(StateType.PREPARATION, world),
            StateType.GAME: StateGame(StateType.GAME, world),
            StateType.RESULT: StateResult(StateType.RESULT, world),
            StateType.EXITING: StateExiting(StateType.EXITING, world),
        }

    def current_state(self) -> StateType:
        return self._current

    def activate_state(self, state: StateType) -> None:
        """Make ``state`` current and reset it."""
        self._current = StateType(state)
        self.states[self._current].reset()

    def process_events(self, events: Iterable[pygame.event.Event], is_pressed: KeyPressed) -> None:
        """Exit on a window close event, then pass input to the current state."""
        for event in events:
            if event.type == pygame.QUIT:
                self._current = StateType.EXITING
        self.states[self._current].process_events(is_pressed)

    def update(self, delta: float) -> None:
        current = self.states[self._current]
        if self.kinect_control:
            self.tracker.update(True)
            self.tracker.simplify_body_mask()
        current.update(delta)
        next_state = current.switch_to()
        if next_state != self._current:
            self.activate_state(next_state)

    def render(self) -> None:
        self.states[self._current].render()