"""Air hockey game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Iterable

import pygame

from climbwall.hockey_paddle import KeyPressed, LimbTracker
from climbwall.hockey_world import BLACK, World
from climbwall.vectors import Vec2, align_center

WHITE = (255, 255, 255)


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
        return f"{type(self).__name__}({self.state_type.name}, {self.time_elapsed:g})"


class StatePreparation(State):
    """Players hold a paddle on their ready button to start."""

    def process_events(self, is_pressed: KeyPressed) -> None:
        self.world.process_events(is_pressed)

    def update(self, delta: float) -> None:
        super().update(delta)
        world = self.world
        world.left.update()
        world.right.update()
        world.left_ready.update(world.left.paddles)
        world.right_ready.update(world.right.paddles)

    def render(self) -> None:
        world = self.world
        world.surface.fill(BLACK)
        world.left.render(world.surface)
        world.right.render(world.surface)
        world.draw_halves()
        world.left_ready.render(world.surface)
        world.right_ready.render(world.surface)
        _present(world.surface)

    def switch_to(self) -> StateType:
        if self.world.left_ready.activated and self.world.right_ready.activated:
            return StateType.GAME
        return StateType.PREPARATION


class StateGame(State):
    """The match itself, until time runs out or a player reaches the max score."""

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
        config = self.world.config
        if (
            self.time_elapsed > config.game_length
            or self.world.left.score == config.max_score
            or self.world.right.score == config.max_score
        ):
            return StateType.RESULT
        return StateType.GAME


class StateResult(State):
    """Final scores, with the winner's colour pushing across the screen."""

    def __init__(self, state_type: StateType, world: World) -> None:
        super().__init__(state_type, world)
        self.left_text = self.right_text = self.sign_text = ""
        self.left_text_pos = self.right_text_pos = self.sign_pos = Vec2()

    def sign(self) -> str:
        """Comparison of the left score with the right one."""
        left, right = self.world.left.score, self.world.right.score
        if left > right:
            return ">"
        if left < right:
            return "<"
        return "="

    def _text_size(self, text: str) -> tuple[int, int]:
        font = self.world.result_font
        return font.size(text) if font is not None else (0, 0)

    def reset(self) -> None:
        super().reset()
        world = self.world
        border = world.result_border_position
        self.left_text = str(world.left.score)
        self.right_text = str(world.right.score)
        self.sign_text = self.sign()
        self.left_text_pos = align_center(self._text_size(self.left_text), (0, 0), (border, world.height))
        self.right_text_pos = align_center(
            self._text_size(self.right_text), (border, 0), (world.width - border, world.height)
        )
        self.sign_pos = align_center(self._text_size(self.sign_text), (0, 0), (world.width, world.height))

    def update(self, delta: float) -> None:
        super().update(delta)
        direction = {">": 1.0, "<": -1.0}.get(self.sign(), 0.0)
        self.world.result_border_position += self.world.result_border_velocity * direction * delta

    def render(self) -> None:
        world = self.world
        surface = world.surface
        surface.fill(BLACK)
        border = round(world.result_border_position)
        pygame.draw.rect(surface, world.config.red, pygame.Rect(0, 0, max(0, border), world.height))
        pygame.draw.rect(
            surface, world.config.green, pygame.Rect(border, 0, max(0, world.width - border), world.height)
        )
        font = world.result_font
        if font is not None:
            texts = [(self.left_text, self.left_text_pos), (self.right_text, self.right_text_pos)]
            if self.time_elapsed > world.config.result_sign_delay:
                texts.append((self.sign_text, self.sign_pos))
            for text, pos in texts:
                surface.blit(font.render(text, True, WHITE), (pos.x, pos.y))
        _present(surface)

    def switch_to(self) -> StateType:
        if self.time_elapsed > self.world.config.result_demonstration_time:
            return StateType.EXITING
        return StateType.RESULT


class StateExiting(State):
    """The final state: the game is over."""

    def switch_to(self) -> StateType:
        return StateType.EXITING


class StateManager:
    """Holds one state object per phase and moves between them."""

    def __init__(self, initial: StateType, world: World, tracker: LimbTracker, kinect_control: bool) -> None:
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
            self.tracker.update(False)
        current.update(delta)
        next_state = current.switch_to()
        if next_state != self._current:
            self.activate_state(next_state)

    def render(self) -> None:
        self.states[self._current].render()