import dataclasses

import pygame
import pytest

from climbwall.config import HockeyConfig
from climbwall.hockey_states import (
    State,
    StateExiting,
    StateManager,
    StatePreparation,
    StateResult,
    StateType,
)
from climbwall.hockey_world import World
from climbwall.vectors import Vec2


class FakeTracker:
    def __init__(self):
        self.updates = []

    def limb_depth(self, limb, left):
        return 0.0

    def limb_position(self, limb, left):
        return Vec2()

    def limb_velocity(self, limb, left):
        return Vec2()

    def update(self, with_body_mask):
        self.updates.append(with_body_mask)


class FixedAngle:
    def randrange(self, stop):
        return 0


@pytest.fixture
def config(tmp_path):
    missing = str(tmp_path / "missing")
    paths = {f.name: missing for f in dataclasses.fields(HockeyConfig) if f.name.endswith("_path")}
    return dataclasses.replace(HockeyConfig(), **paths)


@pytest.fixture
def tracker():
    return FakeTracker()


@pytest.fixture
def world(config, tracker):
    return World(800, 600, 1 / 120, tracker, False, config, pygame.Surface((800, 600)), FixedAngle())


@pytest.fixture
def manager(world, tracker):
    return StateManager(StateType.PREPARATION, world, tracker, False)


def test_manager_starts_in_initial_state(manager):
    assert manager.current_state() is StateType.PREPARATION


def test_preparation_waits_without_ready_players(manager):
    manager.update(0.5)
    assert manager.current_state() is StateType.PREPARATION
    assert manager.states[StateType.PREPARATION].time_elapsed == 0.5


def test_preparation_starts_game_when_both_ready(manager, world):
    world.left.paddles[0].move_to(world.left_ready.position)
    world.right.paddles[0].move_to(world.right_ready.position)
    manager.update(0.01)
    assert manager.current_state() is StateType.GAME
    assert manager.states[StateType.GAME].time_elapsed == 0.0


def test_game_ends_at_max_score(manager, world, config):
    manager.activate_state(StateType.GAME)
    for _ in range(config.max_score):
        world.left.scored()
    manager.update(0.01)
    assert manager.current_state() is StateType.RESULT


def test_game_ends_when_time_runs_out(manager, config):
    config.game_length = 0.05
    manager.activate_state(StateType.GAME)
    manager.update(0.01)
    assert manager.current_state() is StateType.GAME
    manager.update(0.1)
    assert manager.current_state() is StateType.RESULT


def test_result_sign_compares_scores(world):
    result = StateResult(StateType.RESULT, world)
    assert result.sign() == "="
    world.left.scored()
    assert result.sign() == ">"
    world.right.scored()
    world.right.scored()
    assert result.sign() == "<"


def test_result_border_moves_toward_loser(world, config):
    world.left.scored()
    result = StateResult(StateType.RESULT, world)
    result.reset()
    before = world.result_border_position
    result.update(0.5)
    assert world.result_border_position == pytest.approx(before + config.result_border_velocity * 0.5)


def test_result_border_still_on_draw(world):
    result = StateResult(StateType.RESULT, world)
    result.reset()
    before = world.result_border_position
    result.update(0.5)
    assert world.result_border_position == before
    assert result.sign_text == "="


def test_result_exits_after_demonstration(manager, config):
    manager.activate_state(StateType.RESULT)
    manager.update(config.result_demonstration_time / 2)
    assert manager.current_state() is StateType.RESULT
    manager.update(config.result_demonstration_time)
    assert manager.current_state() is StateType.EXITING


def test_quit_event_exits(manager):
    manager.process_events([pygame.event.Event(pygame.QUIT)], lambda key: False)
    assert manager.current_state() is StateType.EXITING


def test_manager_polls_tracker_in_kinect_mode(world, tracker):
    manager = StateManager(StateType.PREPARATION, world, tracker, True)
    manager.update(0.01)
    assert tracker.updates == [False]


def test_exiting_stays_exiting(world):
    assert StateExiting(StateType.EXITING, world).switch_to() is StateType.EXITING


def test_reset_clears_elapsed_time(world):
    state = StatePreparation(StateType.PREPARATION, world)
    state.update(1.5)
    assert state.time_elapsed == 1.5
    state.reset()
    assert state.time_elapsed == 0.0


def test_base_state_is_abstract(world):
    with pytest.raises(TypeError):
        State(StateType.GAME, world)