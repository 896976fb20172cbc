import time

import pygame
import pytest

from climbwall.config import TerritoryConfig
from climbwall.territory_starter import Starter, main
from climbwall.territory_states import StateType
from climbwall.vectors import Vec2


class FakeTracker:
    def limb_depth(self, limb, left):
        return 0.0

    def limb_position(self, limb, left):
        return Vec2()

    def limb_velocity(self, limb, left):
        return Vec2()

    def update(self, with_body_mask):
        return None

    def body_mask(self):
        return []

    def simplify_body_mask(self):
        return None

    def project(self, point):
        return point


class FakeServer:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = 0

    def get_data(self):
        self.calls += 1
        if self.replies:
            return self.replies.pop(0)
        return [1, 4, 4, 0, 0]


def make_starter():
    config = TerritoryConfig()
    surface = pygame.Surface((int(config.screen_width), int(config.screen_height)))
    return Starter(config, FakeTracker(), surface)


def test_starter_uses_config():
    starter = make_starter()
    assert starter.update_time == pytest.approx(1.0 / starter.config.fps)
    assert starter.world.width == int(starter.config.screen_width)
    assert starter.manager.current_state() is StateType.PREPARATION


def test_client_data_waits_for_poll_interval():
    starter = make_starter()
    server = FakeServer([[1, 2, 3]])
    assert starter.client_data(server) == []
    assert server.calls == 0


def test_client_data_reads_after_interval():
    starter = make_starter()
    starter.poll_interval = 0.0
    time.sleep(0.001)
    server = FakeServer([[1, 2, 3]])
    assert starter.client_data(server) == [1, 2, 3]
    assert server.calls == 1


def test_back_button_ends_session():
    starter = make_starter()
    starter.poll_interval = 0.0
    server = FakeServer([[1, 4, 0, 0, 0], [1, 4, 0, 0, 0, 1, 4, 4, 0, 0]])
    starter.start(server)
    assert starter.manager.current_state() is StateType.EXITING
    assert server.calls == 2


def test_start_returns_when_already_exiting():
    starter = make_starter()
    starter.manager.activate_state(StateType.EXITING)
    server = FakeServer([])
    starter.start(server)
    assert server.calls == 0


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0