"""Game settings for air hockey and territory, with a line-based loader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from climbwall.screen import SCREEN_HEIGHT, SCREEN_WIDTH

Color = tuple

RED = (204, 0, 0)
GREEN = (0, 102, 0)

_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT = re.compile(r"[+-]?\d+")
_UNSIGNED_RANGE = 2**32


@dataclass
class HockeyConfig:
    """Air hockey settings; ``apply_line`` updates them from config text."""

    # General
    fps: float = 120.0
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    kinect_control: bool = False
    fullscreen: bool = True

    # Game settings
    max_score: int = 5
    game_length: float = 180.0
    game_start_delay: float = 2.0

    # Result view
    result_demonstration_time: float = 7.0
    result_border_velocity: float = 400.0
    result_sign_delay: float = 2.0

    # Colors
    red: Color = RED
    green: Color = GREEN
    trace_color: Color = (243, 240, 240, 64)

    # Puck
    use_velocity_cap: bool = True
    max_puck_velocity: float = 800.0
    initial_puck_velocity: float = 400.0
    puck_radius: float = SCREEN_HEIGHT / 20
    trace_capacity: int = 20
    trace_min_radius: float = 10.0

    # Paddles
    paddle_radius: float = SCREEN_HEIGHT / 20

    # Collisions
    use_paddle_velocity: bool = True

    # Ready buttons
    left_ready_button_position_x: float = SCREEN_WIDTH / 4
    left_ready_button_position_y: float = SCREEN_HEIGHT / 2
    left_ready_button_size_x: float = SCREEN_WIDTH / 10
    left_ready_button_size_y: float = SCREEN_WIDTH / 10
    right_ready_button_position_x: float = SCREEN_WIDTH * 3 / 4
    right_ready_button_position_y: float = SCREEN_HEIGHT / 2
    right_ready_button_size_x: float = SCREEN_WIDTH / 10
    right_ready_button_size_y: float = SCREEN_WIDTH / 10

    # Scoreboard
    top_position: bool = True
    font_size: int = 60
    timer_width: float = 180.0
    score_width: float = 90.0
    board_height: float = 90.0

    # Resources
    font_result_path: str = "aerohockey/media/fonts/DINPro-Black.ttf"
    font_scoreboard_path: str = "aerohockey/media/fonts/DIN.ttf"
    sound_scored_path: str = "aerohockey/media/sounds/scored.wav"
    sound_hit_path: str = "aerohockey/media/sounds/hit.wav"
    sound_wall_path: str = "aerohockey/media/sounds/wall.wav"
    texture_background_path: str = "aerohockey/media/textures/background.jpg"
    texture_puck_path: str = "aerohockey/media/textures/puck.png"
    texture_left_hand_path: str = "aerohockey/media/textures/left_hand.png"
    texture_right_hand_path: str = "aerohockey/media/textures/right_hand.png"

    def apply_line(self, line: str) -> None:
        """Update every setting whose name occurs in ``line``.

        The value is read from the text after the first ``=``; lines starting
        with ``#`` are comments.
        """
        if line.startswith("#"):
            return
        value_text = line[line.find("=") + 1:]
        for name, attr in _HOCKEY_PARAMS:
            if name not in line:
                continue
            value = _extract(value_text, getattr(self, attr), attr in _UNSIGNED)
            setattr(self, attr, value)
            print(f"{name}: {_show(value)}")


_HOCKEY_PARAMS = (
    ("fps", "fps"),
    ("screen_width", "screen_width"),
    ("screen_height", "screen_height"),
    ("kinectControl", "kinect_control"),
    ("max_score", "max_score"),
    ("game_length", "game_length"),
    ("result_demonstration_time", "result_demonstration_time"),
    ("use_velocity_cap", "use_velocity_cap"),
    ("max_puck_velocity", "max_puck_velocity"),
    ("initial_puck_velocity", "initial_puck_velocity"),
    ("puck_radius", "puck_radius"),
    ("trace_capacity", "trace_capacity"),
    ("trace_min_radius", "trace_min_radius"),
    ("paddle_radius", "paddle_radius"),
    ("use_paddle_velocity", "use_paddle_velocity"),
    ("left_ready_button_position_x", "left_ready_button_position_x"),
    ("left_ready_button_position_y", "left_ready_button_position_y"),
    ("left_ready_button_size_x", "left_ready_button_size_x"),
    ("left_ready_button_size_y", "left_ready_button_size_y"),
    ("right_ready_button_position_x", "right_ready_button_position_x"),
    ("right_ready_button_position_y", "right_ready_button_position_y"),
    ("right_ready_button_size_x", "right_ready_button_size_x"),
    ("right_ready_button_size_y", "right_ready_button_size_y"),
    ("top_position", "top_position"),
    ("font_size", "font_size"),
    ("timer_width", "timer_width"),
    ("score_width", "score_width"),
    ("board_height", "board_height"),
    ("font_scoreboard_path", "font_scoreboard_path"),
    ("sound_scored_path", "sound_scored_path"),
    ("sound_hit_path", "sound_hit_path"),
    ("sound_wall_path", "sound_wall_path"),
    ("texture_background_path", "texture_background_path"),
    ("texture_puck_path", "texture_puck_path"),
    ("texture_left_hand_path", "texture_left_hand_path"),
    ("texture_right_hand_path", "texture_right_hand_path"),
)

_UNSIGNED = frozenset({"max_score"})


def _extract(text: str, current: Any, unsigned: bool = False) -> Any:
    """Read a value of the same type as ``current`` from the start of ``text``.

    An empty text leaves the value as it is; unreadable text gives zero,
    false, or (for strings) nothing is left to read so it is also unchanged.
    """
    text = text.lstrip()
    if not text:
        return current
    if isinstance(current, bool):
        match = _INT.match(text)
        return bool(int(match.group())) if match else False
    if isinstance(current, int):
        match = _INT.match(text)
        value = int(match.group()) if match else 0
        return value % _UNSIGNED_RANGE if unsigned else value
    if isinstance(current, float):
        match = _FLOAT.match(text)
        return float(match.group()) if match else 0.0
    return text.split()[0]


def _show(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def load_hockey_config(path: str | Path, config: HockeyConfig | None = None) -> HockeyConfig:
    """Read settings from the file at ``path`` into ``config`` and return it.

    A file that cannot be opened leaves the settings untouched.
    """
    config = config if config is not None else HockeyConfig()
    try:
        handle = open(path, encoding="utf-8")
    except OSError:
        print(f"Failed to open config file: {path}")
        return config
    print(f"Loading config from: {path}")
    with handle:
        for line in handle:
            config.apply_line(line.rstrip("\n"))
    return config


@dataclass
class TerritoryConfig:
    """Territory game settings."""

    fps: float = 120.0
    screen_width: float = 800.0
    screen_height: float = 600.0
    kinect_control: bool = False
    fullscreen: bool = True
    red: Color = RED
    green: Color = GREEN
    texture_left_hand_path: str = "territory/media/textures/left_hand.png"
    texture_right_hand_path: str = "territory/media/textures/right_hand.png"