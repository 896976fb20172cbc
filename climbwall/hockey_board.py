"""The air hockey scoreboard: two scores and the remaining time."""

from __future__ import annotations

from typing import NamedTuple, Protocol

import pygame

from climbwall.config import HockeyConfig
from climbwall.vectors import Vec2, align_center

WHITE = (255, 255, 255)
OUTLINE_WIDTH = 10


class _Scored(Protocol):
    @property
    def score(self) -> int: ...


class _Box(NamedTuple):
    x: float
    y: float
    w: float
    h: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.w, self.h)

    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.w), round(self.h))


def time_line(seconds: float) -> str:
    """Format whole seconds as ``MM:SS``, truncating toward zero."""
    total = int(seconds)
    sign = -1 if total < 0 else 1
    mins, secs = divmod(abs(total), 60)
    return f"{sign * mins:02d}:{sign * secs:02d}"


class Scoreboard:
    """Score cells for both players around a countdown timer."""

    def __init__(self, left: _Scored, right: _Scored, game_duration: float, config: HockeyConfig) -> None:
        self.left = left
        self.right = right
        self.game_duration = game_duration
        self.remaining_time = game_duration
        self.left_color = config.red
        self.right_color = config.green
        self.font = self._load_font(config.font_scoreboard_path, config.font_size)

        top = 0.0 if config.top_position else config.screen_height - config.board_height
        middle = config.screen_width / 2
        self.left_border = _Box(
            middle - config.timer_width / 2 - config.score_width, top, config.score_width, config.board_height
        )
        self.right_border = _Box(middle + config.timer_width / 2, top, config.score_width, config.board_height)
        self.time_border = _Box(
            middle - config.timer_width / 2 - 10.0, top, config.timer_width + 20.0, config.board_height
        )

        self.left_text = str(left.score)
        self.right_text = str(right.score)
        self.timer_text = time_line(self.remaining_time)
        self.left_text_pos = self.timer_text_pos = self.right_text_pos = Vec2()

    @staticmethod
    def _load_font(path: str, size: int) -> pygame.font.Font | None:
        try:
            pygame.font.init()
            font = pygame.font.Font(path, size)
        except (pygame.error, OSError):
            print(f"Failed to load font for scoreboard: {path}")
            return None
        print(f"Successfully loaded font for scoreboard: {path}")
        return font

    def _text_size(self, text: str) -> tuple[int, int]:
        return self.font.size(text) if self.font is not None else (0, 0)

    def update(self, delta: float, score_changed: bool) -> None:
        """Refresh the scores if they changed and count the timer down by ``delta``."""
        if score_changed:
            self.left_text = str(self.left.score)
            self.right_text = str(self.right.score)
        self.remaining_time -= delta
        self.timer_text = time_line(self.remaining_time)

        def place(text: str, box: _Box) -> Vec2:
            return align_center(self._text_size(text), box.position, box.size)

        self.left_text_pos = place(self.left_text, self.left_border)
        self.timer_text_pos = place(self.timer_text, self.time_border)
        self.right_text_pos = place(self.right_text, self.right_border)

    def render(self, surface: pygame.Surface) -> None:
        for box, fill in ((self.left_border, self.left_color), (self.right_border, self.right_color)):
            pygame.draw.rect(surface, fill, box.rect())
            pygame.draw.rect(surface, WHITE, box.rect(), OUTLINE_WIDTH)
        pygame.draw.rect(surface, WHITE, self.time_border.rect(), OUTLINE_WIDTH)
        if self.font is None:
            return
        for text, pos in (
            (self.left_text, self.left_text_pos),
            (self.timer_text, self.timer_text_pos),
            (self.right_text, self.right_text_pos),
        ):
            surface.blit(self.font.render(text, True, WHITE), (pos.x, pos.y))

    def reset(self) -> None:
        self.remaining_time = self.game_duration
        self.left_text = "0"
        self.right_text = "0"