"""The air hockey table: players, puck, scoreboard and ready buttons."""

from __future__ import annotations

import math

import pygame

from climbwall.config import HockeyConfig
from climbwall.hockey_board import Scoreboard
from climbwall.hockey_button import ReadyButton
from climbwall.hockey_paddle import KeyPressed, LimbTracker, Paddle
from climbwall.hockey_player import Player
from climbwall.hockey_puck import Puck
from climbwall.vectors import Vec2, dist2, dot, initial_velocity, len2

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BORDER_WIDTH = 10
LEFT_BORDER_COLOR = (242, 99, 80, 200)
RIGHT_BORDER_COLOR = (102, 214, 92, 200)
RESULT_FONT_SIZE = 400


def _load_sound(path: str, name: str) -> pygame.mixer.Sound | None:
    try:
        sound = pygame.mixer.Sound(path)
    except (pygame.error, OSError):
        print(f"Failed to load '{name}' sound: {path}")
        return None
    print(f"Successfully loaded '{name}' sound: {path}")
    return sound


def _load_image(path: str, what: str) -> pygame.Surface | None:
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        print(f"Failed to load {what}: {path}")
        return None
    print(f"Successfully loaded {what}: {path}")
    return image


def _load_font(path: str, size: int) -> pygame.font.Font | None:
    try:
        pygame.font.init()
        font = pygame.font.Font(path, size)
    except (pygame.error, OSError):
        print(f"Failed to load result font: {path}")
        return None
    print(f"Successfully loaded result font: {path}")
    return font


def _play(sound: pygame.mixer.Sound | None) -> None:
    if sound is not None:
        sound.play()


def _present(surface: pygame.Surface) -> None:
    if pygame.display.get_init() and surface is pygame.display.get_surface():
        pygame.display.flip()


class World:
    """Everything on the air hockey table and the physics between it."""

    def __init__(
        self,
        width: float,
        height: float,
        update_time: float,
        tracker: LimbTracker,
        kinect_control: bool,
        config: HockeyConfig,
        surface: pygame.Surface,
        rng=None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.update_time = update_time
        self.kinect_control = kinect_control
        self.config = config
        self.surface = surface
        self.rng = rng
        self.score_changed = False
        self.result_border_position = self.width / 2.0
        self.result_border_velocity = config.result_border_velocity

        self.puck = Puck(
            config.puck_radius,
            WHITE,
            Vec2(width / 2, height / 2),
            initial_velocity(config.initial_puck_velocity, rng),
            config,
        )
        self.left = Player(config.paddle_radius, config.red, update_time, tracker, True, kinect_control)
        self.right = Player(config.paddle_radius, config.green, update_time, tracker, False, kinect_control)
        self.board = Scoreboard(self.left, self.right, config.game_length, config)
        self.left_ready = ReadyButton(
            Vec2(config.left_ready_button_position_x, config.left_ready_button_position_y),
            Vec2(config.left_ready_button_size_x, config.left_ready_button_size_y),
        )
        self.right_ready = ReadyButton(
            Vec2(config.right_ready_button_position_x, config.right_ready_button_position_y),
            Vec2(config.right_ready_button_size_x, config.right_ready_button_size_y),
        )

        self.scored_sound = _load_sound(config.sound_scored_path, "scored")
        self.hit_sound = _load_sound(config.sound_hit_path, "hit")
        self.wall_sound = _load_sound(config.sound_wall_path, "wall")

        background = _load_image(config.texture_background_path, "background texture")
        self.background = (
            pygame.transform.scale(background, (max(1, self.width), max(1, self.height)))
            if background is not None
            else None
        )
        # Each ready button shows the hand the opposite player raises.
        left_hand = _load_image(config.texture_left_hand_path, "left hand texture")
        if left_hand is not None:
            self.right_ready.set_texture(left_hand)
        right_hand = _load_image(config.texture_right_hand_path, "right hand texture")
        if right_hand is not None:
            self.left_ready.set_texture(right_hand)
        self.result_font = _load_font(config.font_result_path, RESULT_FONT_SIZE)

        half = self.width // 2
        self.left_border = pygame.Rect(0, 0, half, self.height)
        self.right_border = pygame.Rect(half, 0, half, self.height)

    @property
    def centre(self) -> Vec2:
        return Vec2(float(self.width // 2), float(self.height // 2))

    def process_events(self, is_pressed: KeyPressed) -> None:
        """Read keyboard input for both players unless the tracker steers them."""
        if not self.kinect_control:
            self.left.handle_input(is_pressed)
            self.right.handle_input(is_pressed)

    def update(self) -> None:
        """Advance the table by one time step."""
        self.left.update()
        self.right.update()
        self.puck.update(self.update_time)
        for paddle in (*self.left.paddles, *self.right.paddles):
            self.collide_objects(paddle, self.puck)
        if self.puck.walls_collide(self.width, self.height):
            _play(self.wall_sound)
        self.score_changed = self.goal_scored()
        self.board.update(self.update_time, self.score_changed)
        self.score_changed = False

    def collide_objects(self, paddle: Paddle, puck: Puck) -> bool:
        """Bounce ``puck`` off ``paddle`` if they touch; True when they did."""
        r1, r2 = paddle.radius, puck.radius
        threshold = (r1 + r2) ** 2
        x1, x2 = paddle.position, puck.position
        distance = dist2(x1, x2)
        if distance > threshold:
            return False

        v1 = paddle.velocity if self.config.use_paddle_velocity else Vec2()
        v2 = puck.velocity
        rewind_time = 0.0
        relative = len2(v1 - v2)
        if distance < threshold and relative > 0:
            rewind_time = (r1 + r2 - math.sqrt(distance)) / math.sqrt(relative)
            paddle.move_to(x1 - v1 * rewind_time)
            puck.move_to(x2 - v2 * rewind_time)

        normal = puck.position - paddle.position
        span = len2(normal)
        if span > 0:
            puck.velocity = v2 - normal * (2.0 * dot(v2 - v1, normal) / span)

        if self.config.use_velocity_cap:
            speed = math.sqrt(len2(puck.velocity))
            if speed > self.config.max_puck_velocity:
                puck.velocity = puck.velocity * (self.config.max_puck_velocity / speed)

        puck.update(rewind_time)
        _play(self.hit_sound)
        return True

    def goal_scored(self) -> bool:
        """Count a goal if the puck left the table sideways and serve it again."""
        velocity = initial_velocity(self.config.initial_puck_velocity, self.rng)
        x = self.puck.position.x
        if 0 <= x <= self.width:
            return False
        if x < 0:
            self.right.scored()
            velocity = Vec2(-abs(velocity.x), velocity.y)
        else:
            self.left.scored()
            velocity = Vec2(abs(velocity.x), velocity.y)
        self.puck.reset(self.centre, velocity)
        _play(self.scored_sound)
        return True

    def draw_halves(self) -> None:
        pygame.draw.rect(self.surface, LEFT_BORDER_COLOR, self.left_border, BORDER_WIDTH)
        pygame.draw.rect(self.surface, RIGHT_BORDER_COLOR, self.right_border, BORDER_WIDTH)

    def render(self) -> None:
        self.surface.fill(BLACK)
        if self.background is not None:
            self.surface.blit(self.background, (0, 0))
        self.draw_halves()
        self.board.render(self.surface)
        self.left.render(self.surface)
        self.right.render(self.surface)
        self.puck.render(self.surface)
        _present(self.surface)

    def reset(self) -> None:
        """Start a new game: zero scores, serve the puck, restart the clock."""
        self.left.reset()
        self.right.reset()
        self.puck.reset(self.centre, initial_velocity(self.config.initial_puck_velocity, self.rng))
        self.board.reset()
        self.result_border_position = float(self.width // 2)