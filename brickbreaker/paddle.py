"""The player's paddle."""

from __future__ import annotations

import enum
import math
from dataclasses import replace
from typing import Any

from .ball import Ball, Player
from .geometry import Rect, Vec2
from .keyboard import VK_LEFT, VK_RIGHT, Keyboard

WHITE = (255, 255, 255)


class Size(enum.IntEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


def _signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


class Paddle:
    """A horizontally moving paddle that sends balls back."""

    HEIGHT = 24.0
    WIDTHS = {Size.SMALL: 80.0, Size.MEDIUM: 90.0, Size.LARGE: 100.0}
    SPRITE_RECTS = {
        Size.SMALL: Rect(0, 80, 0, 24),
        Size.MEDIUM: Rect(80, 170, 0, 24),
        Size.LARGE: Rect(170, 270, 0, 24),
    }
    EXIT_X_FACTOR = 0.02
    GAP_BETWEEN_EXIT_DOOR = 10.0

    def __init__(
        self,
        player: Player,
        pos_center: Vec2,
        *,
        speed: float = 600.0,
        size: Size = Size.SMALL,
        color: tuple[int, int, int] = WHITE,
        sprite: Any = None,
    ) -> None:
        self.player = player
        self.pos_center = pos_center
        self.speed = speed
        self.color = color
        self.sprite = sprite
        self.velocity = Vec2(0.0, 0.0)
        self.set_size(size)

    @property
    def sprite_rect(self) -> Rect:
        return self.SPRITE_RECTS[self.size]

    def update(self, dt: float, keyboard: Keyboard) -> None:
        """Move according to the player's left and right keys."""
        left, right = ("A", "D") if self.player is Player.PLAYER1 else (VK_LEFT, VK_RIGHT)
        x_dir = 0.0
        if keyboard.is_pressed(left):
            x_dir -= 1.0
        if keyboard.is_pressed(right):
            x_dir += 1.0
        self.velocity = Vec2(x_dir * self.speed, 0.0)
        self.pos_center = self.pos_center + self.velocity * dt

    def update_animation_scene(self, dt: float, right_wall: float) -> None:
        """Slide toward the exit door, stopping just before it."""
        self.update_animation_scene_out_of_grid(dt)
        if self.is_animation_scene_end(right_wall):
            x = right_wall - self.GAP_BETWEEN_EXIT_DOOR - self.width / 2
            self.pos_center = replace(self.pos_center, x=x)

    def update_animation_scene_out_of_grid(self, dt: float) -> None:
        self.velocity = Vec2(self.speed, 0.0)
        self.pos_center = self.pos_center + self.velocity * dt / 3

    def do_ball_collision(self, ball: Ball) -> bool:
        """Bounce the ball off the paddle; return whether a collision happened."""
        if ball.last_object_rebound is self:
            return False
        paddle_rect = self.rect
        ball_rect = ball.rect
        if not paddle_rect.overlaps(ball_rect):
            return False

        ball.last_player_rebound = self.player
        ball_pos = ball.pos_center
        ball_vel = ball.velocity
        y_dir = math.copysign(1.0, -ball_vel.y)
        x_difference = ball_pos.x - self.pos_center.x

        hits_top = (
            _signbit(ball_vel.x) == _signbit(x_difference) and ball_vel.x != 0.0
        ) or (ball_pos.x >= paddle_rect.left and ball_rect.right <= paddle_rect.right)

        if hits_top:
            fixed_zone_half_width = self.width / 8.0
            if abs(x_difference) < fixed_zone_half_width:
                sign = -1.0 if x_difference < 0.0 else 1.0
                direction = Vec2(sign * fixed_zone_half_width * self.EXIT_X_FACTOR, y_dir)
            else:
                direction = Vec2(x_difference * self.EXIT_X_FACTOR, y_dir)
            ball.set_direction(direction)
        elif ball_vel.x == 0.0:
            side = -1.0 if _signbit(x_difference) else 1.0
            ball.set_direction(Vec2(side, -y_dir))
        else:
            ball.rebound_x()

        ball.last_object_rebound = self
        return True

    def do_wall_collision(self, walls: Rect) -> None:
        rect = self.rect
        x = self.pos_center.x
        if rect.left < walls.left:
            x += walls.left - rect.left
        elif rect.right > walls.right:
            x -= rect.right - walls.right
        self.pos_center = replace(self.pos_center, x=x)

    def width_grow(self) -> None:
        self.set_size(Size(min(Size.LARGE, self.size + 1)))

    def width_shrink(self) -> None:
        self.set_size(Size(max(Size.SMALL, self.size - 1)))

    def set_size(self, size: Size) -> None:
        self.size = Size(size)
        self.width = self.WIDTHS[self.size]

    def set_pos_x(self, x: float) -> None:
        self.pos_center = replace(self.pos_center, x=x)

    @property
    def rect(self) -> Rect:
        return Rect.from_center(self.pos_center, self.width / 2.0, self.HEIGHT / 2.0)

    def is_animation_scene_end(self, right_wall: float) -> bool:
        return self.rect.right + self.GAP_BETWEEN_EXIT_DOOR + 1.0 >= right_wall

    def is_animation_scene_end_out_of_grid(self, right_wall: float) -> bool:
        return self.rect.left > right_wall