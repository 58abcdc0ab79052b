"""The ball and its collisions with walls and bricks."""

from __future__ import annotations

import enum
from dataclasses import replace
from typing import Any

from .geometry import Rect, Vec2


class Player(enum.Enum):
    """The player who last sent a ball back."""

    NONE = 0
    PLAYER1 = 1
    PLAYER2 = 2


class WallHit(enum.Enum):
    """Which kind of wall a ball touched."""

    NO_WALL = 0
    WALL = 1
    TOP_WALL = 2
    BOTTOM_WALL = 3


class Ball:
    """A moving ball with a constant speed."""

    def __init__(
        self,
        pos_center: Vec2,
        speed: float,
        radius: float = 10.0,
        *,
        on_paddle: bool = False,
        last_player_rebound: Player = Player.NONE,
        sprite: Any = None,
    ) -> None:
        if on_paddle and last_player_rebound is Player.NONE:
            raise ValueError("a ball on a paddle must belong to a player")
        self.sprite = sprite
        self.pos_center = pos_center
        self.speed = speed
        self.radius = radius
        if not on_paddle:
            direction = 1.0
        else:
            direction = -1.0 if last_player_rebound is Player.PLAYER1 else 1.0
        self.velocity = Vec2(0.0, direction * speed)
        self.last_object_rebound: object | None = None
        self.last_player_rebound = last_player_rebound

    def update(self, dt: float) -> None:
        self.pos_center = self.pos_center + self.velocity * dt

    def update_by_paddle_x(self, x: float) -> None:
        self.pos_center = replace(self.pos_center, x=x)

    def rebound_x(self) -> None:
        self.velocity = replace(self.velocity, x=-self.velocity.x)

    def rebound_y(self) -> None:
        self.velocity = replace(self.velocity, y=-self.velocity.y)

    def brick_precision_move_x(self, rect: Rect) -> None:
        """Place the ball against the brick side it is moving into."""
        if self.velocity.x < 0:
            self.pos_center = replace(self.pos_center, x=rect.right + self.radius)
        elif self.velocity.x > 0:
            self.pos_center = replace(self.pos_center, x=rect.left - self.radius)

    def brick_precision_move_y(self, rect: Rect) -> None:
        """Place the ball against the brick top or bottom it is moving into."""
        if self.velocity.y > 0:
            self.pos_center = replace(self.pos_center, y=rect.top - self.radius)
        elif self.velocity.y < 0:
            self.pos_center = replace(self.pos_center, y=rect.bottom + self.radius)

    def do_wall_collision(self, walls: Rect) -> WallHit:
        """Push the ball back inside the walls, rebound it and report the hit."""
        hit = WallHit.NO_WALL
        rect = self.rect
        x, y = self.pos_center.x, self.pos_center.y
        if rect.left < walls.left:
            hit = WallHit.WALL
            x += walls.left - rect.left
            self.rebound_x()
        elif rect.right > walls.right:
            hit = WallHit.WALL
            x -= rect.right - walls.right
            self.rebound_x()

        if rect.top < walls.top:
            hit = WallHit.TOP_WALL
            y += walls.top - rect.top
            self.rebound_y()
        elif rect.bottom > walls.bottom:
            hit = WallHit.BOTTOM_WALL
            y -= rect.bottom - walls.bottom
            self.rebound_y()

        self.pos_center = Vec2(x, y)
        return hit

    def set_direction(self, direction: Vec2) -> None:
        self.velocity = direction.normalized() * self.speed

    @property
    def rect(self) -> Rect:
        """Bounding box, inset by one pixel on the left and top."""
        box = Rect.from_center(self.pos_center, self.radius, self.radius)
        return replace(box, left=box.left + 1, top=box.top + 1)