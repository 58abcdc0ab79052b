"""A walking character with directional animations and a hit flash."""

from __future__ import annotations

import enum
from typing import Any

from .animation import Animation
from .geometry import Vec2

FRAME_SIZE = 90
WALK_FRAMES = 4
FRAME_HOLD_TIME = 0.16


class Sequence(enum.IntEnum):
    WALKING_LEFT = 0
    WALKING_RIGHT = 1
    WALKING_UP = 2
    WALKING_DOWN = 3
    STANDING_LEFT = 4
    STANDING_RIGHT = 5
    STANDING_UP = 6
    STANDING_DOWN = 7


class Character:
    """A character moving in four directions, each with its own animation."""

    SPEED = 110.0
    EFFECT_DURATION = 0.045

    def __init__(self, pos: Vec2, sprite: Any = None) -> None:
        self.sprite = sprite
        self.pos = pos
        self.velocity = Vec2(0.0, 0.0)
        self.sequence = Sequence.STANDING_DOWN
        self.effect_active = False
        self._effect_time = 0.0
        self.animations: dict[Sequence, Animation] = {}
        for seq in Sequence:
            if seq < Sequence.STANDING_LEFT:
                row = int(seq)
                self.animations[seq] = Animation(
                    FRAME_SIZE, FRAME_SIZE * row, FRAME_SIZE, FRAME_SIZE,
                    WALK_FRAMES, sprite, FRAME_HOLD_TIME,
                )
            else:
                row = int(seq) - int(Sequence.STANDING_LEFT)
                self.animations[seq] = Animation(
                    0, FRAME_SIZE * row, FRAME_SIZE, FRAME_SIZE,
                    1, sprite, FRAME_HOLD_TIME,
                )

    @property
    def current_animation(self) -> Animation:
        return self.animations[self.sequence]

    def set_direction(self, direction: Vec2) -> None:
        """Start walking in direction; a zero direction stands facing the last move."""
        if direction.x > 0.0:
            self.sequence = Sequence.WALKING_RIGHT
        elif direction.x < 0.0:
            self.sequence = Sequence.WALKING_LEFT
        elif direction.y < 0.0:
            self.sequence = Sequence.WALKING_UP
        elif direction.y > 0.0:
            self.sequence = Sequence.WALKING_DOWN
        elif self.velocity.x > 0.0:
            self.sequence = Sequence.STANDING_RIGHT
        elif self.velocity.x < 0.0:
            self.sequence = Sequence.STANDING_LEFT
        elif self.velocity.y < 0.0:
            self.sequence = Sequence.STANDING_UP
        elif self.velocity.y > 0.0:
            self.sequence = Sequence.STANDING_DOWN
        self.velocity = direction * self.SPEED

    def update(self, dt: float) -> None:
        self.pos = self.pos + self.velocity * dt
        self.current_animation.update(dt)
        if self.effect_active:
            self._effect_time += dt
            if self._effect_time >= self.EFFECT_DURATION:
                self.effect_active = False

    def activate_effect(self) -> None:
        """Start the short damage flash."""
        self.effect_active = True
        self._effect_time = 0.0