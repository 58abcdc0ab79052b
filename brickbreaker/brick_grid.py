"""The grid of bricks: editing, collisions with balls, and level files."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from .ball import Ball
from .brick import (
    BreakableBrick,
    BreakableHpBrick,
    Brick,
    BrickColor,
    BrickType,
    UnbreakableBrick,
    read_brick,
)
from .geometry import Rect, Vec2

RED = (255, 0, 0)

BRICK_WIDTH = 55
BRICK_HEIGHT = 20
N_COL_BRICKS = 11
HP_BRICK_HP = 5

_COUNT_FORMAT = "<Q"
_COLLISION_EPSILON = 0.001


def _signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


class BrickGrid:
    """The bricks of one round, kept inside the playing walls."""

    def __init__(
        self,
        walls: Rect,
        directory: str = "",
        *,
        breakable_sprite: Any = None,
        unbreakable_sprite: Any = None,
        on_load: Callable[[], None] | None = None,
    ) -> None:
        self.walls = walls
        self.directory = directory
        self.breakable_sprite = breakable_sprite
        self.unbreakable_sprite = unbreakable_sprite
        self.on_load = on_load
        self.bricks: list[Brick] = []

    def __iter__(self) -> Iterator[Brick]:
        return iter(self.bricks)

    def __len__(self) -> int:
        return len(self.bricks)

    def update(self, dt: float) -> None:
        for brick in self.bricks:
            brick.update(dt)

    def path_for(self, folder: str, filename: str) -> Path:
        """Path of a level file, with its extension replaced by .dat."""
        full = self.directory + folder + filename
        dot = full.rfind(".")
        if dot != -1:
            full = full[:dot]
        return Path(full + ".dat")

    def load(self, folder: str, filename: str = "default.dat") -> None:
        """Replace the bricks with those stored in a level file."""
        path = self.path_for(folder, filename)
        with path.open("rb") as stream:
            self.bricks.clear()
            if self.on_load is not None:
                self.on_load()
            data = stream.read(struct.calcsize(_COUNT_FORMAT))
            if len(data) < struct.calcsize(_COUNT_FORMAT):
                raise ValueError("truncated level file")
            (count,) = struct.unpack(_COUNT_FORMAT, data)
            for _ in range(count):
                self.bricks.append(self._attach_sprite(read_brick(stream)))

    def _attach_sprite(self, brick: Brick) -> Brick:
        if isinstance(brick, UnbreakableBrick):
            brick.sprite = self.unbreakable_sprite
            brick.animation.sprite = self.unbreakable_sprite
        elif isinstance(brick, BreakableBrick):
            brick.sprite = self.breakable_sprite
        else:
            raise ValueError(f"brick type not allowed in a level file: {brick.type.name}")
        return brick

    def save(self, folder: str, filename: str = "default.dat") -> None:
        """Write the bricks to a new level file; an existing file is not overwritten."""
        path = self.path_for(folder, filename)
        with path.open("xb") as stream:
            stream.write(struct.pack(_COUNT_FORMAT, len(self.bricks)))
            for brick in self.bricks:
                brick.write(stream)

    def delete(self, folder: str, filename: str) -> None:
        self.path_for(folder, filename).unlink()

    def clear(self) -> None:
        self.bricks.clear()

    def add_brick(self, brick: Brick) -> None:
        """Add a brick, first removing one brick that it overlaps."""
        for i, existing in enumerate(self.bricks):
            if existing.rect.overlaps(brick.rect):
                del self.bricks[i]
                break
        self.bricks.append(brick)

    def remove_at(self, pos: Vec2) -> None:
        """Remove the first brick containing pos."""
        point = Vec2(int(pos.x), int(pos.y))
        for i, brick in enumerate(self.bricks):
            if brick.rect.contains(point):
                del self.bricks[i]
                break

    def check_ball_collision(self, ball: Ball) -> tuple[Brick, int] | None:
        """Nearest brick overlapping the ball and its index, or None."""
        ball_rect = ball.rect
        best: tuple[Brick, int] | None = None
        best_distance = 0.0
        for i, brick in enumerate(self.bricks):
            if ball_rect.overlaps(brick.rect):
                distance = (ball.pos_center - brick.pos_center).length_sq()
                if best is None or distance < best_distance:
                    best = (brick, i)
                    best_distance = distance
        return best

    def execute_ball_collision(self, ball: Ball, index: int) -> Vec2 | None:
        """Bounce the ball off the brick at index and hit the brick.

        Returns the brick's centre when the hit destroyed it, else None.
        """
        if not 0 <= index < len(self.bricks):
            raise IndexError(f"no brick at index {index}")
        brick = self.bricks[index]
        velocity = ball.velocity
        brick_rect = brick.rect
        ball_pos = ball.pos_center

        horizontal_overlap = brick_rect.left <= ball_pos.x <= brick_rect.right

        if (
            abs(velocity.x) < _COLLISION_EPSILON
            or _signbit(velocity.x) == _signbit(ball_pos.x - brick.pos_center.x)
            or horizontal_overlap
        ):
            ball.brick_precision_move_y(brick_rect)
            ball.rebound_y()
        else:
            ball.brick_precision_move_x(brick_rect)
            ball.rebound_x()

        brick.hit()
        if not brick.is_destroyed():
            return None
        hit_pos = brick.pos_center
        last = self.bricks.pop()
        if index < len(self.bricks):
            self.bricks[index] = last
        return hit_pos

    def create_brick(
        self,
        brick_type: BrickType,
        rect: Rect = Rect(0, BRICK_WIDTH, 0, BRICK_HEIGHT),
        color: BrickColor = BrickColor.NONE,
    ) -> Brick:
        """A new brick of the given type using the grid's sprites."""
        brick_type = BrickType(brick_type)
        if brick_type is BrickType.BREAKABLE:
            return BreakableBrick(
                rect, self.breakable_sprite, BreakableBrick.src_rect_for_color(int(color))
            )
        if brick_type is BrickType.BREAKABLE_HP:
            return BreakableHpBrick(rect, HP_BRICK_HP, RED)
        return UnbreakableBrick(rect, self.unbreakable_sprite)

    def is_round_finished(self) -> bool:
        """True when only unbreakable bricks are left."""
        return all(brick.type is BrickType.UNBREAKABLE for brick in self.bricks)

    def rect_for_round_pos(self, pos: Vec2) -> Rect:
        """Brick-sized rectangle snapped to the grid cell nearest pos."""
        wall_left = int(self.walls.left)
        wall_top = int(self.walls.top)
        px, py = int(pos.x), int(pos.y)
        in_grid_x = px - wall_left
        in_grid_y = py - wall_top
        if in_grid_x < 0 or in_grid_y < 0:
            return Rect(self.walls.left, BRICK_WIDTH, self.walls.top, BRICK_HEIGHT)

        full_x = in_grid_x // BRICK_WIDTH
        full_y = in_grid_y // BRICK_HEIGHT
        from_x = wall_left + BRICK_WIDTH * full_x + BRICK_WIDTH // 2
        from_y = wall_top + BRICK_HEIGHT * full_y + BRICK_HEIGHT // 2
        candidates = [
            (from_x, from_y),
            (from_x + BRICK_WIDTH, from_y),
            (from_x, from_y + BRICK_HEIGHT),
            (from_x + BRICK_WIDTH, from_y + BRICK_HEIGHT),
        ]
        cx, cy = min(candidates, key=lambda c: (px - c[0]) ** 2 + (py - c[1]) ** 2)
        return Rect.from_center(
            Vec2(cx + 1.0, cy), BRICK_WIDTH / 2.0, BRICK_HEIGHT / 2.0
        )