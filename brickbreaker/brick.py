"""Bricks: breakable, breakable with hit points, and unbreakable."""

from __future__ import annotations

import abc
import enum
import struct
from typing import Any, BinaryIO

from .animation import Animation
from .geometry import Rect, Vec2

WHITE = (255, 255, 255)


class BrickType(enum.IntEnum):
    BREAKABLE = 0
    BREAKABLE_HP = 1
    UNBREAKABLE = 2


class BrickColor(enum.IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    ORANGE = 3
    PINK = 4
    COUNT = 5
    NONE = 6


def _unpack(fmt: str, stream: BinaryIO) -> tuple:
    size = struct.calcsize(fmt)
    data = stream.read(size)
    if len(data) < size:
        raise ValueError("truncated brick data")
    return struct.unpack(fmt, data)


def _pack_color(color: tuple[int, int, int]) -> int:
    r, g, b = color
    return (r << 16) | (g << 8) | b


def _unpack_color(value: int) -> tuple[int, int, int]:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


class Brick(abc.ABC):
    """A rectangular brick in the grid."""

    type: BrickType

    def __init__(self, rect: Rect | None = None, sprite: Any = None) -> None:
        self.rect = rect if rect is not None else Rect(0, 0, 0, 0)
        self.sprite = sprite

    @property
    def pos_center(self) -> Vec2:
        return self.rect.center

    def update(self, dt: float) -> None:
        """Advance time-based state; plain bricks have none."""

    @abc.abstractmethod
    def hit(self) -> None:
        """React to being hit by a ball."""

    @abc.abstractmethod
    def is_destroyed(self) -> bool:
        """Whether the brick should be removed from the grid."""

    def set_pos(self, pos: Vec2) -> None:
        """Move the top-left corner to pos, keeping the size."""
        self.rect = Rect.from_pos_size(pos, self.rect.width, self.rect.height)

    def write(self, stream: BinaryIO) -> None:
        """Write the type tag, the rectangle and the brick's own fields."""
        stream.write(struct.pack("<i", int(self.type)))
        r = self.rect
        stream.write(struct.pack("<4f", r.left, r.right, r.top, r.bottom))
        self._write_body(stream)

    @classmethod
    def read(cls, stream: BinaryIO) -> Brick:
        """Read one brick written by write(); the tag decides its class."""
        (tag,) = _unpack("<i", stream)
        try:
            brick_type = BrickType(tag)
        except ValueError:
            raise ValueError(f"unknown brick type tag: {tag}") from None
        brick_cls = _BRICK_CLASSES[brick_type]
        if not issubclass(brick_cls, cls):
            raise ValueError(f"expected {cls.__name__}, found {brick_cls.__name__}")
        rect = Rect(*_unpack("<4f", stream))
        return brick_cls._read_body(stream, rect)

    def _write_body(self, stream: BinaryIO) -> None:
        pass

    @classmethod
    @abc.abstractmethod
    def _read_body(cls, stream: BinaryIO, rect: Rect) -> Brick:
        ...


class BreakableBrick(Brick):
    """A brick destroyed by a single hit."""

    type = BrickType.BREAKABLE

    SRC_RECT_RED = Rect(0, 55, 0, 20)
    SRC_RECT_GREEN = Rect(55, 110, 0, 20)
    SRC_RECT_BLUE = Rect(110, 165, 0, 20)
    SRC_RECT_ORANGE = Rect(165, 220, 0, 20)
    SRC_RECT_PINK = Rect(220, 275, 0, 20)
    N_COLORS = 5

    def __init__(
        self,
        rect: Rect | None = None,
        sprite: Any = None,
        src_rect: Rect | None = None,
    ) -> None:
        super().__init__(rect, sprite)
        self.src_rect = src_rect if src_rect is not None else Rect(0, 0, 0, 0)
        self.destroyed = False

    @staticmethod
    def src_rect_for_color(index: int) -> Rect:
        """Sprite rectangle of the colour at index, wrapping around the palette."""
        index = int(index)
        if index < 0:
            raise ValueError("colour index must not be negative")
        return _SRC_RECTS[index % BreakableBrick.N_COLORS]

    def set_color(self, color: BrickColor) -> None:
        color = BrickColor(color)
        if color >= BrickColor.COUNT:
            raise ValueError(f"not a drawable colour: {color.name}")
        self.src_rect = _SRC_RECTS[color]

    def hit(self) -> None:
        self.destroyed = True

    def is_destroyed(self) -> bool:
        return self.destroyed

    def _write_body(self, stream: BinaryIO) -> None:
        s = self.src_rect
        stream.write(struct.pack("<4i", int(s.left), int(s.right), int(s.top), int(s.bottom)))

    @classmethod
    def _read_body(cls, stream: BinaryIO, rect: Rect) -> BreakableBrick:
        src_rect = Rect(*_unpack("<4i", stream))
        return cls(rect, None, src_rect)


_SRC_RECTS = (
    BreakableBrick.SRC_RECT_RED,
    BreakableBrick.SRC_RECT_GREEN,
    BreakableBrick.SRC_RECT_BLUE,
    BreakableBrick.SRC_RECT_ORANGE,
    BreakableBrick.SRC_RECT_PINK,
)


class BreakableHpBrick(Brick):
    """A brick that takes several hits to destroy."""

    type = BrickType.BREAKABLE_HP

    def __init__(
        self,
        rect: Rect | None = None,
        hp: int = 0,
        color: tuple[int, int, int] = WHITE,
    ) -> None:
        super().__init__(rect, None)
        self.hp = hp
        self.color = color

    def hit(self) -> None:
        if not self.is_destroyed():
            self.hp -= 1

    def is_destroyed(self) -> bool:
        return self.hp <= 0

    def _write_body(self, stream: BinaryIO) -> None:
        stream.write(struct.pack("<iI", self.hp, _pack_color(self.color)))

    @classmethod
    def _read_body(cls, stream: BinaryIO, rect: Rect) -> BreakableHpBrick:
        hp, color = _unpack("<iI", stream)
        return cls(rect, hp, _unpack_color(color))


class UnbreakableBrick(Brick):
    """A brick that is never destroyed and flashes once when hit."""

    type = BrickType.UNBREAKABLE

    ANIMATION_TIME = 0.6
    N_FRAMES = 9
    ANIMATION_ONE_FRAME_TIME = ANIMATION_TIME / N_FRAMES

    def __init__(self, rect: Rect | None = None, sprite: Any = None) -> None:
        super().__init__(rect, sprite)
        self.active_animation = False
        self.animation = Animation(
            55, 0, 55, 20, self.N_FRAMES, sprite, self.ANIMATION_ONE_FRAME_TIME
        )

    def update(self, dt: float) -> None:
        if self.active_animation:
            self.animation.update(dt)
            if self.animation.full_animation_count >= 1:
                self.animation.reset_full_animation_count()
                self.active_animation = False

    def hit(self) -> None:
        self.active_animation = True

    def is_destroyed(self) -> bool:
        return False

    @classmethod
    def _read_body(cls, stream: BinaryIO, rect: Rect) -> UnbreakableBrick:
        return cls(rect, None)


_BRICK_CLASSES: dict[BrickType, type[Brick]] = {
    BrickType.BREAKABLE: BreakableBrick,
    BrickType.BREAKABLE_HP: BreakableHpBrick,
    BrickType.UNBREAKABLE: UnbreakableBrick,
}


def read_brick(stream: BinaryIO) -> Brick:
    """Read one brick of whatever type the stream holds next."""
    return Brick.read(stream)