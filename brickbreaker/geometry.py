"""Two-dimensional vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length_sq(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = math.sqrt(self.length_sq())
        if length == 0.0:
            return self
        return self / length

    def rounded(self) -> Vec2:
        """Both components rounded to the nearest integer, halves away from zero."""
        return Vec2(_round_half_away(self.x), _round_half_away(self.y))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its four edges."""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def from_center(cls, center: Vec2, half_width: float, half_height: float) -> Rect:
        return cls(
            center.x - half_width,
            center.x + half_width,
            center.y - half_height,
            center.y + half_height,
        )

    @classmethod
    def from_pos_size(cls, pos: Vec2, width: float, height: float) -> Rect:
        return cls(pos.x, pos.x + width, pos.y, pos.y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Vec2:
        return Vec2((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    def overlaps(self, other: Rect) -> bool:
        """True when the interiors of the two rectangles intersect."""
        return (
            self.right > other.left
            and self.left < other.right
            and self.bottom > other.top
            and self.top < other.bottom
        )

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside; right and bottom edges are excluded."""
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom