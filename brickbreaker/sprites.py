"""Pixel surfaces and clipped sprite blitting onto a framebuffer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .framebuffer import BLACK, Color, Framebuffer
from .geometry import Rect

Effect = Callable[[Color, int, int, Framebuffer], None]


class Surface:
    """A rectangular block of RGB pixels stored row by row."""

    def __init__(
        self, width: int, height: int, pixels: Iterable[Color] | None = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface dimensions must be positive")
        self.width = width
        self.height = height
        if pixels is None:
            self._pixels: list[Color] = [BLACK] * (width * height)
        else:
            self._pixels = list(pixels)
            if len(self._pixels) != width * height:
                raise ValueError(
                    f"expected {width * height} pixels, got {len(self._pixels)}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> Surface:
        """Surface built from a list of equally long pixel rows."""
        if not rows or not rows[0]:
            raise ValueError("a surface needs at least one pixel")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(width, len(rows), (pixel for row in rows for pixel in row))

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside the {self.width}x{self.height} surface"
            )

    def get_pixel(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._pixels[self.width * y + x]

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._pixels[self.width * y + x] = color

    @property
    def rect(self) -> Rect:
        """The whole surface as a rectangle at the origin."""
        return Rect(0, self.width, 0, self.height)


def draw_sprite(
    framebuffer: Framebuffer,
    x: float,
    y: float,
    surface: Surface,
    effect: Effect,
    src_rect: Rect | None = None,
    clip: Rect | None = None,
) -> None:
    """Pass each pixel of src_rect to effect at its screen position, clipped to clip.

    The effect is called as effect(color, screen_x, screen_y, framebuffer).
    src_rect defaults to the whole surface and clip to the whole screen.
    """
    if src_rect is None:
        src_rect = surface.rect
    if clip is None:
        clip = framebuffer.screen_rect()

    left, right = int(src_rect.left), int(src_rect.right)
    top, bottom = int(src_rect.top), int(src_rect.bottom)
    if left < 0 or top < 0 or right > surface.width or bottom > surface.height:
        raise ValueError(f"source rectangle {src_rect} lies outside the surface")

    x, y = int(x), int(y)
    clip_left, clip_right = int(clip.left), int(clip.right)
    clip_top, clip_bottom = int(clip.top), int(clip.bottom)

    if x < clip_left:
        left += clip_left - x
        x = clip_left
    if y < clip_top:
        top += clip_top - y
        y = clip_top
    if x + (right - left) > clip_right:
        right -= x + (right - left) - clip_right
    if y + (bottom - top) > clip_bottom:
        bottom -= y + (bottom - top) - clip_bottom

    for sy in range(top, bottom):
        for sx in range(left, right):
            effect(surface.get_pixel(sx, sy), x + sx - left, y + sy - top, framebuffer)