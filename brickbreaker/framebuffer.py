"""A software framebuffer with the basic drawing primitives used by the game."""

from __future__ import annotations

import math

from .geometry import Rect, Vec2

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

_ANGLE_EPSILON = 0.0001


def _deg360(angle: float) -> float:
    """Angle in degrees brought into the range [0, 360)."""
    return angle % 360.0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Framebuffer:
    """An in-memory screen of RGB pixels, cleared to black at each frame."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels: list[Color] = []
        self.begin_frame()

    def begin_frame(self) -> None:
        """Clear every pixel to black."""
        self._pixels = [BLACK] * (self.width * self.height)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} screen")

    def get_pixel(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self._pixels[self.width * y + x]

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self._pixels[self.width * y + x] = color

    def put_pixel_if_in_rect(
        self, x: int, y: int, color: Color, rect: Rect | None = None
    ) -> None:
        """Set the pixel only when it lies inside rect (the whole screen by default)."""
        if rect is None:
            rect = self.screen_rect()
        if rect.left <= x < rect.right and rect.top <= y < rect.bottom:
            self.put_pixel(x, y, color)

    def draw_line(
        self, p: Vec2, q: Vec2, thickness: int = 1, color: Color = WHITE
    ) -> None:
        """Draw a line of square dots; thick lines are drawn dashed."""
        px, py = int(p.x), int(p.y)
        qx, qy = int(q.x), int(q.y)
        half = thickness // 2
        for x, y in ((px, py), (qx, qy)):
            if not (
                x - half >= 0
                and x + half < self.width
                and y - half >= 0
                and y + half < self.height
            ):
                raise ValueError(f"line end ({x}, {y}) is off the screen")

        dx, dy = float(qx - px), float(qy - py)
        length = math.sqrt(dx * dx + dy * dy)
        step = (dx / length, dy / length) if length > 0.0 else (0.0, 0.0)
        cur_x, cur_y = float(px), float(py)
        for i in range(int(length) + 1):
            if thickness == 1 or i % 2 == 0:
                base_x = int(cur_x) - half
                base_y = int(cur_y) - half
                for ox in range(thickness):
                    for oy in range(thickness):
                        self.put_pixel(base_x + ox, base_y + oy, color)
            cur_x += step[0]
            cur_y += step[1]

    def draw_circle(
        self,
        pos: Vec2,
        radius: float,
        color: Color,
        angle_start: float = 0.0,
        angle_end: float = 360.0,
    ) -> None:
        """Fill a disc, or the sector between two angles in degrees."""
        angle_start = _deg360(angle_start)
        angle_end = _deg360(angle_end)
        if abs(angle_end - angle_start) < _ANGLE_EPSILON or angle_end - angle_start == 360.0:
            angle_start, angle_end = 0.0, 360.0

        cx, cy = int(pos.x), int(pos.y)
        rounded_radius = _round_half_away(radius)
        radius_sq = int(radius**2)
        span = range(-rounded_radius + 1, rounded_radius)
        for y in span:
            for x in span:
                if x * x + y * y > radius_sq:
                    continue
                alpha = _deg360(math.degrees(math.atan2(y, x)))
                if angle_start <= angle_end:
                    inside = angle_start <= alpha <= angle_end
                else:
                    inside = alpha >= angle_start or alpha <= angle_end
                if inside:
                    self.put_pixel(cx + x, cy + y, color)

    def draw_circle_outline(
        self,
        center: Vec2,
        radius: float,
        color: Color,
        thickness: int = 2,
        segments: int = 100,
    ) -> None:
        """Draw a circle as a polygon of straight segments."""
        if segments < 4:
            raise ValueError("a circle outline needs at least 4 segments")
        step = 2.0 * math.pi / segments
        origin = Vec2(int(center.x), int(center.y))
        for i in range(segments):
            a1 = step * i
            a2 = step * (i + 1)
            p1 = origin + Vec2(math.cos(a1), math.sin(a1)) * radius
            p2 = origin + Vec2(math.cos(a2), math.sin(a2)) * radius
            self.draw_line(p1.rounded(), p2.rounded(), thickness, color)

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Fill a rectangle, clipped to the screen."""
        x0 = max(0, int(rect.left))
        y0 = max(0, int(rect.top))
        x1 = min(self.width, int(rect.right))
        y1 = min(self.height, int(rect.bottom))
        for y in range(y0, y1):
            for x in range(x0, x1):
                self.put_pixel(x, y, color)

    def draw_disabled(self, rect: Rect) -> None:
        """Darken a rectangle by blending it half-way with black."""
        for y in range(int(rect.top), int(rect.bottom)):
            for x in range(int(rect.left), int(rect.right)):
                r, g, b = self.get_pixel(x, y)
                self.put_pixel(x, y, (r // 2, g // 2, b // 2))

    def screen_rect(self) -> Rect:
        return Rect(0, self.width, 0, self.height)

    def screen_center(self) -> Vec2:
        return Vec2(self.width // 2, self.height // 2)