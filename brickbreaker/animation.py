"""Frame-based sprite animation."""

from __future__ import annotations

from typing import Any

from .geometry import Rect

MAGENTA = (255, 0, 255)


class Animation:
    """A strip of equally sized frames advanced at a fixed hold time."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        count: int,
        sprite: Any = None,
        hold_time: float = 0.16,
        chroma: tuple[int, int, int] = MAGENTA,
    ) -> None:
        if hold_time <= 0.0:
            raise ValueError("hold_time must be positive")
        if count <= 0:
            raise ValueError("count must be positive")
        self.sprite = sprite
        self.hold_time = hold_time
        self.chroma = chroma
        self.frames = [
            Rect(x + i * width, x + (i + 1) * width, y, y + height) for i in range(count)
        ]
        self.frame_index = 0
        self.full_animation_count = 0
        self._frame_time = 0.0

    def update(self, dt: float) -> None:
        """Advance the animation by dt seconds."""
        self._frame_time += dt
        while self._frame_time >= self.hold_time:
            self._advance()
            self._frame_time -= self.hold_time

    @property
    def current_frame(self) -> Rect:
        """Source rectangle of the frame being shown."""
        return self.frames[self.frame_index]

    def reset_full_animation_count(self) -> None:
        self.full_animation_count = 0

    def reset(self) -> None:
        """Clear the completed-cycle count and the time spent on the current frame."""
        self.reset_full_animation_count()
        self._frame_time = 0.0

    def _advance(self) -> None:
        self.frame_index += 1
        if self.frame_index >= len(self.frames):
            self.full_animation_count += 1
            self.frame_index = 0