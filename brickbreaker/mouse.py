"""Mouse state and buffered mouse events."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass

from .geometry import Vec2

BUFFER_SIZE = 4


class MouseEventType(enum.Enum):
    L_PRESS = "l_press"
    L_RELEASE = "l_release"
    R_PRESS = "r_press"
    R_RELEASE = "r_release"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    MOVE = "move"
    INVALID = "invalid"


@dataclass(frozen=True)
class MouseEvent:
    """A snapshot of the mouse taken when something happened; INVALID marks an empty read."""

    type: MouseEventType = MouseEventType.INVALID
    left_is_pressed: bool = False
    right_is_pressed: bool = False
    x: int = 0
    y: int = 0

    @property
    def is_valid(self) -> bool:
        return self.type is not MouseEventType.INVALID

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)


class Mouse:
    """Tracks the cursor and buttons and keeps the most recent events."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.left_is_pressed = False
        self.right_is_pressed = False
        self.is_in_window = False
        self._events: deque[MouseEvent] = deque(maxlen=BUFFER_SIZE)

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def is_empty(self) -> bool:
        return not self._events

    def read(self) -> MouseEvent:
        """Oldest buffered event, or an invalid event when none is left."""
        return self._events.popleft() if self._events else MouseEvent()

    def flush(self) -> None:
        self._events.clear()

    def _push(self, event_type: MouseEventType) -> None:
        self._events.append(
            MouseEvent(
                event_type,
                self.left_is_pressed,
                self.right_is_pressed,
                self.x,
                self.y,
            )
        )

    def on_move(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._push(MouseEventType.MOVE)

    def on_enter(self) -> None:
        self.is_in_window = True

    def on_leave(self) -> None:
        self.is_in_window = False

    # Button and wheel events record the last position reached by a move.
    def on_left_pressed(self, x: int, y: int) -> None:
        self.left_is_pressed = True
        self._push(MouseEventType.L_PRESS)

    def on_left_released(self, x: int, y: int) -> None:
        self.left_is_pressed = False
        self._push(MouseEventType.L_RELEASE)

    def on_right_pressed(self, x: int, y: int) -> None:
        self.right_is_pressed = True
        self._push(MouseEventType.R_PRESS)

    def on_right_released(self, x: int, y: int) -> None:
        self.right_is_pressed = False
        self._push(MouseEventType.R_RELEASE)

    def on_wheel_up(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_UP)

    def on_wheel_down(self, x: int, y: int) -> None:
        self._push(MouseEventType.WHEEL_DOWN)