"""Keyboard state and buffered key and character events."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass

VK_BACK = 0x08
VK_ESCAPE = 0x1B
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

KEY_COUNT = 256
BUFFER_SIZE = 4


class KeyEventType(enum.Enum):
    PRESS = "press"
    RELEASE = "release"
    INVALID = "invalid"


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release; INVALID marks an empty read."""

    type: KeyEventType = KeyEventType.INVALID
    code: int = 0

    @property
    def is_press(self) -> bool:
        return self.type is KeyEventType.PRESS

    @property
    def is_release(self) -> bool:
        return self.type is KeyEventType.RELEASE

    @property
    def is_valid(self) -> bool:
        return self.type is not KeyEventType.INVALID


def _keycode(keycode: int | str) -> int:
    if isinstance(keycode, str):
        if len(keycode) != 1:
            raise ValueError(f"key must be a single character, got {keycode!r}")
        keycode = ord(keycode)
    if not 0 <= keycode < KEY_COUNT:
        raise ValueError(f"key code out of range: {keycode}")
    return keycode


class Keyboard:
    """Tracks held keys and keeps the most recent key and character events."""

    def __init__(self) -> None:
        self.autorepeat_enabled = True
        self._pressed: set[int] = set()
        self._keys: deque[KeyEvent] = deque(maxlen=BUFFER_SIZE)
        self._chars: deque[str] = deque(maxlen=BUFFER_SIZE)

    def is_pressed(self, keycode: int | str) -> bool:
        return _keycode(keycode) in self._pressed

    def read_key(self) -> KeyEvent:
        """Oldest buffered key event, or an invalid event when none is left."""
        return self._keys.popleft() if self._keys else KeyEvent()

    def read_char(self) -> str:
        """Oldest buffered character, or an empty string when none is left."""
        return self._chars.popleft() if self._chars else ""

    def flush_keys(self) -> None:
        self._keys.clear()

    def flush_chars(self) -> None:
        self._chars.clear()

    def flush(self) -> None:
        self.flush_keys()
        self.flush_chars()

    def on_key_pressed(self, keycode: int | str) -> None:
        code = _keycode(keycode)
        self._pressed.add(code)
        self._keys.append(KeyEvent(KeyEventType.PRESS, code))

    def on_key_released(self, keycode: int | str) -> None:
        code = _keycode(keycode)
        self._pressed.discard(code)
        self._keys.append(KeyEvent(KeyEventType.RELEASE, code))

    def on_char(self, character: str) -> None:
        if len(character) != 1:
            raise ValueError(f"expected a single character, got {character!r}")
        self._chars.append(character)

    def clear_state(self) -> None:
        """Forget which keys are held; buffered events are kept."""
        self._pressed.clear()