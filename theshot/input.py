"""Keyboard and joypad state with press, trigger, release and repeat queries."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

NUM_KEYS = 256
LEFT_STICK_DEADZONE = 100
RIGHT_STICK_DEADZONE = 1000
STICK_REPEAT_MS = 160


class Key(IntEnum):
    """Keyboard scan codes the game reacts to."""

    W = 0x11
    P = 0x19
    RETURN = 0x1C
    A = 0x1E
    S = 0x1F
    D = 0x20
    F1 = 0x3B
    F7 = 0x41
    UP = 0xC8
    DOWN = 0xD0


class JoyKey(IntEnum):
    """Joypad buttons, numbered by their bit in the button mask."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    START = 4
    BACK = 5
    LS = 6
    RS = 7
    LEFT_B = 8
    RIGHT_B = 9
    LEFT_TRIGGER = 10
    RIGHT_TRIGGER = 11
    A = 12
    B = 13
    X = 14
    Y = 15


def _check_key(key: int) -> int:
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"key code out of range: {key}")
    return int(key)


class Keyboard:
    """Keyboard state across the current and the previous frame."""

    def __init__(self) -> None:
        self._current: frozenset[int] = frozenset()
        self._previous: frozenset[int] = frozenset()

    def update(self, pressed: Iterable[int] | None) -> None:
        """Advance one frame; None means the device could not be read."""
        self._previous = self._current
        if pressed is not None:
            self._current = frozenset(_check_key(k) for k in pressed)

    def press(self, key: int) -> bool:
        return _check_key(key) in self._current

    def trigger(self, key: int) -> bool:
        key = _check_key(key)
        return key in self._current and key not in self._previous

    def release(self, key: int) -> bool:
        key = _check_key(key)
        return key in self._previous and key not in self._current

    def repeat(self, key: int) -> bool:
        key = _check_key(key)
        return key in self._previous and key in self._current


class Joypad:
    """Joypad buttons and sticks, with a timed repeat for the right stick."""

    def __init__(self) -> None:
        self._buttons = 0
        self._triggered = 0
        self._left_stick: tuple[int, int] = (0, 0)
        self._right_stick: tuple[int, int] = (0, 0)
        self._right_was_tilted = False
        self._right_is_tilted = False
        self._right_prev_time = 0
        self._right_repeat = False

    def update(
        self,
        buttons: int | None,
        left_stick: tuple[int, int] = (0, 0),
        right_stick: tuple[int, int] = (0, 0),
        now_ms: int = 0,
    ) -> None:
        """Advance one frame; buttons None means the pad is not connected."""
        if buttons is not None:
            self._triggered = buttons & ~self._buttons & 0xFFFF
            self._buttons = buttons & 0xFFFF
            self._left_stick = tuple(left_stick)  # type: ignore[assignment]
            self._right_stick = tuple(right_stick)  # type: ignore[assignment]
        self._update_right_stick(now_ms)

    def _update_right_stick(self, now_ms: int) -> None:
        self._right_was_tilted = self._right_is_tilted
        self._right_is_tilted = any(abs(v) >= RIGHT_STICK_DEADZONE for v in self._right_stick)
        self._right_repeat = False
        if self._right_is_tilted and not self._right_was_tilted:
            self._right_prev_time = now_ms
        duration = (now_ms - self._right_prev_time) & 0xFFFFFFFF
        if self._right_is_tilted and duration >= STICK_REPEAT_MS:
            self._right_prev_time = now_ms
            self._right_repeat = True

    def press(self, key: int) -> bool:
        return bool(self._buttons & (1 << JoyKey(key)))

    def trigger(self, key: int) -> bool:
        return bool(self._triggered & (1 << JoyKey(key)))

    def release(self, key: int) -> bool:
        """Always False: button releases are not tracked for the pad."""
        JoyKey(key)
        return False

    def repeat(self, key: int) -> bool:
        """Always False: held-button repeats are not tracked for the pad."""
        JoyKey(key)
        return False

    def left_stick_tilted(self) -> bool:
        return any(abs(v) >= LEFT_STICK_DEADZONE for v in self._left_stick)

    def right_stick_repeating(self) -> bool:
        return self._right_repeat