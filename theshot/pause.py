"""Pause menu with four choices selected by up, down and confirm."""

from __future__ import annotations

from enum import IntEnum

from theshot.geometry import Mode
from theshot.input import JoyKey, Joypad, Key, Keyboard


class PauseChoice(IntEnum):
    CONTINUE = 0
    RETRY = 1
    QUIT = 2
    RANKING = 3


# Where each choice other than CONTINUE sends the game.
TARGET_MODES = {
    PauseChoice.RETRY: Mode.GAME,
    PauseChoice.QUIT: Mode.TITLE,
    PauseChoice.RANKING: Mode.RANKING,
}


class PauseMenu:
    """The highlighted choice of the pause menu."""

    def __init__(self) -> None:
        self.selected = PauseChoice.CONTINUE

    def move(self, step: int) -> PauseChoice:
        """Move the highlight by step, wrapping around the ends."""
        self.selected = PauseChoice((self.selected + step) % len(PauseChoice))
        return self.selected

    def update(self, keyboard: Keyboard, joypad: Joypad | None = None) -> PauseChoice | None:
        """Apply one frame of input; return the choice confirmed, if any."""

        def triggered(key: Key, joy: JoyKey) -> bool:
            return keyboard.trigger(key) or (joypad is not None and joypad.trigger(joy))

        if triggered(Key.UP, JoyKey.UP):
            self.move(-1)
        elif triggered(Key.DOWN, JoyKey.DOWN):
            self.move(1)

        if triggered(Key.RETURN, JoyKey.A):
            return self.selected
        return None