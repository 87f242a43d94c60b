"""Full-screen fade between modes."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from theshot.geometry import Color, Mode

FADE_STEP = 0.03


class FadeState(IntEnum):
    NONE = 0
    IN = 1
    OUT = 2


class Fade:
    """A black overlay that fades out to switch mode and fades back in."""

    def __init__(
        self,
        mode_next: Mode,
        set_mode: Callable[[Mode], None] | None = None,
    ) -> None:
        self.state = FadeState.IN
        self.mode_next = mode_next
        self.alpha = 1.0
        self._set_mode = set_mode
        self._switch(mode_next)

    @property
    def color(self) -> Color:
        return Color(0.0, 0.0, 0.0, self.alpha)

    def _switch(self, mode: Mode) -> None:
        if self._set_mode is not None:
            self._set_mode(mode)

    def update(self) -> None:
        """Advance one frame."""
        if self.state is FadeState.IN:
            self.alpha -= FADE_STEP
            if self.alpha <= 0.0:
                self.alpha = 0.0
                self.state = FadeState.NONE
        elif self.state is FadeState.OUT:
            self.alpha += FADE_STEP
            if self.alpha >= 1.0:
                self.alpha = 1.0
                self.state = FadeState.IN
                self._switch(self.mode_next)

    def start(self, mode_next: Mode) -> None:
        """Begin fading out towards mode_next."""
        self.state = FadeState.OUT
        self.mode_next = mode_next