"""Frame pacing and switching between the game's screens."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol

from theshot.fade import Fade
from theshot.geometry import Color, Mode

FRAME_MS = 1000 // 60
FPS_INTERVAL_MS = 500
_TIME_MASK = 0xFFFFFFFF


class Screen(Protocol):
    """One screen of the game, driven by the mode manager."""

    def init(self) -> None: ...

    def uninit(self) -> None: ...

    def update(self) -> None: ...

    def draw(self) -> None: ...


class FrameClock:
    """Decides when to run a frame and measures frames per second.

    Times are millisecond counters that wrap around at 32 bits.
    """

    def __init__(
        self,
        start_ms: int = 0,
        frame_ms: int = FRAME_MS,
        fps_interval_ms: int = FPS_INTERVAL_MS,
    ) -> None:
        if frame_ms <= 0 or fps_interval_ms <= 0:
            raise ValueError("intervals must be positive")
        self.frame_ms = frame_ms
        self.fps_interval_ms = fps_interval_ms
        self.last_exec = start_ms & _TIME_MASK
        self.fps_last = start_ms & _TIME_MASK
        self.frame_count = 0
        self.fps = 0

    def tick(self, now_ms: int) -> bool:
        """Note the current time; True when a frame should run now."""
        now = now_ms & _TIME_MASK
        since_fps = (now - self.fps_last) & _TIME_MASK
        if since_fps >= self.fps_interval_ms:
            self.fps = self.frame_count * 1000 // since_fps
            self.fps_last = now
            self.frame_count = 0
        if (now - self.last_exec) & _TIME_MASK >= self.frame_ms:
            self.last_exec = now
            self.frame_count += 1
            return True
        return False


class ModeManager:
    """Owns the current screen and the fade that moves between screens."""

    def __init__(
        self,
        screens: Mapping[Mode, Screen],
        mode: Mode = Mode.TITLE,
        poll_input: Callable[[], None] | None = None,
    ) -> None:
        self.screens = dict(screens)
        self.mode = Mode(mode)
        self.poll_input = poll_input
        self.set_mode(self.mode)
        # The fade switches to its starting mode once more as it is created.
        self.fade = Fade(self.mode, set_mode=self.set_mode)

    def set_mode(self, mode: Mode) -> None:
        """Shut down the current screen and start the one for mode."""
        current = self.screens.get(self.mode)
        if current is not None:
            current.uninit()
        self.mode = Mode(mode)
        following = self.screens.get(self.mode)
        if following is not None:
            following.init()

    def update(self) -> None:
        """Run one frame of input, the current screen and the fade."""
        if self.poll_input is not None:
            self.poll_input()
        screen = self.screens.get(self.mode)
        if screen is not None:
            screen.update()
        self.fade.update()

    def draw(self) -> Color:
        """Draw the current screen and return the fade overlay colour."""
        screen = self.screens.get(self.mode)
        if screen is not None:
            screen.draw()
        return self.fade.color