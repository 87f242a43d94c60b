"""The on-screen countdown shown as three digits."""

from __future__ import annotations

DIGIT_COUNT = 3
DIGIT_UV_WIDTH = 0.1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class CountdownTimer:
    """Counts whole seconds down, one second per frames_per_second updates."""

    def __init__(self, seconds: int = 100, frames_per_second: int = 60) -> None:
        self.seconds = seconds
        self.frames = 0
        self.frames_per_second = frames_per_second

    def update(self) -> None:
        """Advance one frame."""
        self.frames += 1
        if self.frames >= self.frames_per_second:
            self.seconds -= 1
            self.frames = 0

    def digits(self) -> tuple[int, int, int]:
        """Hundreds, tens and units of the remaining seconds."""
        count = self.seconds
        return (
            _trunc_div(_trunc_mod(count, 1000), 100),
            _trunc_div(_trunc_mod(count, 100), 10),
            _trunc_mod(count, 10),
        )

    def texture_offsets(self) -> list[tuple[float, float]]:
        """Left and right texture u coordinates for each digit."""
        return [
            (DIGIT_UV_WIDTH * d, DIGIT_UV_WIDTH + DIGIT_UV_WIDTH * d)
            for d in self.digits()
        ]