"""Animated explosion sprites played through a strip of frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from theshot.geometry import WHITE, Color, Quad, Vec3, quad_around

MAX_EXPLOSIONS = 128
HALF_SIZE = 50.0
FRAME_TICKS = 4
FRAME_WIDTH = 0.125
ANIMATION_PATTERNS = 8
SPLIT_V = 1.0


def _empty_quad() -> Quad:
    origin = Vec3()
    return (origin, origin, origin, origin)


@dataclass
class Explosion:
    """One explosion slot."""

    pos: Vec3 = Vec3()
    color: Color = WHITE
    counter: int = 0
    pattern: int = 0
    used: bool = False
    quad: Quad = field(default_factory=_empty_quad)

    def texture_coords(self) -> tuple[tuple[float, float], ...]:
        """Texture coordinates of the current frame in triangle-strip order."""
        left = self.pattern * FRAME_WIDTH
        right = FRAME_WIDTH + self.pattern * FRAME_WIDTH
        return ((left, 0.0), (right, 0.0), (left, SPLIT_V), (right, SPLIT_V))


class ExplosionPool:
    """A fixed number of explosion slots."""

    def __init__(self, capacity: int = MAX_EXPLOSIONS) -> None:
        self.explosions = [Explosion() for _ in range(capacity)]

    def spawn(self, pos: Vec3, color: Color) -> Explosion | None:
        """Start an explosion in the first free slot; None when all are busy."""
        explosion = next((e for e in self.explosions if not e.used), None)
        if explosion is None:
            return None
        explosion.pos = pos
        explosion.color = color
        explosion.used = True
        explosion.quad = quad_around(pos, HALF_SIZE, HALF_SIZE)
        return explosion

    def update(self) -> None:
        """Advance the animation of every slot by one frame."""
        for explosion in self.explosions:
            # Idle slots keep counting too, so a reused slot may advance at once.
            explosion.counter += 1
            if not explosion.used:
                continue
            if explosion.counter >= FRAME_TICKS:
                explosion.counter = 0
                explosion.pattern += 1
            if explosion.pattern > ANIMATION_PATTERNS:
                explosion.pattern = 0
                explosion.used = False

    def active(self) -> list[Explosion]:
        """The playing explosions in slot order."""
        return [e for e in self.explosions if e.used]