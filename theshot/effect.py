"""Short-lived glowing dots that shrink as they drift."""

from __future__ import annotations

from dataclasses import dataclass, field

from theshot.geometry import WHITE, Color, Quad, Vec3, quad_around

MAX_EFFECTS = 4096
MIN_RADIUS = 0.5
SHRUNK_RADIUS = 0.3


def _empty_quad() -> Quad:
    origin = Vec3()
    return (origin, origin, origin, origin)


@dataclass
class Effect:
    """One glowing dot."""

    pos: Vec3 = Vec3()
    move: Vec3 = Vec3()
    color: Color = WHITE
    radius: float = 0.0
    life: int = 100
    kind: int = 0
    used: bool = False
    quad: Quad = field(default_factory=_empty_quad)

    def _refresh_quad(self) -> None:
        self.quad = quad_around(self.pos, self.radius, self.radius)


class EffectPool:
    """A fixed number of effect slots, reused as effects expire."""

    def __init__(self, capacity: int = MAX_EFFECTS) -> None:
        self.effects = [Effect() for _ in range(capacity)]

    def spawn(
        self,
        pos: Vec3,
        move: Vec3,
        color: Color,
        radius: float,
        life: int,
        kind: int = 0,
    ) -> Effect | None:
        """Start an effect in the first free slot; None when the pool is full."""
        effect = next((e for e in self.effects if not e.used), None)
        if effect is None:
            return None
        effect.pos = pos
        effect.move = move
        effect.life = life
        effect.kind = kind
        effect.used = True
        effect.color = color
        effect.radius = radius - 1
        effect._refresh_quad()
        return effect

    def update(self) -> None:
        """Advance every live effect by one frame."""
        for effect in self.active():
            effect.pos = effect.pos + effect.move
            effect.radius -= 1
            effect._refresh_quad()
            if effect.radius <= MIN_RADIUS:
                effect.radius = SHRUNK_RADIUS
            effect.life -= 1
            if effect.life <= 0:
                effect.used = False

    def active(self) -> list[Effect]:
        """The live effects in slot order."""
        return [e for e in self.effects if e.used]