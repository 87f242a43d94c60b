"""Bursts that scatter random effects around a point for a few frames."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from theshot.effect import EffectPool
from theshot.geometry import WHITE, Color, Vec3

MAX_PARTICLES = 128
INITIAL_LIFE = 10
PARTICLE_LIFE = 15
EFFECTS_PER_FRAME = 2
SPARK_COLOR = Color(0.6, 0.4, 1.0, 0.5)


@dataclass
class Particle:
    """One burst source."""

    pos: Vec3 = Vec3()
    life: int = INITIAL_LIFE
    used: bool = False
    color: Color = WHITE


class ParticleEmitter:
    """A fixed set of burst sources feeding an effect pool."""

    def __init__(
        self,
        effects: EffectPool,
        rng: random.Random | None = None,
        capacity: int = MAX_PARTICLES,
    ) -> None:
        self.effects = effects
        self.rng = rng if rng is not None else random.Random()
        self.particles = [Particle() for _ in range(capacity)]

    def spawn(self, pos: Vec3, color: Color) -> Particle | None:
        """Start a burst in the first free slot; None when all are busy."""
        particle = next((p for p in self.particles if not p.used), None)
        if particle is None:
            return None
        particle.pos = pos
        particle.used = True
        particle.life = PARTICLE_LIFE
        particle.color = color
        return particle

    def _emit(self, pos: Vec3) -> None:
        rng = self.rng
        angle = (rng.randrange(629) - 314) / 100.0
        length = rng.randrange(60) / 10.0 + 0.7
        move = Vec3(math.sin(angle) * length, math.cos(angle) * length, 0.0)
        radius = rng.randrange(450) / 10.0 + 0.7
        life = int(rng.randrange(2000) / 10)
        self.effects.spawn(pos, move, SPARK_COLOR, radius, life, 0)

    def update(self) -> None:
        """Emit effects from every live burst and age it by one frame."""
        for particle in self.active():
            for _ in range(EFFECTS_PER_FRAME):
                self._emit(particle.pos)
            particle.life -= 1
            if particle.life <= 0:
                particle.used = False

    def active(self) -> list[Particle]:
        """The live bursts in slot order."""
        return [p for p in self.particles if p.used]