import math
import random

from theshot.effect import EffectPool
from theshot.geometry import Color, Vec3
from theshot.particle import (
    EFFECTS_PER_FRAME,
    PARTICLE_LIFE,
    SPARK_COLOR,
    ParticleEmitter,
)


def make_emitter(capacity=128):
    return ParticleEmitter(EffectPool(capacity=4096), random.Random(1234), capacity=capacity)


def test_spawn_sets_life_and_color():
    emitter = make_emitter()
    particle = emitter.spawn(Vec3(5.0, 6.0), Color(1.0, 0.0, 0.4, 1.0))
    assert particle.life == PARTICLE_LIFE == 15
    assert particle.color == Color(1.0, 0.0, 0.4, 1.0)
    assert emitter.active() == [particle]


def test_update_emits_two_effects_per_particle():
    emitter = make_emitter()
    emitter.spawn(Vec3(5.0, 6.0), Color())
    emitter.update()
    effects = emitter.effects.effects
    spawned = [e for e in effects if e.color == SPARK_COLOR]
    assert len(spawned) == EFFECTS_PER_FRAME
    assert emitter.active()[0].life == PARTICLE_LIFE - 1


def test_emitted_effects_are_in_range():
    emitter = make_emitter()
    emitter.spawn(Vec3(100.0, 100.0), Color())
    for _ in range(PARTICLE_LIFE):
        emitter.update()
    effects = [e for e in emitter.effects.effects if e.color == SPARK_COLOR]
    assert len(effects) == EFFECTS_PER_FRAME * PARTICLE_LIFE
    for effect in effects:
        speed = math.hypot(effect.move.x, effect.move.y)
        assert 0.7 - 1e-9 <= speed <= 6.6 + 1e-9
        assert effect.kind == 0


def test_particle_dies_after_its_life():
    emitter = make_emitter()
    emitter.spawn(Vec3(), Color())
    for _ in range(PARTICLE_LIFE - 1):
        emitter.update()
    assert len(emitter.active()) == 1
    emitter.update()
    assert emitter.active() == []


def test_full_emitter_returns_none():
    emitter = make_emitter(capacity=1)
    assert emitter.spawn(Vec3(), Color()) is not None
    assert emitter.spawn(Vec3(), Color()) is None


def test_same_seed_gives_same_effects():
    first = make_emitter()
    second = make_emitter()
    for emitter in (first, second):
        emitter.spawn(Vec3(1.0, 2.0), Color())
        emitter.update()
    moves_a = [e.move for e in first.effects.active()]
    moves_b = [e.move for e in second.effects.active()]
    assert moves_a == moves_b