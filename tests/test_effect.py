import pytest

from theshot.effect import MAX_EFFECTS, SHRUNK_RADIUS, EffectPool
from theshot.geometry import Color, Vec3, quad_around


def test_default_capacity():
    assert len(EffectPool().effects) == MAX_EFFECTS == 4096


def test_spawn_shrinks_radius_once_and_builds_quad():
    pool = EffectPool(capacity=4)
    effect = pool.spawn(Vec3(100.0, 200.0), Vec3(1.0, 2.0), Color(1, 0, 0, 1), 10.0, 5, 3)
    assert effect is not None
    assert effect.radius == pytest.approx(10.0 - 1)
    assert effect.quad == quad_around(Vec3(100.0, 200.0), effect.radius, effect.radius)
    assert effect.kind == 3
    assert effect.color == Color(1, 0, 0, 1)
    assert pool.active() == [effect]


def test_update_moves_by_move():
    pool = EffectPool(capacity=2)
    effect = pool.spawn(Vec3(10.0, 20.0), Vec3(3.0, -4.0), Color(), 20.0, 10)
    pool.update()
    assert effect.pos == Vec3(10.0, 20.0) + Vec3(3.0, -4.0)


def test_quad_is_built_before_clamp():
    pool = EffectPool(capacity=1)
    effect = pool.spawn(Vec3(50.0, 50.0), Vec3(), Color(), 1.0, 10)
    pool.update()
    assert effect.radius == SHRUNK_RADIUS
    left_top = effect.quad[0]
    assert left_top.x > 50.0


def test_effect_expires_after_life_frames():
    pool = EffectPool(capacity=2)
    pool.spawn(Vec3(), Vec3(), Color(), 30.0, 3)
    pool.update()
    pool.update()
    assert len(pool.active()) == 1
    pool.update()
    assert pool.active() == []


def test_full_pool_returns_none():
    pool = EffectPool(capacity=2)
    assert pool.spawn(Vec3(), Vec3(), Color(), 5.0, 5) is not None
    assert pool.spawn(Vec3(), Vec3(), Color(), 5.0, 5) is not None
    assert pool.spawn(Vec3(), Vec3(), Color(), 5.0, 5) is None


def test_expired_slot_is_reused():
    pool = EffectPool(capacity=1)
    first = pool.spawn(Vec3(), Vec3(), Color(), 5.0, 1)
    pool.update()
    second = pool.spawn(Vec3(7.0, 7.0), Vec3(), Color(), 5.0, 1)
    assert second is first
    assert second.pos == Vec3(7.0, 7.0)