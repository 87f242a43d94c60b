"""Enemies: six kinds with their own movement and firing patterns."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

from theshot.bullet import BulletPool, BulletType
from theshot.geometry import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WHITE,
    Color,
    PlayerView,
    Quad,
    Vec3,
    quad_around,
)
from theshot.item import ItemPool
from theshot.particle import ParticleEmitter

MAX_ENEMIES = 128
ENEMY_HALF_SIZE = 25.0
BULLET_SIZE = 50.0
BULLET_SPEED = 10.0
DAMAGE_FRAMES = 5
OWN_FIRE_BASE = 70

DAMAGE_COLOR = Color(0.0, 0.0, 0.7, 1.0)
DEATH_PARTICLE_COLOR = Color(1.0, 0.2, 0.5, 1.0)

ENEMY_TEXTURES = (
    "data/TEXTURE/enemy100.png",
    "data/TEXTURE/enemy101.png",
    "data/TEXTURE/enemy102.png",
    "data/TEXTURE/enemy103.png",
    "data/TEXTURE/enemy104.png",
    "data/TEXTURE/enemy105.png",
)


class EnemyType(IntEnum):
    OWN = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5


class EnemyState(IntEnum):
    NORMAL = 0
    DAMAGE = 1


class Patrol(IntEnum):
    """Legs of the rectangular route flown by the third kind of enemy."""

    RIGHT = 0
    UNDER = 1
    LEFT = 2
    TOP = 3


ENEMY_LIVES = {
    EnemyType.OWN: 2,
    EnemyType.TWO: 2,
    EnemyType.THREE: 3,
    EnemyType.FOUR: 4,
    EnemyType.FIVE: 1,
    EnemyType.SIX: 5,
}

ENEMY_SCORES = {
    EnemyType.OWN: 10000,
    EnemyType.TWO: 20000,
    EnemyType.THREE: 30000,
    EnemyType.FOUR: 40000,
    EnemyType.FIVE: 50000,
    EnemyType.SIX: 70000,
}


def _empty_quad() -> Quad:
    origin = Vec3()
    return (origin, origin, origin, origin)


def _as_type(kind: int) -> EnemyType | None:
    try:
        return EnemyType(kind)
    except ValueError:
        return None


@dataclass
class Enemy:
    """One enemy slot."""

    pos: Vec3 = Vec3()
    move: Vec3 = Vec3()
    rot: Vec3 = Vec3()
    state: EnemyState = EnemyState.NORMAL
    patrol: Patrol = Patrol.RIGHT
    counter_state: int = 0
    length: float = 0.0
    angle: float = 0.0
    kind: int = EnemyType.OWN
    used: bool = False
    life: int = 0
    bullet_counter: int = 0
    right: bool = False
    top: bool = False
    color: Color = WHITE
    quad: Quad = field(default_factory=_empty_quad)

    def _touches(self, center: Vec3) -> bool:
        return (
            center.x - ENEMY_HALF_SIZE <= self.pos.x <= center.x + ENEMY_HALF_SIZE
            and center.y - ENEMY_HALF_SIZE <= self.pos.y <= center.y + ENEMY_HALF_SIZE
        )


class EnemyFleet:
    """A fixed number of enemy slots that move, fire and take damage."""

    def __init__(
        self,
        bullets: BulletPool,
        particles: ParticleEmitter | None = None,
        items: ItemPool | None = None,
        rng: random.Random | None = None,
        animation_time: int = 0,
        capacity: int = MAX_ENEMIES,
    ) -> None:
        self.bullets = bullets
        self.particles = particles
        self.items = items
        self.rng = rng if rng is not None else random.Random()
        self.own_fire_interval = animation_time + OWN_FIRE_BASE
        self.enemies = [Enemy() for _ in range(capacity)]
        self.count = 0
        self.timer = 0
        self._movers: dict[EnemyType, Callable[[Enemy, PlayerView], None]] = {
            EnemyType.OWN: self._move_own,
            EnemyType.TWO: self._move_two,
            EnemyType.THREE: self._move_three,
            EnemyType.FOUR: self._move_four,
            EnemyType.FIVE: self._move_five,
            EnemyType.SIX: self._move_six,
        }

    def spawn(self, pos: Vec3, kind: int) -> Enemy | None:
        """Place an enemy in the first free slot; None when all are taken.

        The slot keeps its movement, patrol leg and fire counter from before.
        """
        enemy = next((e for e in self.enemies if not e.used), None)
        if enemy is None:
            return None
        enemy.pos = pos
        enemy.kind = kind
        enemy.used = True
        enemy.state = EnemyState.NORMAL
        enemy_type = _as_type(kind)
        enemy.life = ENEMY_LIVES[enemy_type] if enemy_type is not None else 0
        enemy.quad = quad_around(pos, ENEMY_HALF_SIZE, ENEMY_HALF_SIZE)
        self.count += 1
        return enemy

    def _fire(self, enemy: Enemy, move: Vec3, life: int) -> None:
        self.bullets.spawn(
            enemy.pos, move, enemy.rot, BULLET_SIZE, BULLET_SIZE, life, BulletType.ENEMY
        )

    @staticmethod
    def _aim(x_angle: float, y_angle: float, sign: float = -1.0) -> Vec3:
        return Vec3(
            sign * math.sin(x_angle) * BULLET_SPEED,
            sign * math.cos(y_angle) * BULLET_SPEED,
            0.0,
        )

    def _fire_vertical(self, enemy: Enemy, life: int) -> None:
        rz = enemy.rot.z
        self._fire(enemy, self._aim(rz + math.pi, rz - math.pi), life)

    def _move_own(self, enemy: Enemy, player: PlayerView) -> None:
        if enemy.right:
            enemy.move = Vec3(5.0, 0.0, enemy.move.z)
            if enemy.pos.x >= SCREEN_WIDTH - ENEMY_HALF_SIZE:
                enemy.right = False
        else:
            enemy.move = Vec3(-5.0, 0.0, enemy.move.z)
            if enemy.pos.x <= ENEMY_HALF_SIZE:
                enemy.right = True
        if enemy.bullet_counter >= self.own_fire_interval:
            rz = enemy.rot.z
            if enemy.pos.y <= SCREEN_HEIGHT * 0.5:
                self._fire(enemy, self._aim(rz + math.pi, rz - math.pi), 50)
            else:
                self._fire(enemy, self._aim(rz + math.pi, rz + math.pi, 1.0), 50)
            enemy.bullet_counter = 0

    def _move_two(self, enemy: Enemy, player: PlayerView) -> None:
        if enemy.top:
            enemy.move = Vec3(0.0, -3.0, enemy.move.z)
            if enemy.pos.y <= 80.0:
                enemy.top = False
        else:
            enemy.move = Vec3(0.0, 3.0, enemy.move.z)
            if enemy.pos.y >= 650.0:
                enemy.top = True
        if enemy.bullet_counter >= 50:
            rz = enemy.rot.z
            half = math.pi * 0.5
            if enemy.pos.x >= SCREEN_WIDTH * 0.5:
                move = self._aim(rz + half, rz - half)
            else:
                move = self._aim(rz - half, rz + half)
            self._fire(enemy, move, 65)
            enemy.bullet_counter = 0

    def _move_three(self, enemy: Enemy, player: PlayerView) -> None:
        rz = enemy.rot.z
        half = math.pi * 0.5
        if enemy.patrol is Patrol.RIGHT:
            enemy.move = Vec3(5.0, 0.0, enemy.move.z)
            if enemy.pos.x >= SCREEN_WIDTH - ENEMY_HALF_SIZE:
                enemy.patrol = Patrol.UNDER
            shot, life = self._aim(rz + math.pi, rz - math.pi), 100
        elif enemy.patrol is Patrol.UNDER:
            enemy.move = Vec3(0.0, 3.0, enemy.move.z)
            if enemy.pos.y >= 535.0:
                enemy.patrol = Patrol.LEFT
            shot, life = self._aim(rz + half, rz - half), 30
        elif enemy.patrol is Patrol.LEFT:
            enemy.move = Vec3(-5.0, 0.0, enemy.move.z)
            if enemy.pos.x <= ENEMY_HALF_SIZE:
                enemy.patrol = Patrol.TOP
            shot, life = self._aim(rz + math.pi, rz - math.pi), 100
        else:
            enemy.move = Vec3(0.0, -3.0, enemy.move.z)
            if enemy.pos.y <= 130.0:
                enemy.patrol = Patrol.RIGHT
            shot, life = self._aim(rz - half, rz + half), 30
        if enemy.bullet_counter >= 150:
            self._fire(enemy, shot, life)
            enemy.bullet_counter = 0

    def _move_four(self, enemy: Enemy, player: PlayerView) -> None:
        enemy.move = Vec3(0.0, 0.0, enemy.move.z)
        right_half = enemy.pos.x >= SCREEN_WIDTH * 0.5
        upper_half = enemy.pos.y <= SCREEN_HEIGHT * 0.5
        if right_half:
            factor, interval = (0.75, 100) if upper_half else (0.25, 150)
        else:
            factor, interval = (-0.75, 50) if upper_half else (-0.25, 200)
        if enemy.bullet_counter >= interval:
            rz = enemy.rot.z
            turn = math.pi * factor
            self._fire(enemy, self._aim(rz + turn, rz - turn), 80)
            enemy.bullet_counter = 0

    def _move_five(self, enemy: Enemy, player: PlayerView) -> None:
        speed = float(self.rng.randrange(5)) + 0.3
        diff = player.pos - enemy.pos
        angle = math.atan2(diff.x, diff.y)
        enemy.move = Vec3(math.sin(angle) * speed, math.cos(angle) * speed, enemy.move.z)
        # The chaser steps here and again with every other enemy below.
        enemy.pos = Vec3(enemy.pos.x + enemy.move.x, enemy.pos.y + enemy.move.y, enemy.pos.z)
        if enemy.bullet_counter >= 120:
            self._fire_vertical(enemy, 70)
            enemy.bullet_counter = 0

    def _move_six(self, enemy: Enemy, player: PlayerView) -> None:
        enemy.move = Vec3(enemy.move.x, 0.0, enemy.move.z)
        self.timer += 1
        jumps = {60: 1260.0, 120: 640.0, 180: 20.0}
        if self.timer in jumps:
            enemy.pos = Vec3(jumps[self.timer], enemy.pos.y, enemy.pos.z)
            if self.timer == 180:
                self.timer = 0
        if enemy.bullet_counter >= 50:
            self._fire_vertical(enemy, 50)
            enemy.bullet_counter = 0

    def update(
        self,
        player: PlayerView,
        on_player_hit: Callable[[Vec3], None] | None = None,
    ) -> None:
        """Advance every live enemy by one frame.

        An enemy touching a vulnerable player calls on_player_hit with its
        own position and skips its movement pattern for that frame.
        """
        for enemy in self.enemies:
            if not enemy.used:
                continue
            if enemy.state is EnemyState.DAMAGE:
                enemy.counter_state -= 1
                if enemy.counter_state <= 0:
                    enemy.state = EnemyState.NORMAL
                continue

            enemy.bullet_counter += 1
            if enemy._touches(player.pos) and player.vulnerable:
                if on_player_hit is not None:
                    on_player_hit(enemy.pos)
                if self.particles is not None:
                    self.particles.spawn(enemy.pos, WHITE)
            else:
                enemy_type = _as_type(enemy.kind)
                if enemy_type is not None:
                    self._movers[enemy_type](enemy, player)

            enemy.pos = enemy.pos + enemy.move
            enemy.quad = quad_around(enemy.pos, ENEMY_HALF_SIZE, ENEMY_HALF_SIZE)
            enemy.color = WHITE

    def hit(self, index: int, damage: int) -> int:
        """Damage the enemy in slot index and return the score it gives."""
        enemy = self.enemies[index]
        enemy.life -= damage
        if enemy.life > 0:
            enemy.state = EnemyState.DAMAGE
            enemy.counter_state = DAMAGE_FRAMES
            enemy.color = DAMAGE_COLOR
            return 0

        enemy.used = False
        if self.particles is not None:
            self.particles.spawn(enemy.pos, DEATH_PARTICLE_COLOR)
        score = 0
        enemy_type = _as_type(enemy.kind)
        if enemy_type is not None:
            score = ENEMY_SCORES[enemy_type]
            if self.items is not None:
                self.items.spawn(enemy.pos, int(enemy_type))
        self.count -= 1
        return score

    def active(self) -> list[Enemy]:
        """The live enemies in slot order."""
        return [e for e in self.enemies if e.used]