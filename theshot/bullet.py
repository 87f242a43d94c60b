"""Player and enemy bullets: movement, lifetime and hit detection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from theshot.geometry import PlayerView, Quad, Vec3, diagonal, rotated_quad

MAX_BULLETS = 128
DEFAULT_SIZE = 25.0
DEFAULT_LIFE = 100
HIT_HALF_SIZE = 25.0


class BulletType(IntEnum):
    """Who fired a bullet."""

    PLAYER = 0
    ENEMY = 1


class Target(Protocol):
    """Anything a player bullet can hit."""

    used: bool
    pos: Vec3


@dataclass
class Bullet:
    """One bullet slot."""

    pos: Vec3 = Vec3()
    move: Vec3 = Vec3()
    rot: Vec3 = Vec3()
    life: int = DEFAULT_LIFE
    used: bool = False
    kind: BulletType = BulletType.PLAYER
    angle: float = diagonal(DEFAULT_SIZE, DEFAULT_SIZE)[1]
    length: float = diagonal(DEFAULT_SIZE, DEFAULT_SIZE)[0]
    variant: int = 0

    def corners(self) -> Quad:
        """The rotated sprite corners in triangle-strip order."""
        return rotated_quad(self.pos, self.rot.z, self.angle, self.length)

    def touches(self, center: Vec3) -> bool:
        return (
            center.x - HIT_HALF_SIZE <= self.pos.x <= center.x + HIT_HALF_SIZE
            and center.y - HIT_HALF_SIZE <= self.pos.y <= center.y + HIT_HALF_SIZE
        )


class BulletPool:
    """A fixed number of bullet slots."""

    def __init__(self, capacity: int = MAX_BULLETS) -> None:
        self.bullets = [Bullet() for _ in range(capacity)]

    def spawn(
        self,
        pos: Vec3,
        move: Vec3,
        rot: Vec3,
        width: float,
        height: float,
        life: int,
        kind: BulletType,
    ) -> Bullet | None:
        """Fire a bullet from the first free slot; None when all are in flight."""
        bullet = next((b for b in self.bullets if not b.used), None)
        if bullet is None:
            return None
        bullet.length, bullet.angle = diagonal(width, height)
        bullet.pos = pos
        bullet.rot = rot
        bullet.move = move
        bullet.life = life
        bullet.kind = BulletType(kind)
        bullet.used = True
        return bullet

    def update(
        self,
        player: PlayerView,
        enemies: Sequence[Target] = (),
        on_enemy_hit: Callable[[int, Vec3], None] | None = None,
        on_player_hit: Callable[[Vec3], None] | None = None,
    ) -> None:
        """Check hits, move every live bullet and age it by one frame.

        A player bullet is tested against every live enemy, so it may strike
        several overlapping enemies in the same frame; on_enemy_hit receives
        the enemy's index and the bullet position. An enemy bullet strikes a
        visible, vulnerable player and calls on_player_hit with its position.
        """
        for bullet in self.bullets:
            if not bullet.used:
                continue
            if bullet.kind is BulletType.PLAYER:
                for index, enemy in enumerate(enemies):
                    if enemy.used and bullet.touches(enemy.pos):
                        if on_enemy_hit is not None:
                            on_enemy_hit(index, bullet.pos)
                        bullet.used = False
            elif player.visible and player.vulnerable and bullet.touches(player.pos):
                if on_player_hit is not None:
                    on_player_hit(bullet.pos)
                bullet.used = False

            bullet.pos = Vec3(bullet.pos.x + bullet.move.x, bullet.pos.y + bullet.move.y, bullet.pos.z)
            bullet.life -= 1
            if bullet.life <= 0:
                bullet.used = False

    def active(self) -> list[Bullet]:
        """The bullets in flight in slot order."""
        return [b for b in self.bullets if b.used]