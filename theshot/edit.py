"""Wave editor: place enemies on screen and write the layout to a wave file."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from theshot.enemy import ENEMY_HALF_SIZE, MAX_ENEMIES, EnemyType
from theshot.geometry import Quad, Vec3, quad_around
from theshot.input import Key, Keyboard

EDIT_MOVE = 20.0

_COUNT = struct.Struct("<i")
# Position (three floats), enemy type, in-use flag and the struct's padding.
_RECORD = struct.Struct("<3fi?3x")


def _empty_quad() -> Quad:
    origin = Vec3()
    return (origin, origin, origin, origin)


@dataclass
class Placement:
    """One enemy placed in the editor."""

    pos: Vec3 = Vec3()
    kind: int = EnemyType.OWN
    used: bool = False
    quad: Quad = field(default_factory=_empty_quad)


class WaveEditor:
    """Moves a cursor enemy around, places it and saves the placements."""

    def __init__(
        self,
        path: str | PathLike[str] | None = None,
        capacity: int = MAX_ENEMIES,
    ) -> None:
        self.path = path
        self.placements = [Placement() for _ in range(capacity)]
        self.placements[0].used = True
        self.count = 0

    @property
    def current(self) -> Placement:
        """The placement being moved by the cursor keys."""
        return self.placements[self.count]

    def update(self, keyboard: Keyboard) -> None:
        """Apply one frame of keyboard input."""
        current = self.current
        pos = current.pos
        if keyboard.trigger(Key.A):
            current.pos = Vec3(pos.x - EDIT_MOVE, pos.y, pos.z)
        elif keyboard.trigger(Key.D):
            current.pos = Vec3(pos.x + EDIT_MOVE, pos.y, pos.z)
        elif keyboard.trigger(Key.W):
            current.pos = Vec3(pos.x, pos.y - EDIT_MOVE, pos.z)
        elif keyboard.trigger(Key.S):
            current.pos = Vec3(pos.x, pos.y + EDIT_MOVE, pos.z)

        if keyboard.trigger(Key.UP):
            if current.kind < len(EnemyType) - 1:
                current.kind += 1
        elif keyboard.trigger(Key.DOWN):
            if current.kind > EnemyType.OWN:
                current.kind -= 1

        if keyboard.trigger(Key.RETURN):
            self.place()

        if keyboard.trigger(Key.F7) and self.path is not None:
            self.save(self.path)

        for placement in self.placements:
            if placement.used:
                placement.quad = quad_around(placement.pos, ENEMY_HALF_SIZE, ENEMY_HALF_SIZE)

    def place(self) -> Placement:
        """Fix the current enemy and start a new one at the same position."""
        if self.count + 1 >= len(self.placements):
            raise IndexError("no room for another enemy")
        nxt = self.placements[self.count + 1]
        nxt.pos = self.current.pos
        nxt.used = True
        self.count += 1
        return nxt

    def save(self, path: str | PathLike[str]) -> None:
        """Write the placed enemies to a binary wave file."""
        records = [
            _RECORD.pack(p.pos.x, p.pos.y, p.pos.z, int(p.kind), p.used)
            for p in self.placements[: self.count]
            if p.used
        ]
        with open(path, "wb") as stream:
            stream.write(_COUNT.pack(self.count))
            stream.writelines(records)


def read_wave_file(path: str | PathLike[str]) -> list[Placement]:
    """Read the placements written by WaveEditor.save."""
    data = Path(path).read_bytes()
    if len(data) < _COUNT.size:
        raise ValueError("wave file too short")
    (count,) = _COUNT.unpack_from(data, 0)
    if count < 0:
        raise ValueError(f"negative enemy count: {count}")
    needed = _COUNT.size + count * _RECORD.size
    if len(data) < needed:
        raise ValueError("wave file truncated")
    placements = []
    for offset in range(_COUNT.size, needed, _RECORD.size):
        x, y, z, kind, used = _RECORD.unpack_from(data, offset)
        pos = Vec3(x, y, z)
        placements.append(
            Placement(pos, kind, used, quad_around(pos, ENEMY_HALF_SIZE, ENEMY_HALF_SIZE))
        )
    return placements