"""Screen constants, small vector types and the quad helpers used by sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
WINDOW_TITLE = "THE SHOT"


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector in screen space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


class Mode(IntEnum):
    """The screens the game can be on."""

    TITLE = 0
    TUTORIAL = 1
    GAME = 2
    RESULT = 3
    EDIT = 4
    RANKING = 5


@dataclass
class PlayerView:
    """What other objects need to know about the player."""

    pos: Vec3
    visible: bool = True
    vulnerable: bool = True


Quad = tuple[Vec3, Vec3, Vec3, Vec3]


def quad_around(center: Vec3, half_width: float, half_height: float) -> Quad:
    """Corners of an axis-aligned rectangle in triangle-strip order."""
    left, right = center.x - half_width, center.x + half_width
    top, bottom = center.y - half_height, center.y + half_height
    return (
        Vec3(left, top),
        Vec3(right, top),
        Vec3(left, bottom),
        Vec3(right, bottom),
    )


def diagonal(width: float, height: float) -> tuple[float, float]:
    """Half-diagonal length and diagonal angle of a width x height rectangle."""
    length = math.sqrt(width * width + height * height) / 2.0
    angle = math.atan2(width, height)
    return length, angle


def rotated_quad(center: Vec3, rot_z: float, angle: float, length: float) -> Quad:
    """Corners of a rectangle rotated by rot_z, in triangle-strip order."""
    offsets = (-math.pi + angle, math.pi - angle, -angle, angle)
    return tuple(
        Vec3(
            center.x + math.sin(rot_z + offset) * length,
            center.y + math.cos(rot_z + offset) * length,
            0.0,
        )
        for offset in offsets
    )  # type: ignore[return-value]


def fullscreen_quad() -> Quad:
    """Corners of a quad covering the whole screen."""
    return (
        Vec3(0.0, 0.0),
        Vec3(float(SCREEN_WIDTH), 0.0),
        Vec3(0.0, float(SCREEN_HEIGHT)),
        Vec3(float(SCREEN_WIDTH), float(SCREEN_HEIGHT)),
    )