"""Score items dropped by defeated enemies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from theshot.geometry import SCREEN_HEIGHT, SCREEN_WIDTH, WHITE, Color, Quad, Vec3, quad_around

HALF_SIZE = 25.0
CENTER_MARGIN = 50.0
PICKUP_FACTOR = 0.4


class ItemType(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5


class ItemState(IntEnum):
    POP = 0
    MOVE = 1
    STOP = 2


ITEM_SCORES = {
    ItemType.ONE: 1000,
    ItemType.TWO: 2000,
    ItemType.THREE: 4000,
    ItemType.FOUR: 5000,
    ItemType.FIVE: 10000,
    ItemType.SIX: 20000,
}

ITEM_SPEEDS = {kind: 3.0 if kind is ItemType.FIVE else 4.0 for kind in ItemType}

_CENTER_LEFT = (SCREEN_WIDTH - CENTER_MARGIN) * 0.5
_CENTER_RIGHT = (SCREEN_WIDTH + CENTER_MARGIN) * 0.5


def _empty_quad() -> Quad:
    origin = Vec3()
    return (origin, origin, origin, origin)


@dataclass
class Item:
    """One item slot."""

    pos: Vec3 = Vec3()
    move: Vec3 = Vec3()
    color: Color = WHITE
    kind: int = ItemType.ONE
    used: bool = False
    life: int = 1
    counter: int = 0
    right: bool = False
    state: ItemState = ItemState.POP
    quad: Quad = field(default_factory=_empty_quad)


class ItemPool:
    """One slot per item type; items drift to the screen centre and stop."""

    def __init__(self, player_width: float, player_height: float, capacity: int = len(ItemType)) -> None:
        self.pickup_half_width = player_width * PICKUP_FACTOR
        self.pickup_half_height = player_height * PICKUP_FACTOR
        self.items = [Item() for _ in range(capacity)]

    def spawn(self, pos: Vec3, kind: int) -> Item | None:
        """Drop an item in the first free slot; None when all are taken.

        The slot keeps whatever movement it had before.
        """
        item = next((i for i in self.items if not i.used), None)
        if item is None:
            return None
        item.pos = pos
        item.kind = kind
        item.used = True
        item.life = 1
        item.color = WHITE
        item.state = ItemState.POP
        item.quad = quad_around(pos, HALF_SIZE, HALF_SIZE)
        return item

    def _advance_state(self, item: Item) -> None:
        if item.state is ItemState.POP:
            if item.pos.x <= _CENTER_LEFT or item.pos.x >= _CENTER_RIGHT:
                item.state = ItemState.MOVE
            else:
                item.state = ItemState.STOP
        elif item.state is ItemState.MOVE:
            if _CENTER_LEFT <= item.pos.x <= _CENTER_RIGHT:
                item.state = ItemState.STOP
        elif item.state is ItemState.STOP:
            item.move = Vec3(0.0, item.move.y, item.move.z)

    def _touches_player(self, item: Item, player_pos: Vec3) -> bool:
        return (
            player_pos.x - self.pickup_half_width <= item.pos.x <= player_pos.x + self.pickup_half_width
            and player_pos.y - self.pickup_half_height <= item.pos.y <= player_pos.y + self.pickup_half_height
        )

    def update(self, player_pos: Vec3) -> int:
        """Advance every slot by one frame and return the score earned."""
        score = 0
        for item in self.items:
            self._advance_state(item)
            if item.used:
                if self._touches_player(item, player_pos):
                    score += self.hit()
                if item.state is ItemState.MOVE:
                    speed = ITEM_SPEEDS.get(ItemType(item.kind), 0.0) if item.kind in ItemType._value2member_map_ else 0.0
                    if item.pos.x <= SCREEN_WIDTH * 0.5:
                        dx = speed
                    else:
                        dx = -speed
                    item.move = Vec3(dx if speed else item.move.x, 0.0, item.move.z)
                if item.used and item.pos.y >= SCREEN_HEIGHT:
                    item.used = False
                item.pos = item.pos + item.move
            item.quad = quad_around(item.pos, HALF_SIZE, HALF_SIZE)
        return score

    def hit(self) -> int:
        """Register a pickup and return the score it gives.

        A pickup always acts on the first slot: the first touch uses up its
        life, the next one awards its score and frees it.
        """
        item = self.items[0]
        if item.life <= 0:
            item.used = False
            return ITEM_SCORES.get(item.kind, 0)
        item.life -= 1
        item.color = WHITE
        return 0

    def active(self) -> list[Item]:
        """The items on screen in slot order."""
        return [i for i in self.items if i.used]