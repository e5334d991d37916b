"""Component types attached to entities in the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeoncrawl.draw import ColorPair
from dungeoncrawl.geometry import Point


@dataclass(frozen=True)
class Render:
    color: ColorPair
    glyph: int


@dataclass(frozen=True)
class Player:
    pass


@dataclass(frozen=True)
class Enemy:
    pass


@dataclass(frozen=True)
class MovingRandomly:
    pass


@dataclass(frozen=True)
class ChasingPlayer:
    pass


@dataclass(frozen=True)
class Item:
    pass


@dataclass(frozen=True)
class AmuletOfYala:
    pass


@dataclass(frozen=True)
class WantsToMove:
    entity: int
    destination: Point


@dataclass(frozen=True)
class WantsToAttack:
    attacker: int
    target: int


@dataclass
class Health:
    current: int
    max: int


@dataclass(frozen=True)
class Name:
    value: str


@dataclass
class FieldOfView:
    radius: int
    visible_tiles: set[Point] = field(default_factory=set)
    is_dirty: bool = True

    def clone_dirty(self) -> FieldOfView:
        """A copy with the same radius, no visible tiles, marked for recalculation."""
        return FieldOfView(self.radius)