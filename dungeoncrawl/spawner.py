"""Creating the player, monsters and the amulet in the world."""

from __future__ import annotations

import random

from dungeoncrawl.components import (
    AmuletOfYala,
    ChasingPlayer,
    Enemy,
    FieldOfView,
    Health,
    Item,
    Name,
    Player,
    Render,
)
from dungeoncrawl.draw import BLACK, WHITE, ColorPair, to_cp437
from dungeoncrawl.ecs import Entity, World
from dungeoncrawl.geometry import Point


def spawn_player(world: World, pos: Point) -> Entity:
    return world.spawn(
        Player(),
        pos,
        Render(ColorPair(WHITE, BLACK), to_cp437("@")),
        Health(current=10, max=10),
        FieldOfView(8),
    )


def _goblin() -> tuple[int, str, int]:
    return 1, "Goblin", to_cp437("g")


def _orc() -> tuple[int, str, int]:
    return 2, "Orc", to_cp437("o")


def spawn_monster(world: World, rng: random.Random, pos: Point) -> Entity:
    """A goblin on a d10 roll of 1-8, otherwise an orc."""
    hp, name, glyph = _goblin() if rng.randint(1, 10) <= 8 else _orc()
    return world.spawn(
        Enemy(),
        pos,
        Render(ColorPair(WHITE, BLACK), glyph),
        ChasingPlayer(),
        Health(current=hp, max=hp),
        Name(name),
        FieldOfView(6),
    )


def spawn_amulet_of_yala(world: World, pos: Point) -> Entity:
    return world.spawn(
        Item(),
        AmuletOfYala(),
        pos,
        Render(ColorPair(WHITE, BLACK), to_cp437("|")),
        Name("Amulet of Yala"),
    )