"""Recomputing what each viewer can see."""

from __future__ import annotations

from dungeoncrawl.components import FieldOfView
from dungeoncrawl.ecs import World
from dungeoncrawl.geometry import Point
from dungeoncrawl.map import Map, field_of_view_set


def fov(world: World, game_map: Map) -> None:
    """Refresh the visible tiles of every entity with a position and a field of view."""
    for _, pos, view in world.query(Point, FieldOfView):
        view.visible_tiles = field_of_view_set(pos, view.radius, game_map)
        view.is_dirty = False