"""Drawing the map, the entities, the health bar and tooltips."""

from __future__ import annotations

from dungeoncrawl.camera import Camera
from dungeoncrawl.components import FieldOfView, Health, Name, Player, Render
from dungeoncrawl.draw import BLACK, DARK_GRAY, RED, WHITE, ColorPair, DrawBatch, to_cp437
from dungeoncrawl.ecs import World
from dungeoncrawl.geometry import Point
from dungeoncrawl.map import SCREEN_WIDTH, Map, TileType, map_idx

MAP_LAYER = 0
ENTITY_LAYER = 1
TEXT_LAYER = 2

MAP_Z = 0
ENTITY_Z = 5000
HUD_Z = 10000
TOOLTIP_Z = 10100

HUD_HELP = "Explore the Dungeon. Cursor keys to move. Space to Gain Health (skips turn)."

_TILE_GLYPHS = {TileType.FLOOR: to_cp437("."), TileType.WALL: to_cp437("#")}


def _player_view(world: World) -> FieldOfView:
    found = next(world.query(FieldOfView, Player), None)
    if found is None:
        raise LookupError("the world holds no player")
    return found[1]


def _offset(camera: Camera) -> Point:
    return Point(camera.left_x, camera.top_y)


def map_render(world: World, game_map: Map, camera: Camera) -> DrawBatch:
    """Tiles in view: visible ones bright, remembered ones dimmed."""
    view = _player_view(world)
    offset = _offset(camera)
    batch = DrawBatch(MAP_LAYER)
    for y in range(camera.top_y, camera.bottom_y + 1):
        for x in range(camera.left_x, camera.right_x):
            pt = Point(x, y)
            if not game_map.in_bounds(pt):
                continue
            idx = map_idx(x, y)
            visible = pt in view.visible_tiles
            if not (visible or game_map.revealed_tiles[idx]):
                continue
            tint = WHITE if visible else DARK_GRAY
            batch.set(pt - offset, ColorPair(tint, BLACK), _TILE_GLYPHS[game_map.tiles[idx]])
    return batch


def entity_render(world: World, camera: Camera) -> DrawBatch:
    """Every renderable entity the player can see."""
    view = _player_view(world)
    offset = _offset(camera)
    batch = DrawBatch(ENTITY_LAYER)
    for _, pos, render in world.query(Point, Render):
        if pos in view.visible_tiles:
            batch.set(pos - offset, render.color, render.glyph)
    return batch


def hud(world: World) -> DrawBatch:
    """The help line and the player's health bar."""
    found = next(world.query(Health, Player), None)
    if found is None:
        raise LookupError("the world holds no player")
    health = found[1]
    batch = DrawBatch(TEXT_LAYER)
    batch.print_centered(1, HUD_HELP)
    batch.bar_horizontal(
        Point(0, 0), SCREEN_WIDTH * 2, health.current, health.max, ColorPair(RED, BLACK)
    )
    batch.print_color_centered(
        0, f" Health: {health.current} / {health.max} ", ColorPair(WHITE, RED)
    )
    return batch


def tooltips(world: World, mouse_pos: Point, camera: Camera) -> DrawBatch:
    """Name (and health) of whatever visible entity lies under the mouse."""
    view = _player_view(world)
    map_pos = mouse_pos + _offset(camera)
    batch = DrawBatch(TEXT_LAYER)
    for entity, pos, name in world.query(Point, Name):
        if pos != map_pos or pos not in view.visible_tiles:
            continue
        health = world.get(entity, Health)
        display = name.value if health is None else f"{name.value} : {health.current} hp"
        batch.print(mouse_pos * 4, display)
    return batch