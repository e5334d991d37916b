from dungeoncrawl.components import FieldOfView
from dungeoncrawl.ecs import World
from dungeoncrawl.fov import fov
from dungeoncrawl.geometry import Point, distance2d
from dungeoncrawl.map import Map, TileType, map_idx


def test_view_computed_and_clean():
    world = World()
    viewer = world.spawn(Point(10, 10), FieldOfView(8))
    fov(world, Map())
    view = world.get(viewer, FieldOfView)
    assert not view.is_dirty
    assert Point(10, 10) in view.visible_tiles
    assert Point(18, 10) in view.visible_tiles
    assert Point(19, 10) not in view.visible_tiles


def test_visible_tiles_within_radius():
    world = World()
    viewer = world.spawn(Point(20, 20), FieldOfView(6))
    fov(world, Map())
    view = world.get(viewer, FieldOfView)
    assert view.visible_tiles
    assert all(distance2d(Point(20, 20), p) <= 6 for p in view.visible_tiles)


def test_wall_blocks_sight():
    game_map = Map()
    game_map.tiles[map_idx(12, 10)] = TileType.WALL
    world = World()
    viewer = world.spawn(Point(10, 10), FieldOfView(8))
    fov(world, game_map)
    view = world.get(viewer, FieldOfView)
    assert Point(12, 10) in view.visible_tiles
    assert Point(13, 10) not in view.visible_tiles


def test_entities_without_position_untouched():
    world = World()
    lonely = world.spawn(FieldOfView(8))
    fov(world, Map())
    view = world.get(lonely, FieldOfView)
    assert view.is_dirty
    assert view.visible_tiles == set()