import random

import pytest

from dungeoncrawl.map import SCREEN_HEIGHT, SCREEN_WIDTH, TileType, map_idx
from dungeoncrawl.map_builder import NUM_ROOMS, MapBuilder
from dungeoncrawl.pathfinding import UNREACHABLE, DijkstraMap


@pytest.fixture(scope="module")
def builder():
    return MapBuilder(random.Random(7))


def _distances(builder):
    return DijkstraMap(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        [builder.map.point_to_index(builder.player_start)],
        builder.map,
        1024.0,
    ).map


def test_builds_requested_number_of_rooms(builder):
    assert len(builder.rooms) == NUM_ROOMS


def test_rooms_do_not_intersect(builder):
    for i, room in enumerate(builder.rooms):
        for other in builder.rooms[i + 1:]:
            assert not room.intersect(other)


def test_room_tiles_are_floor(builder):
    for room in builder.rooms:
        for p in room.points():
            assert builder.map.tiles[map_idx(p.x, p.y)] == TileType.FLOOR


def test_player_starts_in_first_room(builder):
    assert builder.player_start == builder.rooms[0].center()
    assert builder.map.can_enter_tile(builder.player_start)


def test_amulet_is_on_floor_and_farthest(builder):
    assert builder.map.can_enter_tile(builder.amulet_start)
    distances = _distances(builder)
    finite = [d for d in distances if d < UNREACHABLE]
    amulet_idx = builder.map.point_to_index(builder.amulet_start)
    assert distances[amulet_idx] == max(finite)


def test_every_room_is_reachable(builder):
    distances = _distances(builder)
    for room in builder.rooms:
        center = room.center()
        assert distances[builder.map.point_to_index(center)] < UNREACHABLE


def test_borders_are_walls(builder):
    for x in range(SCREEN_WIDTH):
        assert builder.map.tiles[map_idx(x, 0)] == TileType.WALL
        assert builder.map.tiles[map_idx(x, SCREEN_HEIGHT - 1)] == TileType.WALL
    for y in range(SCREEN_HEIGHT):
        assert builder.map.tiles[map_idx(0, y)] == TileType.WALL
        assert builder.map.tiles[map_idx(SCREEN_WIDTH - 1, y)] == TileType.WALL


def test_nothing_revealed_yet():
    fresh = MapBuilder(random.Random(3))
    revealed = list(fresh.map.revealed_tiles)
    assert len(revealed) == SCREEN_WIDTH * SCREEN_HEIGHT
    assert revealed == [False] * (SCREEN_WIDTH * SCREEN_HEIGHT)


def test_same_seed_same_dungeon():
    first = MapBuilder(random.Random(42))
    second = MapBuilder(random.Random(42))
    assert first.map.tiles == second.map.tiles
    assert first.rooms == second.rooms
    assert first.amulet_start == second.amulet_start