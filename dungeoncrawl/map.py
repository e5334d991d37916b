"""The dungeon tile map and field-of-view calculation."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from dungeoncrawl.geometry import Point, distance2d

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
DISPLAY_WIDTH = SCREEN_WIDTH // 2
DISPLAY_HEIGHT = SCREEN_HEIGHT // 2

NUM_TILES = SCREEN_WIDTH * SCREEN_HEIGHT

_DIRECTIONS = (Point(-1, 0), Point(1, 0), Point(0, -1), Point(0, 1))


class TileType(Enum):
    WALL = "wall"
    FLOOR = "floor"


def map_idx(x: int, y: int) -> int:
    """Index of the tile at (x, y) in the row-major tile list."""
    return y * SCREEN_WIDTH + x


class Map:
    """A SCREEN_WIDTH x SCREEN_HEIGHT grid of tiles with a revealed mask."""

    def __init__(self) -> None:
        self.tiles: list[TileType] = [TileType.FLOOR] * NUM_TILES
        self.revealed_tiles: list[bool] = [False] * NUM_TILES

    @property
    def width(self) -> int:
        return SCREEN_WIDTH

    @property
    def height(self) -> int:
        return SCREEN_HEIGHT

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < SCREEN_WIDTH and 0 <= point.y < SCREEN_HEIGHT

    def can_enter_tile(self, point: Point) -> bool:
        return self.in_bounds(point) and self.tiles[map_idx(point.x, point.y)] == TileType.FLOOR

    def try_idx(self, point: Point) -> int | None:
        if not self.in_bounds(point):
            return None
        return map_idx(point.x, point.y)

    def point_to_index(self, point: Point) -> int:
        return point.y * SCREEN_WIDTH + point.x

    def index_to_point(self, idx: int) -> Point:
        return Point(idx % SCREEN_WIDTH, idx // SCREEN_WIDTH)

    def _valid_exit(self, location: Point, delta: Point) -> int | None:
        destination = location + delta
        if self.can_enter_tile(destination):
            return self.point_to_index(destination)
        return None

    def available_exits(self, idx: int) -> list[tuple[int, float]]:
        """Enterable neighbours of a tile (left, right, up, down) with their cost."""
        location = self.index_to_point(idx)
        exits = []
        for delta in _DIRECTIONS:
            target = self._valid_exit(location, delta)
            if target is not None:
                exits.append((target, 1.0))
        return exits

    def pathing_distance(self, idx1: int, idx2: int) -> float:
        return distance2d(self.index_to_point(idx1), self.index_to_point(idx2))

    def is_opaque(self, idx: int) -> bool:
        return self.tiles[idx] != TileType.FLOOR


def _line(start: Point, end: Point) -> Iterator[Point]:
    """Bresenham line from start to end, both included."""
    x, y = start.x, start.y
    dx, dy = abs(end.x - x), -abs(end.y - y)
    sx = 1 if x < end.x else -1
    sy = 1 if y < end.y else -1
    err = dx + dy
    while True:
        yield Point(x, y)
        if x == end.x and y == end.y:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def _perimeter(center: Point, radius: int) -> Iterator[Point]:
    if radius <= 0:
        yield center
        return
    for d in range(-radius, radius + 1):
        yield center + Point(d, -radius)
        yield center + Point(d, radius)
        yield center + Point(-radius, d)
        yield center + Point(radius, d)


def field_of_view_set(center: Point, radius: int, game_map: Map) -> set[Point]:
    """Tiles visible from center within radius; opaque tiles block sight but are seen."""
    visible: set[Point] = set()
    for target in _perimeter(center, radius):
        for point in _line(center, target):
            if not game_map.in_bounds(point) or distance2d(center, point) > radius:
                break
            visible.add(point)
            if game_map.is_opaque(game_map.point_to_index(point)):
                break
    return visible