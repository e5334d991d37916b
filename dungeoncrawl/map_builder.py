"""Random dungeon generation: rooms, corridors and start positions."""

from __future__ import annotations

import random

from dungeoncrawl.geometry import Point, Rect
from dungeoncrawl.map import SCREEN_HEIGHT, SCREEN_WIDTH, Map, TileType, map_idx
from dungeoncrawl.pathfinding import UNREACHABLE, DijkstraMap

NUM_ROOMS = 20


class MapBuilder:
    """A freshly generated map with its rooms, player start and amulet position."""

    def __init__(self, rng: random.Random) -> None:
        self.map = Map()
        self.rooms: list[Rect] = []
        self.player_start = Point()
        self.amulet_start = Point()

        self._fill(TileType.WALL)
        self._build_random_rooms(rng)
        self._build_corridors(rng)
        self.player_start = self.rooms[0].center()

        dijkstra_map = DijkstraMap(
            SCREEN_WIDTH,
            SCREEN_HEIGHT,
            [self.map.point_to_index(self.player_start)],
            self.map,
            1024.0,
        )
        reachable = (
            (idx, dist) for idx, dist in enumerate(dijkstra_map.map) if dist < UNREACHABLE
        )
        # Among equally distant tiles the last one wins.
        farthest, _ = max(reachable, key=lambda item: (item[1], item[0]))
        self.amulet_start = self.map.index_to_point(farthest)

    def _fill(self, tile: TileType) -> None:
        self.map.tiles = [tile] * len(self.map.tiles)

    def _build_random_rooms(self, rng: random.Random) -> None:
        while len(self.rooms) < NUM_ROOMS:
            room = Rect.with_size(
                rng.randrange(1, SCREEN_WIDTH - 10),
                rng.randrange(1, SCREEN_HEIGHT - 10),
                rng.randrange(2, 10),
                rng.randrange(2, 10),
            )
            if any(existing.intersect(room) for existing in self.rooms):
                continue
            for p in room.points():
                if 0 < p.x < SCREEN_WIDTH and 0 < p.y < SCREEN_HEIGHT:
                    self.map.tiles[map_idx(p.x, p.y)] = TileType.FLOOR
            self.rooms.append(room)

    def _dig(self, point: Point) -> None:
        idx = self.map.try_idx(point)
        if idx is not None:
            self.map.tiles[idx] = TileType.FLOOR

    def _apply_vertical_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._dig(Point(x, y))

    def _apply_horizontal_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._dig(Point(x, y))

    def _build_corridors(self, rng: random.Random) -> None:
        rooms = sorted(self.rooms, key=lambda room: room.center().x)
        for previous_room, room in zip(rooms, rooms[1:]):
            prev = previous_room.center()
            new = room.center()
            if rng.randrange(0, 2) == 1:
                self._apply_horizontal_tunnel(prev.x, new.x, prev.y)
                self._apply_vertical_tunnel(prev.y, new.y, new.x)
            else:
                self._apply_vertical_tunnel(prev.y, new.y, prev.x)
                self._apply_horizontal_tunnel(prev.x, new.x, new.y)