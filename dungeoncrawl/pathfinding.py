"""Dijkstra flow maps over the dungeon grid."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable

from dungeoncrawl.map import Map

UNREACHABLE = math.inf


class DijkstraMap:
    """Distance from the nearest start tile for every tile of a grid."""

    def __init__(
        self,
        width: int,
        height: int,
        starts: Iterable[int],
        game_map: Map,
        max_depth: float,
    ) -> None:
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.map: list[float] = [UNREACHABLE] * (width * height)

        queue: deque[int] = deque()
        for start in starts:
            if 0 <= start < len(self.map):
                self.map[start] = 0.0
                queue.append(start)

        while queue:
            idx = queue.popleft()
            depth = self.map[idx]
            for target, cost in game_map.available_exits(idx):
                new_depth = depth + cost
                if new_depth > max_depth:
                    continue
                if new_depth < self.map[target]:
                    self.map[target] = new_depth
                    queue.append(target)

    def find_lowest_exit(self, idx: int, game_map: Map) -> int | None:
        """The neighbour of idx with the smallest distance, or None without exits."""
        exits = game_map.available_exits(idx)
        if not exits:
            return None
        return min(exits, key=lambda exit_: self.map[exit_[0]])[0]