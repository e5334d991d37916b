"""Integer points, rectangles and distances on the tile grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point:
    """A position on the tile grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        return Point(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; x2 and y2 are exclusive."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def with_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        return cls(x, y, x + width, y + height)

    def center(self) -> Point:
        return Point((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersect(self, other: Rect) -> bool:
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def points(self) -> Iterator[Point]:
        """Yield every point inside the rectangle, row by row."""
        for y in range(self.y1, self.y2):
            for x in range(self.x1, self.x2):
                yield Point(x, y)


def distance2d(a: Point, b: Point) -> float:
    """Straight-line (Pythagorean) distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)