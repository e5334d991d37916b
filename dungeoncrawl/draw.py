"""Layered character-cell terminal and batched drawing commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from dungeoncrawl.geometry import Point

RGB = tuple[int, int, int]

WHITE: RGB = (255, 255, 255)
BLACK: RGB = (0, 0, 0)
RED: RGB = (255, 0, 0)
YELLOW: RGB = (255, 255, 0)
GREEN: RGB = (0, 255, 0)
DARK_GRAY: RGB = (169, 169, 169)


def to_cp437(ch: str) -> int:
    """Code-page-437 glyph number of a character."""
    return ch.encode("cp437", errors="replace")[0]


BAR_FULL = to_cp437("▓")
BAR_EMPTY = to_cp437("░")


@dataclass(frozen=True)
class ColorPair:
    fg: RGB
    bg: RGB


DEFAULT_COLOR = ColorPair(WHITE, BLACK)


@dataclass(frozen=True)
class Cell:
    glyph: int
    color: ColorPair


@dataclass(frozen=True)
class _SetGlyph:
    pos: Point
    color: ColorPair
    glyph: int

    def apply(self, grid: dict, width: int, height: int) -> None:
        _put(grid, width, height, self.pos.x, self.pos.y, Cell(self.glyph, self.color))


@dataclass(frozen=True)
class _Text:
    y: int
    text: str
    color: ColorPair
    x: int | None = None

    def apply(self, grid: dict, width: int, height: int) -> None:
        x = width // 2 - len(self.text) // 2 if self.x is None else self.x
        for offset, ch in enumerate(self.text):
            _put(grid, width, height, x + offset, self.y, Cell(to_cp437(ch), self.color))


def _put(grid: dict, width: int, height: int, x: int, y: int, cell: Cell) -> None:
    if 0 <= x < width and 0 <= y < height:
        grid[(x, y)] = cell


class DrawBatch:
    """A list of drawing commands aimed at one terminal layer."""

    def __init__(self, layer: int = 0) -> None:
        self.layer = layer
        self.commands: list[_SetGlyph | _Text] = []

    def set(self, pos: Point, color: ColorPair, glyph: int) -> None:
        self.commands.append(_SetGlyph(pos, color, glyph))

    def print(self, pos: Point, text: str) -> None:
        self.commands.append(_Text(pos.y, text, DEFAULT_COLOR, pos.x))

    def print_centered(self, y: int, text: str) -> None:
        self.commands.append(_Text(y, text, DEFAULT_COLOR))

    def print_color_centered(self, y: int, text: str, color: ColorPair) -> None:
        self.commands.append(_Text(y, text, color))

    def bar_horizontal(self, pos: Point, width: int, n: int, max_n: int, color: ColorPair) -> None:
        """A bar of width cells, filled in proportion to n out of max_n."""
        fill_width = int(n / max_n * width) if max_n else 0
        for x in range(width):
            glyph = BAR_FULL if x <= fill_width else BAR_EMPTY
            self.set(Point(pos.x + x, pos.y), color, glyph)


@dataclass(order=True)
class _Pending:
    z_order: int
    sequence: int
    batch: DrawBatch = field(compare=False)


class Terminal:
    """Stacked character layers that batches are drawn onto."""

    def __init__(self, layers: Sequence[tuple[int, int]]) -> None:
        self.sizes: list[tuple[int, int]] = [tuple(size) for size in layers]
        self._grids: list[dict[tuple[int, int], Cell]] = [{} for _ in self.sizes]
        self._pending: list[_Pending] = []
        self._sequence = 0

    def cls(self) -> None:
        """Clear every layer."""
        for grid in self._grids:
            grid.clear()

    def submit(self, batch: DrawBatch, z_order: int) -> None:
        """Queue a batch; lower z_order is drawn first."""
        if not 0 <= batch.layer < len(self._grids):
            raise IndexError(f"no such layer: {batch.layer}")
        self._pending.append(_Pending(z_order, self._sequence, batch))
        self._sequence += 1

    def render(self) -> None:
        """Draw all queued batches in z order and empty the queue."""
        for pending in sorted(self._pending):
            layer = pending.batch.layer
            width, height = self.sizes[layer]
            for command in pending.batch.commands:
                command.apply(self._grids[layer], width, height)
        self._pending.clear()

    def cell(self, layer: int, x: int, y: int) -> Cell | None:
        return self._grids[layer].get((x, y))