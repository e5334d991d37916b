"""Text-terminal front end for the dungeon crawler."""

from __future__ import annotations

import argparse
import curses
import locale
import random
from typing import Iterator

from dungeoncrawl.draw import DARK_GRAY, Cell, Terminal
from dungeoncrawl.game import LAYER_SIZES, State
from dungeoncrawl.geometry import Point
from dungeoncrawl.player_input import Key
from dungeoncrawl.render import ENTITY_LAYER, MAP_LAYER, TEXT_LAYER

_HUD_ROWS = 2
_TEXT_SCALE = 4
_FRAME_MS = 1000 // 30

_KEYS = {
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    ord(" "): Key.SPACE,
    ord("1"): Key.KEY1,
}

_NO_KEY = {-1, curses.KEY_RESIZE, curses.KEY_MOUSE}


def key_from_curses(code: int) -> Key | None:
    """The game key for a curses key code; None when nothing was pressed."""
    if code in _NO_KEY:
        return None
    return _KEYS.get(code, Key.OTHER)


def _glyph(cell: Cell) -> str:
    return bytes([cell.glyph]).decode("cp437")


def _text_runs(terminal: Terminal, y: int) -> Iterator[tuple[int, str]]:
    """Contiguous stretches of text on one row of the text layer."""
    width, _ = terminal.sizes[TEXT_LAYER]
    start: int | None = None
    chars: list[str] = []
    for x in range(width + 1):
        cell = terminal.cell(TEXT_LAYER, x, y) if x < width else None
        if cell is None:
            if chars:
                yield start, "".join(chars)
            start, chars = None, []
        else:
            if start is None:
                start = x
            chars.append(_glyph(cell))


def _place(frame: dict, row: int, col: int, text: str) -> None:
    for offset, ch in enumerate(text):
        if col + offset >= 0:
            frame[(row, col + offset)] = (ch, False)


def _frame(terminal: Terminal, screen_width: int) -> dict[tuple[int, int], tuple[str, bool]]:
    """Characters to show keyed by (row, column), with a flag for dimmed ones."""
    frame: dict[tuple[int, int], tuple[str, bool]] = {}
    map_width, map_height = terminal.sizes[MAP_LAYER]
    text_width, text_height = terminal.sizes[TEXT_LAYER]
    shift = max(0, (text_width - screen_width) // 2)

    tiles = {}
    for y in range(map_height):
        for x in range(map_width):
            cell = terminal.cell(ENTITY_LAYER, x, y) or terminal.cell(MAP_LAYER, x, y)
            if cell is not None:
                tiles[(y + _HUD_ROWS, x)] = (_glyph(cell), cell.color.fg == DARK_GRAY)

    if not tiles:
        for y in range(text_height):
            for start, text in _text_runs(terminal, y):
                _place(frame, y, start - shift, text)
        return frame

    for y in range(_HUD_ROWS):
        for start, text in _text_runs(terminal, y):
            _place(frame, y, start - shift, text)
    frame.update(tiles)
    for y in range(_HUD_ROWS, text_height):
        for start, text in _text_runs(terminal, y):
            _place(frame, _HUD_ROWS + y // _TEXT_SCALE, start // _TEXT_SCALE, text)
    return frame


def _draw(screen, terminal: Terminal) -> None:
    screen.erase()
    height, width = screen.getmaxyx()
    for (row, col), (ch, dim) in _frame(terminal, width).items():
        if row < height and col < width:
            try:
                screen.addstr(row, col, ch, curses.A_DIM if dim else curses.A_NORMAL)
            except curses.error:
                pass
    screen.refresh()


def _run(screen, state: State) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    screen.timeout(_FRAME_MS)
    curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
    terminal = Terminal(LAYER_SIZES)
    mouse = Point()
    while True:
        code = screen.getch()
        if code == curses.KEY_MOUSE:
            try:
                _, mx, my, _, _ = curses.getmouse()
                mouse = Point(mx, my - _HUD_ROWS)
            except curses.error:
                pass
        state.tick(terminal, key_from_curses(code), mouse)
        _draw(screen, terminal)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dungeoncrawl", description="Dungeon Crawler")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dungeon generator")
    args = parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    state = State(random.Random(args.seed))
    try:
        curses.wrapper(_run, state)
    except KeyboardInterrupt:
        pass
    return 0