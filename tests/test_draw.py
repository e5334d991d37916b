import pytest

from dungeoncrawl.draw import (
    BAR_EMPTY,
    BAR_FULL,
    BLACK,
    RED,
    WHITE,
    Cell,
    ColorPair,
    DrawBatch,
    Terminal,
    to_cp437,
)
from dungeoncrawl.geometry import Point


def _terminal():
    return Terminal([(40, 25), (160, 100)])


def test_cp437_ascii_and_bar_glyph():
    assert to_cp437("@") == ord("@")
    assert BAR_FULL == 178


def test_set_and_render():
    term = _terminal()
    batch = DrawBatch(0)
    color = ColorPair(WHITE, BLACK)
    batch.set(Point(3, 4), color, to_cp437("#"))
    term.submit(batch, 0)
    assert term.cell(0, 3, 4) is None
    term.render()
    assert term.cell(0, 3, 4) == Cell(to_cp437("#"), color)


def test_out_of_bounds_ignored():
    term = _terminal()
    batch = DrawBatch(0)
    batch.set(Point(-1, 0), ColorPair(WHITE, BLACK), 1)
    batch.set(Point(40, 0), ColorPair(WHITE, BLACK), 1)
    term.submit(batch, 0)
    term.render()
    assert term.cell(0, 0, 0) is None
    assert term.cell(0, 39, 0) is None


def test_print_writes_consecutive_cells():
    term = _terminal()
    batch = DrawBatch(1)
    batch.print(Point(5, 2), "Orc")
    term.submit(batch, 0)
    term.render()
    assert [term.cell(1, 5 + i, 2).glyph for i in range(3)] == [to_cp437(c) for c in "Orc"]


def test_print_centered_is_balanced():
    term = _terminal()
    text = "Explore the Dungeon."
    batch = DrawBatch(1)
    batch.print_centered(1, text)
    term.submit(batch, 0)
    term.render()
    used = [x for x in range(160) if term.cell(1, x, 1) is not None]
    assert len(used) == len(text)
    assert used == list(range(used[0], used[0] + len(text)))
    left, right = used[0], 160 - used[-1] - 1
    assert abs(left - right) <= 1


def test_print_color_centered_uses_color():
    term = _terminal()
    color = ColorPair(WHITE, RED)
    batch = DrawBatch(1)
    batch.print_color_centered(0, " Health ", color)
    term.submit(batch, 0)
    term.render()
    cells = [term.cell(1, x, 0) for x in range(160)]
    assert {c.color for c in cells if c is not None} == {color}


@pytest.mark.parametrize("n", [10, 7])
def test_bar_full_and_partial(n):
    term = _terminal()
    batch = DrawBatch(1)
    batch.bar_horizontal(Point(0, 0), 160, n, 10, ColorPair(RED, BLACK))
    term.submit(batch, 0)
    term.render()
    glyphs = [term.cell(1, x, 0).glyph for x in range(160)]
    assert set(glyphs) <= {BAR_FULL, BAR_EMPTY}
    filled = glyphs.count(BAR_FULL)
    assert glyphs[:filled] == [BAR_FULL] * filled
    if n == 10:
        assert filled == 160
    else:
        assert 0 < filled < 160


def test_z_order_later_wins_regardless_of_submit_order():
    term = _terminal()
    high, low = DrawBatch(0), DrawBatch(0)
    high.set(Point(1, 1), ColorPair(WHITE, BLACK), to_cp437("a"))
    low.set(Point(1, 1), ColorPair(WHITE, BLACK), to_cp437("b"))
    term.submit(high, 10)
    term.submit(low, 5)
    term.render()
    assert term.cell(0, 1, 1).glyph == to_cp437("a")


def test_cls_clears_layers():
    term = _terminal()
    batch = DrawBatch(0)
    batch.set(Point(0, 0), ColorPair(WHITE, BLACK), 1)
    term.submit(batch, 0)
    term.render()
    term.cls()
    assert term.cell(0, 0, 0) is None


def test_submit_bad_layer_raises():
    with pytest.raises(IndexError):
        _terminal().submit(DrawBatch(5), 0)