"""Tests for the checklist renderer."""

from mdpick.tui.render import build_rows, draw_screen, fit, format_item
from mdpick.tui.surface import MemorySurface
from mdpick.tui.theme import DEFAULT_THEME, Theme
from mdpick.types import Catalog, Item


def _texts(rows):
    return [text for text, _ in rows]


def test_fit_pads_and_truncates():
    assert fit("abc", 5) == "abc  "
    assert fit("abcdef", 4) == "abcd"
    assert fit("abc", 0) == ""


def test_format_item():
    assert format_item(Item("notes"), is_cursor=True) == "> [ ] notes"
    assert format_item(Item("notes", checked=True), is_cursor=False) == "  [x] notes"


def test_header_and_items():
    catalog = Catalog([Item("alpha"), Item("beta", checked=True)])
    rows = _texts(build_rows(20, 10, catalog, cursor=0, offset=0))

    assert rows[0] == fit(DEFAULT_THEME.instructions, 20)
    assert rows[1] == "-" * 20
    assert rows[2] == fit("> [ ] alpha", 20)
    assert rows[3] == fit("  [x] beta", 20)
    assert len(rows) == 4
    assert all(len(row) == 20 for row in rows)


def test_only_window_rows_are_rendered():
    catalog = Catalog.from_names([f"item{i:02d}" for i in range(10)])
    rows = _texts(build_rows(30, 5, catalog, cursor=4, offset=2))
    assert [row.strip() for row in rows[2:]] == [
        "[ ] item02",
        "[ ] item03",
        "> [ ] item04",
    ]


def test_long_names_are_truncated_not_wrapped():
    catalog = Catalog([Item("x" * 50)])
    rows = _texts(build_rows(12, 5, catalog, cursor=0, offset=0))
    assert rows[2] == "> [ ] xxxxxx"
    assert len(rows) == 3


def test_empty_catalog_shows_message():
    rows = _texts(build_rows(40, 10, Catalog(), cursor=0, offset=0))
    assert rows[2].rstrip() == DEFAULT_THEME.empty_message
    assert len(rows) == 3


def test_styles_follow_state():
    theme = Theme(cursor_style="C", checked_style="K", item_style="I")
    catalog = Catalog([Item("a"), Item("b", checked=True), Item("c")])
    styles = [style for _, style in build_rows(20, 10, catalog, 0, 0, theme)][2:]
    assert styles == ["C", "K", "I"]


def test_draw_screen_writes_exact_grid():
    surface = MemorySurface(width=16, height=4)
    catalog = Catalog([Item("one"), Item("two"), Item("three")])

    view_height = draw_screen(surface, catalog, cursor=1, offset=1)

    assert view_height == 2
    assert surface.style_at(0, 2) == DEFAULT_THEME.cursor_style
    assert surface.rows() == [
        fit(DEFAULT_THEME.instructions, 16),
        "-" * 16,
        "> [ ] two       ",
        "  [ ] three     ",
    ]


def test_draw_screen_is_idempotent():
    surface = MemorySurface(width=20, height=6)
    catalog = Catalog([Item("a", checked=True), Item("b")])
    draw_screen(surface, catalog, 1, 0)
    draw_screen(surface, catalog, 1, 0)
    assert surface.frames[0] == surface.frames[1]
