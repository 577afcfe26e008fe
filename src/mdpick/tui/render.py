"""Render the checklist onto a display surface.

Layout: an instruction line, a separator rule, then one row per visible
item formatted as ``<marker> <checkbox> <name>``. Every row is cut or
padded to exactly the surface width; nothing wraps.
"""

from __future__ import annotations

from ..types import Catalog, Item
from .surface import DisplaySurface
from .theme import DEFAULT_THEME, Theme
from .viewport import view_height_for

Row = tuple[str, str]


def fit(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` characters."""
    if width <= 0:
        return ""
    return text[:width].ljust(width)


def format_item(item: Item, is_cursor: bool, theme: Theme = DEFAULT_THEME) -> str:
    marker = theme.cursor_marker if is_cursor else " "
    box = theme.checked_box if item.checked else theme.unchecked_box
    return f"{marker} {box} {item.name}"


def _item_style(item: Item, is_cursor: bool, theme: Theme) -> str:
    if is_cursor:
        return theme.cursor_style
    if item.checked:
        return theme.checked_style
    return theme.item_style


def build_rows(
    width: int,
    height: int,
    catalog: Catalog,
    cursor: int,
    offset: int,
    theme: Theme = DEFAULT_THEME,
) -> list[Row]:
    """Return the (text, style) rows for one frame, header included."""
    view_height = view_height_for(height)
    rows: list[Row] = [
        (fit(theme.instructions, width), theme.header_style),
        (fit(theme.rule_char * width, width), theme.rule_style),
    ]

    if len(catalog) == 0:
        rows.append((fit(theme.empty_message, width), theme.info_style))
        return rows

    offset = max(0, min(offset, len(catalog) - view_height))
    end = min(offset + view_height, len(catalog))
    for i in range(offset, end):
        item = catalog[i]
        is_cursor = i == cursor
        rows.append((fit(format_item(item, is_cursor, theme), width), _item_style(item, is_cursor, theme)))
    return rows


def draw_screen(
    surface: DisplaySurface,
    catalog: Catalog,
    cursor: int,
    offset: int,
    theme: Theme = DEFAULT_THEME,
) -> int:
    """Clear, draw and show one frame. Returns the item view height."""
    surface.clear()
    width, height = surface.size()
    for row, (text, style) in enumerate(build_rows(width, height, catalog, cursor, offset, theme)):
        for col, char in enumerate(text):
            surface.set_cell(col, row, char, style)
    surface.show()
    return view_height_for(height)
