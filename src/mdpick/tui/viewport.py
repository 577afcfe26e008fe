"""Viewport arithmetic for the scrolling list."""

from __future__ import annotations

HEADER_LINES = 2


def ensure_visible(cursor: int, offset: int, view_height: int, total: int) -> int:
    """Return a new scroll offset that keeps ``cursor`` inside the window.

    The result is clamped to ``[0, max(0, total - view_height)]`` so the
    window never scrolls past the last item, and pins to 0 for short lists.
    """
    if view_height <= 0:
        return 0
    max_offset = max(0, total - view_height)
    if cursor < offset:
        offset = cursor
    elif cursor >= offset + view_height:
        offset = cursor - view_height + 1
    return max(0, min(offset, max_offset))


def view_height_for(rows: int) -> int:
    """Rows available for items below the header (at least one)."""
    return max(1, rows - HEADER_LINES)
