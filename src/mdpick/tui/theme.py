"""Configurable theme for the checklist screen.

Styles use Rich style syntax (e.g. "bold cyan", "dim"). Markers are plain
text so the row layout stays one character per cell.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Visual theme for the checklist.

    Attributes:
        header_style: Style of the instruction line.
        rule_style: Style of the separator rule under the header.
        item_style: Style of unchecked rows.
        checked_style: Style of checked rows.
        cursor_style: Style of the row under the cursor.
        info_style: Style of the message shown when there is nothing to list.

        cursor_marker: Text in the first column of the cursor row.
        checked_box: Checkbox for checked items.
        unchecked_box: Checkbox for unchecked items.
        rule_char: Character repeated to draw the separator rule.

        instructions: Instruction line text.
        empty_message: Line shown instead of the list when it is empty.
    """

    # Styles
    header_style: str = "bold"
    rule_style: str = "dim"
    item_style: str = ""
    checked_style: str = "green"
    cursor_style: str = "bold cyan"
    info_style: str = "yellow"

    # Markers
    cursor_marker: str = ">"
    checked_box: str = "[x]"
    unchecked_box: str = "[ ]"
    rule_char: str = "-"

    # Text
    instructions: str = "↑/↓ move • space toggle • enter save • q/Esc cancel"
    empty_message: str = "No documents found."


DEFAULT_THEME = Theme()


def theme_from_mapping(data: dict[str, Any] | None, base: Theme = DEFAULT_THEME) -> Theme:
    """Return ``base`` with string fields overridden from ``data``.

    Unknown keys and non-string values are logged and skipped.
    """
    if not data:
        return base

    known = {f.name for f in fields(Theme)}
    overrides: dict[str, str] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Unknown theme key ignored: %s", key)
            continue
        if not isinstance(value, str):
            logger.warning("Theme key %s must be a string, got %r", key, value)
            continue
        overrides[key] = value
    return replace(base, **overrides)
