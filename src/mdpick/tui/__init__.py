"""Terminal checklist: display surfaces, rendering and the selector loop."""

from .events import KeyAction, KeyEvent, ResizeEvent
from .keys import decode_key
from .selector import Selector, SelectorState, run_selector
from .surface import DisplaySurface, MemorySurface
from .theme import DEFAULT_THEME, Theme
from .viewport import ensure_visible, view_height_for

__all__ = [
    # Selector
    "Selector",
    "SelectorState",
    "run_selector",
    # Display
    "DisplaySurface",
    "MemorySurface",
    # Events
    "KeyAction",
    "KeyEvent",
    "ResizeEvent",
    "decode_key",
    # Layout
    "ensure_visible",
    "view_height_for",
    # Theming
    "Theme",
    "DEFAULT_THEME",
]
