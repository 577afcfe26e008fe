"""The interactive selector loop.

A three-state machine (running, committed, aborted) that strictly
alternates one redraw with one blocking event poll. The selector works on
its own copy of the catalog, so an aborted session leaves the caller's
catalog as it was.
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from ..types import Catalog
from .events import Event, KeyAction, ResizeEvent
from .render import draw_screen
from .surface import DisplaySurface
from .theme import DEFAULT_THEME, Theme
from .viewport import ensure_visible, view_height_for

logger = logging.getLogger(__name__)


class SelectorState(Enum):
    RUNNING = auto()
    COMMITTED = auto()
    ABORTED = auto()


class Selector:
    """Owns the catalog, cursor and scroll offset for one session.

    Keyboard controls:
        - Up/Down or k/j: Move the cursor (no wrap-around)
        - Space: Toggle the item under the cursor
        - Enter: Commit the current selection
        - Esc/q/Ctrl+C: Abort without saving
    """

    def __init__(self, catalog: Catalog, theme: Theme | None = None):
        self.catalog = catalog.copy()
        self.theme = theme or DEFAULT_THEME
        self.cursor = 0
        self.offset = 0
        self.state = SelectorState.RUNNING

    def handle_event(self, event: Event) -> None:
        """Apply one event to the session state."""
        if isinstance(event, ResizeEvent):
            # The next draw picks up the new size and re-clamps the offset.
            logger.debug("Resize to %dx%d", event.width, event.height)
            return

        total = len(self.catalog)
        action = event.action
        if action is KeyAction.UP:
            if total and self.cursor > 0:
                self.cursor -= 1
        elif action is KeyAction.DOWN:
            if self.cursor < total - 1:
                self.cursor += 1
        elif action is KeyAction.TOGGLE:
            if total:
                self.catalog.toggle(self.cursor)
        elif action is KeyAction.COMMIT:
            self.state = SelectorState.COMMITTED
        elif action is KeyAction.CANCEL:
            self.state = SelectorState.ABORTED

    def draw(self, surface: DisplaySurface) -> int:
        """Scroll to keep the cursor visible, then redraw. Returns view height."""
        _, rows = surface.size()
        view_height = view_height_for(rows)
        self.offset = ensure_visible(self.cursor, self.offset, view_height, len(self.catalog))
        return draw_screen(surface, self.catalog, self.cursor, self.offset, self.theme)

    def run(self, surface: DisplaySurface) -> Catalog | None:
        """Run the session on ``surface`` until commit or abort.

        The surface is initialized before the first draw and finalized on
        every exit path.

        Returns:
            The final catalog on commit, None on abort.
        """
        with surface:
            while self.state is SelectorState.RUNNING:
                self.draw(surface)
                self.handle_event(surface.poll_event())

        logger.debug("Selector finished: %s", self.state.name.lower())
        return self.result()

    def result(self) -> Catalog | None:
        if self.state is SelectorState.COMMITTED:
            return self.catalog
        return None


def run_selector(
    catalog: Catalog, surface: DisplaySurface, theme: Theme | None = None
) -> Catalog | None:
    """Run an interactive selection session. None means the user aborted."""
    return Selector(catalog, theme).run(surface)
