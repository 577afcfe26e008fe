"""Terminal display surface built on Rich Live and readchar.

Output goes through a ``rich.live.Live`` on the alternate screen with
auto-refresh disabled, so the screen only changes when ``show()`` is called.
Input is a blocking ``readchar.readkey()``. On platforms with SIGWINCH a
terminal resize interrupts the pending read and is reported as a
``ResizeEvent``.
"""

from __future__ import annotations

import logging
import signal
import sys
from itertools import groupby

import readchar
from rich.console import Console
from rich.errors import LiveError
from rich.live import Live
from rich.text import Text

from ..errors import DisplayInitError
from .events import Event, KeyAction, KeyEvent, ResizeEvent
from .keys import decode_key
from .surface import CellGrid, DisplaySurface

logger = logging.getLogger(__name__)


class _Resized(Exception):
    """Raised from the SIGWINCH handler to break out of a blocking read."""


class RichSurface(DisplaySurface):
    """Display surface for a real terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)
        self._live: Live | None = None
        self._grid = CellGrid(0, 0)
        self._polling = False
        self._resize_pending = False
        self._previous_handler = None
        self._handler_installed = False

    def init(self) -> None:
        if self._live is not None:
            return
        if not self.console.is_terminal or not sys.stdin.isatty():
            raise DisplayInitError("terminal display unavailable: not attached to a TTY")

        live = Live(
            "",
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
            vertical_overflow="crop",
        )
        try:
            live.start(refresh=False)
        except (LiveError, OSError) as e:
            raise DisplayInitError(f"cannot start terminal display: {e}") from e
        self._live = live
        self._install_resize_handler()

    def fini(self) -> None:
        try:
            if self._live is not None:
                self._live.stop()
        finally:
            self._live = None
            self._restore_resize_handler()

    def size(self) -> tuple[int, int]:
        width, height = self.console.size
        return width, height

    def clear(self) -> None:
        width, height = self.size()
        self._grid = CellGrid(width, height)

    def set_cell(self, col: int, row: int, char: str, style: str = "") -> None:
        self._grid.set(col, row, char, style)

    def show(self) -> None:
        if self._live is None:
            raise DisplayInitError("terminal display is not initialized")
        self._live.update(self._grid_to_text(), refresh=True)

    def poll_event(self) -> Event:
        if self._resize_pending:
            self._resize_pending = False
            return self._resize_event()

        self._polling = True
        try:
            key = readchar.readkey()
            self._polling = False
        except _Resized:
            self._polling = False
            return self._resize_event()
        except (KeyboardInterrupt, EOFError):
            self._polling = False
            return KeyEvent(KeyAction.CANCEL, readchar.key.CTRL_C)
        finally:
            self._polling = False
        return decode_key(key)

    def _grid_to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop", end="")
        for row, cells in enumerate(self._grid.cells):
            if row:
                text.append("\n")
            for style, run in groupby(cells, key=lambda cell: cell.style):
                text.append("".join(cell.char for cell in run), style=style or None)
        return text

    def _resize_event(self) -> ResizeEvent:
        width, height = self.size()
        logger.debug("Terminal resized to %dx%d", width, height)
        return ResizeEvent(width, height)

    def _on_resize(self, signum, frame) -> None:
        if self._polling:
            self._polling = False
            raise _Resized()
        self._resize_pending = True

    def _install_resize_handler(self) -> None:
        sigwinch = getattr(signal, "SIGWINCH", None)
        if sigwinch is None:
            return
        try:
            self._previous_handler = signal.signal(sigwinch, self._on_resize)
            self._handler_installed = True
        except ValueError:
            # Not on the main thread; resizes show up on the next key instead.
            logger.debug("Resize notifications unavailable off the main thread")

    def _restore_resize_handler(self) -> None:
        if not self._handler_installed:
            return
        signal.signal(signal.SIGWINCH, self._previous_handler or signal.SIG_DFL)
        self._handler_installed = False
        self._previous_handler = None
