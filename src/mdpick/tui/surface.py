"""Display surface capability and a headless in-memory implementation.

The selector and renderer only talk to a ``DisplaySurface``: size, clear,
set_cell, show and a blocking poll_event. ``RichSurface`` drives a real
terminal; ``MemorySurface`` replays scripted events for tests and dry runs.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable

from .events import Event, KeyAction, KeyEvent, ResizeEvent


@dataclass(frozen=True)
class Cell:
    char: str = " "
    style: str = ""


BLANK = Cell()


class DisplaySurface:
    """Base class for display surfaces.

    Surfaces are context managers: entering calls ``init()`` and leaving
    always calls ``fini()``, including on exceptions.
    """

    def init(self) -> None:
        raise NotImplementedError

    def fini(self) -> None:
        raise NotImplementedError

    def size(self) -> tuple[int, int]:
        """Return (columns, rows)."""
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def set_cell(self, col: int, row: int, char: str, style: str = "") -> None:
        """Write one character. Coordinates outside the surface are ignored."""
        raise NotImplementedError

    def show(self) -> None:
        """Flush pending cell writes to the display."""
        raise NotImplementedError

    def poll_event(self) -> Event:
        """Block until the next key or resize event."""
        raise NotImplementedError

    def __enter__(self) -> DisplaySurface:
        self.init()
        return self

    def __exit__(self, *exc_info) -> bool:
        self.fini()
        return False


class CellGrid:
    """Fixed-size grid of cells shared by the concrete surfaces."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.cells: list[list[Cell]] = [[BLANK] * self.width for _ in range(self.height)]

    def set(self, col: int, row: int, char: str, style: str = "") -> None:
        if 0 <= row < self.height and 0 <= col < self.width:
            self.cells[row][col] = Cell(char, style)

    def row_text(self, row: int) -> str:
        return "".join(cell.char for cell in self.cells[row])

    def lines(self) -> list[str]:
        return [self.row_text(row) for row in range(self.height)]


class MemorySurface(DisplaySurface):
    """Headless surface fed by a scripted sequence of events.

    Polling a ``ResizeEvent`` applies its dimensions before returning it.
    When the script runs out, a CANCEL key is returned so loops always end.
    Each ``show()`` appends a snapshot of the grid's text to ``frames``.
    """

    def __init__(self, width: int = 80, height: int = 24, events: Iterable[Event] = ()):
        self.width = width
        self.height = height
        self.events: deque[Event] = deque(events)
        self.grid = CellGrid(width, height)
        self.frames: list[list[str]] = []
        self.initialized = False
        self.finalized = False

    def init(self) -> None:
        self.initialized = True

    def fini(self) -> None:
        self.finalized = True

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def clear(self) -> None:
        self.grid = CellGrid(self.width, self.height)

    def set_cell(self, col: int, row: int, char: str, style: str = "") -> None:
        self.grid.set(col, row, char, style)

    def show(self) -> None:
        self.frames.append(self.grid.lines())

    def poll_event(self) -> Event:
        if not self.events:
            return KeyEvent(KeyAction.CANCEL)
        event = self.events.popleft()
        if isinstance(event, ResizeEvent):
            self.width, self.height = event.width, event.height
        return event

    def rows(self) -> list[str]:
        """Text of the most recently shown frame."""
        return self.frames[-1] if self.frames else []

    def style_at(self, col: int, row: int) -> str:
        return self.grid.cells[row][col].style
