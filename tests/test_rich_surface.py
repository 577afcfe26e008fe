"""Tests for the terminal surface that don't need a real TTY."""

import io
import signal

import pytest
from rich.console import Console

from mdpick.errors import DisplayInitError
from mdpick.tui import rich_surface
from mdpick.tui.events import KeyAction, ResizeEvent
from mdpick.tui.rich_surface import RichSurface
from mdpick.tui.selector import run_selector
from mdpick.types import Catalog


@pytest.fixture
def surface():
    console = Console(file=io.StringIO(), width=40, height=12)
    return RichSurface(console=console)


def test_init_without_terminal_raises(surface):
    with pytest.raises(DisplayInitError):
        surface.init()


def test_run_selector_reports_display_failure(surface):
    with pytest.raises(DisplayInitError):
        run_selector(Catalog.from_names(["a"]), surface)


def test_fini_without_init_is_safe(surface):
    surface.fini()
    surface.fini()


def test_show_requires_init(surface):
    surface.clear()
    with pytest.raises(DisplayInitError):
        surface.show()


def test_size_comes_from_console(surface):
    assert surface.size() == (40, 12)


def test_grid_becomes_styled_text(surface):
    surface.clear()
    for col, char in enumerate("ab"):
        surface.set_cell(col, 0, char, "bold")
    surface.set_cell(2, 0, "c")
    surface.set_cell(99, 99, "z")

    text = surface._grid_to_text()
    lines = text.plain.split("\n")
    assert len(lines) == 12
    assert lines[0] == "abc".ljust(40)
    assert any(span.style == "bold" and (span.start, span.end) == (0, 2) for span in text.spans)


def test_poll_decodes_keys(surface, monkeypatch):
    monkeypatch.setattr(rich_surface.readchar, "readkey", lambda: "j")
    assert surface.poll_event().action is KeyAction.DOWN


@pytest.mark.parametrize("exc", [KeyboardInterrupt, EOFError])
def test_interrupt_while_reading_cancels(surface, monkeypatch, exc):
    def _raise():
        raise exc

    monkeypatch.setattr(rich_surface.readchar, "readkey", _raise)
    assert surface.poll_event().action is KeyAction.CANCEL


def test_resize_between_polls_is_reported_next(surface, monkeypatch):
    def _unexpected():
        raise AssertionError("readkey should not be called")

    monkeypatch.setattr(rich_surface.readchar, "readkey", _unexpected)
    surface._on_resize(signal.SIGINT, None)
    assert surface.poll_event() == ResizeEvent(40, 12)


def test_resize_interrupts_blocking_read(surface, monkeypatch):
    def _resize_during_read():
        surface._on_resize(signal.SIGINT, None)
        return "x"

    monkeypatch.setattr(rich_surface.readchar, "readkey", _resize_during_read)
    assert surface.poll_event() == ResizeEvent(40, 12)
    assert surface._polling is False


def test_resize_after_read_is_queued_and_key_kept(surface, monkeypatch):
    monkeypatch.setattr(rich_surface.readchar, "readkey", lambda: "j")

    assert surface.poll_event().action is KeyAction.DOWN
    assert surface._polling is False

    surface._on_resize(signal.SIGINT, None)
    assert surface.poll_event() == ResizeEvent(40, 12)
