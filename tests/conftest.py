"""Pytest fixtures for mdpick tests."""

import logging
from pathlib import Path

import pytest

from mdpick.tui.events import KeyAction, KeyEvent


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user config and env overrides out of every test."""
    monkeypatch.setenv("MDPICK_CONFIG", str(tmp_path / "no-such-config.yaml"))
    monkeypatch.delenv("MDPICK_OUTPUT", raising=False)
    monkeypatch.delenv("MDPICK_EXTENSIONS", raising=False)
    yield
    root = logging.getLogger("mdpick")
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def doc_dir(tmp_path):
    """Create a directory of documents.

    Usage: doc_dir("alpha", "beta") -> Path with alpha.md and beta.md.
    """
    def _create(*stems: str, extension: str = ".md") -> Path:
        directory = tmp_path / "docs"
        directory.mkdir(exist_ok=True)
        for stem in stems:
            (directory / f"{stem}{extension}").write_text(f"# {stem}\n")
        return directory

    return _create


@pytest.fixture
def keys():
    """Build key events from short names: keys("down", "space", "enter")."""
    names = {
        "up": KeyAction.UP,
        "down": KeyAction.DOWN,
        "space": KeyAction.TOGGLE,
        "enter": KeyAction.COMMIT,
        "esc": KeyAction.CANCEL,
        "other": KeyAction.OTHER,
    }

    def _build(*sequence: str) -> list[KeyEvent]:
        return [KeyEvent(names[name]) for name in sequence]

    return _build


@pytest.fixture
def mock_args():
    """Factory for argparse-like namespaces with CLI defaults."""
    class Args:
        def __init__(self, **kwargs):
            self.directory = "."
            self.output = None
            self.extensions = None
            self.verbose = False
            for key, value in kwargs.items():
                setattr(self, key, value)

    return Args
