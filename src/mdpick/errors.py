"""Error types shared by the CLI and the interactive selector."""

from __future__ import annotations

from pathlib import Path


class MdpickError(RuntimeError):
    """Base error for mdpick operations.

    ``path`` is set when the failure is tied to a filesystem location.
    """

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class DirectoryAccessError(MdpickError):
    """Raised when the candidate directory cannot be enumerated."""


class UnknownPersistedEntry(MdpickError):
    """Raised when a stored selection names an item that no longer exists."""

    def __init__(self, name: str, line: int | None = None, path: Path | str | None = None):
        self.name = name
        self.line = line
        self.source = Path(path) if path is not None else None
        where = Path(path).name if path is not None else "selection"
        super().__init__(f"{where} entry {name!r} not found among documents")


class SelectionReadError(MdpickError):
    """Raised when an existing selection file cannot be read."""


class DisplayInitError(MdpickError):
    """Raised when the terminal display cannot be set up."""


class WriteError(MdpickError):
    """Raised when the final selection cannot be written."""
