"""Reading, reconciling and writing the persisted selection file.

The file is plain text with one selected name per line. Blank lines are
ignored on read; on write, checked names are emitted in catalog order, each
terminated by a single newline.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .errors import SelectionReadError, UnknownPersistedEntry, WriteError
from .types import Catalog

logger = logging.getLogger(__name__)


def read_selection(path: Path) -> list[str] | None:
    """Return the raw lines of a selection file, or None if it does not exist.

    Lines are split on LF only and a trailing CR is dropped, so names
    containing other Unicode line breaks survive. Bytes that are not valid
    UTF-8 come back surrogate-escaped, matching how ``os.scandir`` names files.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            content = f.read()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise SelectionReadError(f"cannot read {path}: {e.strerror or e}", path=path) from e
    except UnicodeError as e:
        raise SelectionReadError(f"cannot decode {path}: {e}", path=path) from e
    return [line.rstrip("\r") for line in content.split("\n")]


def reconcile(
    catalog: Catalog, lines: Iterable[str] | None, source: Path | None = None
) -> Catalog:
    """Check every item named in ``lines``.

    All non-blank lines are validated before any flag is set, so a failure
    leaves the catalog untouched. ``None`` means no selection was ever
    written and is a no-op.

    Raises:
        UnknownPersistedEntry: For the first line (in file order) whose
            name is not in the catalog.
    """
    if lines is None:
        return catalog

    matched: list[int] = []
    for line_no, raw in enumerate(lines, start=1):
        entry = raw.strip()
        if not entry:
            continue
        idx = catalog.index_of(entry)
        if idx is None:
            raise UnknownPersistedEntry(entry, line=line_no, path=source)
        matched.append(idx)

    for idx in matched:
        catalog[idx].checked = True

    logger.debug("Restored %d checked item(s)", len(set(matched)))
    return catalog


def apply_previous_selection(catalog: Catalog, path: Path) -> Catalog:
    """Pre-check items from the selection file at ``path`` if it exists."""
    return reconcile(catalog, read_selection(path), source=path)


def format_selection(catalog: Catalog) -> str:
    return "".join(f"{name}\n" for name in catalog.checked_names())


def write_selection(catalog: Catalog, path: Path) -> int:
    """Write checked names to ``path`` and return how many were written.

    Zero checked items produce an empty file.
    Content is encoded before the file is opened, so a name that cannot be
    encoded leaves any existing file untouched.
    """
    try:
        data = format_selection(catalog).encode("utf-8", errors="surrogateescape")
    except UnicodeError as e:
        raise WriteError(f"cannot encode selection for {path}: {e}", path=path) from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"cannot write {path}: {e.strerror or e}", path=path) from e

    count = len(catalog.checked_names())
    logger.debug("Wrote %d selection(s) to %s", count, path)
    return count
