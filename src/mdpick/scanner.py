"""Discovery of candidate documents in a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from .errors import DirectoryAccessError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md",)


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Lower-case extensions and make sure each has a leading dot.

    Blank entries are dropped and order is preserved.
    """
    result: list[str] = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in result:
            result.append(ext)
    return tuple(result)


def list_documents(
    directory: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> list[str]:
    """Return document stems for regular files directly inside ``directory``.

    Only the final suffix is matched (case-insensitively) against
    ``extensions``. Directories, symlinks and files with an empty stem are
    skipped. Names come back in directory order; sorting is the catalog's job.

    Raises:
        DirectoryAccessError: If the directory cannot be listed.
    """
    wanted = normalize_extensions(extensions)
    directory = Path(directory)
    names: list[str] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False):
                    continue
                stem, ext = os.path.splitext(entry.name)
                if ext.lower() not in wanted:
                    continue
                if not stem:
                    continue
                names.append(stem)
    except OSError as e:
        raise DirectoryAccessError(
            f"cannot list {directory}: {e.strerror or e}", path=directory
        ) from e

    logger.debug("Found %d document(s) in %s", len(names), directory)
    return names
