"""CLI interface for mdpick."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import load_settings
from .errors import MdpickError
from .scanner import list_documents
from .selection import apply_previous_selection, write_selection
from .tui.selector import run_selector
from .tui.surface import DisplaySurface
from .types import Catalog

logger = logging.getLogger(__name__)

SurfaceFactory = Callable[[], DisplaySurface]


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route mdpick's loggers to a Rich handler on stderr."""
    root = logging.getLogger("mdpick")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    return root


def _default_surface() -> DisplaySurface:
    from .tui.rich_surface import RichSurface

    return RichSurface()


def _display_path(path: Path, cwd: Path) -> str:
    """Show ``path`` relative to ``cwd`` when it lives underneath it."""
    try:
        return str(path.relative_to(cwd))
    except ValueError:
        return str(path)


def _report_error(err: MdpickError) -> None:
    if err.path is not None:
        print(f"Path error: {err}", file=sys.stderr)
    else:
        print(f"Error: {err}", file=sys.stderr)


def run(
    args: argparse.Namespace,
    cwd: Path | None = None,
    surface_factory: SurfaceFactory = _default_surface,
) -> int:
    """Scan, reconcile, select and save. Returns the process exit code.

    Raises:
        MdpickError: On any fatal failure before or after the session.
    """
    cwd = Path(cwd) if cwd is not None else Path(os.getcwd())
    settings = load_settings(
        args.directory,
        cwd,
        output=args.output,
        extensions=args.extensions,
    )
    logger.debug("Scanning %s for %s", settings.directory, ", ".join(settings.extensions))

    catalog = Catalog.from_names(list_documents(settings.directory, settings.extensions))
    catalog = apply_previous_selection(catalog, settings.output_path)

    if len(catalog) == 0:
        print(f"No documents found in {settings.directory}")
        return 0

    final = run_selector(catalog, surface_factory(), settings.theme)
    if final is None:
        print("Selection aborted.")
        return 0

    count = write_selection(final, settings.output_path)
    shown = _display_path(settings.output_path, cwd)
    if count == 0:
        print(f"Wrote empty selection to {shown}")
    else:
        print(f"Saved {count} selection(s) to {shown}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdpick",
        description="Pick documents from a directory with an interactive checklist.",
    )
    parser.add_argument("--version", action="version", version=f"mdpick {__version__}")
    parser.add_argument("directory", help="Directory containing the documents")
    parser.add_argument(
        "-o",
        "--output",
        help="Selection file, read at start and written on save (default: ./output.txt)",
    )
    parser.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        metavar="EXT",
        help="Document extension to list (repeatable, default: .md)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        code = run(args)
    except MdpickError as e:
        _report_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        sys.exit(130)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
