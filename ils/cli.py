"""Command-line front door for ils.

Parses CLI options, merges them with persisted defaults, and reads one
directory level. Then renders the listing to stdout.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path

from .config import ListingDefaults, load_listing_defaults, save_listing_defaults
from .entry_model import read_directory_entries
from .errors import OutputWriteFailure
from .render import RenderOptions, render_listing, resolve_display_locale

DEBUG_ENV_VAR = "ILS_DEBUG"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _terminal_width() -> int | None:
    """Return the terminal width, or ``None`` when stdout is not a TTY."""
    if not sys.stdout.isatty():
        return None
    return max(1, shutil.get_terminal_size((80, 24)).columns)


def _configure_logging() -> None:
    if os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ils", description="List one directory level.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-l", "--long", action="store_true", default=None, help="Use a long listing format.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column width for the compact grid (default: terminal width).",
    )
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable colored names.")
    parser.add_argument("--hyperlink", action="store_true", default=None, help="Emit OSC 8 links on names.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the effective long/color/hyperlink choice as the new default.",
    )
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and list a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    _configure_logging()

    defaults = load_listing_defaults()
    effective = ListingDefaults(
        long=defaults.long if args.long is None else args.long,
        color=defaults.color if args.no_color is None else not args.no_color,
        hyperlink=defaults.hyperlink if args.hyperlink is None else args.hyperlink,
    )
    if args.save_defaults:
        save_listing_defaults(effective)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    try:
        entries = read_directory_entries(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise SystemExit(str(exc)) from exc
    except PermissionError as exc:
        raise SystemExit(f"Cannot read directory: {path}") from exc
    except OSError as exc:
        raise SystemExit(f"Cannot read directory: {path}: {exc.strerror or exc}") from exc

    options = RenderOptions(
        color=effective.color and sys.stdout.isatty(),
        link_base=path.absolute() if effective.hyperlink else None,
        display_locale=resolve_display_locale(),
    )
    term_width = args.width if args.width is not None else _terminal_width()
    out = sys.stdout.buffer
    try:
        render_listing(entries, out, long=effective.long, term_width=term_width, options=options)
        out.flush()
    except OutputWriteFailure as exc:
        raise SystemExit(f"ils: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"ils: failed to flush output: {exc}") from exc


if __name__ == "__main__":
    main()
