"""Public package surface for ils.

Exports the renderer, the entry model and ``main`` for programmatic CLI
invocation. Most implementation lives in submodules under ``ils``.
"""

from __future__ import annotations

from .entry_model import Entry, read_directory_entries
from .errors import ListingError, LocaleParseFailure, OutputWriteFailure
from .render import RenderOptions, render_listing


def main(*args, **kwargs):
    """Import the CLI entrypoint on first call."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "Entry",
    "read_directory_entries",
    "ListingError",
    "LocaleParseFailure",
    "OutputWriteFailure",
    "RenderOptions",
    "render_listing",
]
