"""Rendering for directory listings.

Turns entries into cells, measures their visible width, and writes either a
compact grid or a long aligned table to a byte sink.
"""

from __future__ import annotations

from .ansi import visible_width
from .dates import DEFAULT_LOCALE, DisplayLocale, format_date, resolve_display_locale
from .fields import PLACEHOLDER, format_mode
from .grid import Alignment, Cell, GridLayout, RenderOptions, fit_into_width, render_listing, single_column
from .style import style_name

__all__ = [
    "visible_width",
    "DEFAULT_LOCALE",
    "DisplayLocale",
    "format_date",
    "resolve_display_locale",
    "PLACEHOLDER",
    "format_mode",
    "Alignment",
    "Cell",
    "GridLayout",
    "RenderOptions",
    "fit_into_width",
    "render_listing",
    "single_column",
    "style_name",
]
