"""Lay listing cells out as a width-bounded grid or an aligned table.

Compact listings flow names left-to-right into as many columns as fit the
terminal and otherwise fall back to one name per line. Long listings emit
one row per entry with the four metadata columns padded to a shared width.
All state is local to a single ``render_listing`` call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from ..entry_model.types import Entry
from ..errors import OutputWriteFailure
from .ansi import visible_width
from .dates import DisplayLocale, format_date, resolve_display_locale
from .fields import metadata_fields
from .style import style_name

LOGGER = logging.getLogger(__name__)

COLUMN_SEPARATOR = " "
LONG_METADATA_COLUMNS = 4
OUTPUT_ENCODING = "utf-8"


class Alignment(Enum):
    # Single variant for now; metadata columns are all left-aligned.
    LEFT = "left"


@dataclass(frozen=True)
class Cell:
    """One rendered string plus its measured terminal width."""

    contents: str
    width: int
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def measured(cls, contents: str, *, hyperlink: bool = False, alignment: Alignment = Alignment.LEFT) -> "Cell":
        return cls(contents=contents, width=visible_width(contents, hyperlink), alignment=alignment)

    def padded(self, width: int) -> str:
        """Pad to ``width`` cells; cells already that wide come back unchanged."""
        return self.contents + " " * max(0, width - self.width)


@dataclass(frozen=True)
class GridLayout:
    """Column count and per-column widths for a left-to-right grid."""

    num_columns: int
    column_widths: tuple[int, ...]

    def total_width(self) -> int:
        return sum(self.column_widths) + len(COLUMN_SEPARATOR) * (self.num_columns - 1)


@dataclass(frozen=True)
class RenderOptions:
    """Presentation knobs shared by both listing modes.

    ``link_base`` turns on OSC 8 hyperlinks to ``link_base / name``.
    ``display_locale`` is resolved from the environment when omitted.
    """

    color: bool = False
    link_base: Path | None = None
    display_locale: DisplayLocale | None = None


def column_widths(widths: Sequence[int], num_columns: int) -> tuple[int, ...]:
    """Return per-column maxima when ``widths`` fill rows left-to-right."""
    result = [0] * min(num_columns, len(widths))
    for idx, width in enumerate(widths):
        col = idx % num_columns
        if width > result[col]:
            result[col] = width
    return tuple(result)


def max_candidate_columns(widths: Sequence[int], max_width: int) -> int:
    """Upper bound on columns that could fit in ``max_width``.

    Any ``n``-column grid is at least as wide as the ``n`` narrowest cells
    plus separators, so counting those gives a safe starting point.
    """
    total = 0
    count = 0
    for width in sorted(widths):
        needed = width if count == 0 else width + len(COLUMN_SEPARATOR)
        if total + needed > max_width:
            break
        total += needed
        count += 1
    return count


def fit_into_width(cells: Sequence[Cell], max_width: int) -> GridLayout | None:
    """Find the grid with the most columns whose rows fit ``max_width``.

    Returns ``None`` when no arrangement fits, e.g. a single name is wider
    than the terminal.
    """
    if not cells:
        return GridLayout(num_columns=1, column_widths=(0,))
    widths = [cell.width for cell in cells]
    if max(widths) > max_width:
        return None
    for num_columns in range(max_candidate_columns(widths, max_width), 0, -1):
        layout = GridLayout(num_columns=num_columns, column_widths=column_widths(widths, num_columns))
        if layout.total_width() <= max_width:
            return layout
    return None


def single_column(cells: Sequence[Cell]) -> GridLayout:
    return GridLayout(num_columns=1, column_widths=(max((cell.width for cell in cells), default=0),))


def format_grid(cells: Sequence[Cell], layout: GridLayout) -> list[str]:
    """Render ``cells`` row by row; the last cell of a row gets no trailing padding."""
    lines: list[str] = []
    for start in range(0, len(cells), layout.num_columns):
        row = cells[start : start + layout.num_columns]
        parts: list[str] = []
        for col, cell in enumerate(row):
            if col == len(row) - 1:
                parts.append(cell.contents)
            else:
                parts.append(cell.padded(layout.column_widths[col]))
        lines.append(COLUMN_SEPARATOR.join(parts))
    return lines


def _name_cell(entry: Entry, options: RenderOptions) -> Cell:
    link_target = options.link_base / entry.name if options.link_base is not None else None
    return Cell.measured(
        style_name(entry, color=options.color, link_target=link_target),
        hyperlink=link_target is not None,
    )


def compact_lines(entries: Iterable[Entry], term_width: int | None, options: RenderOptions) -> list[str]:
    cells = [_name_cell(entry, options) for entry in entries]
    if not cells:
        return []
    layout = fit_into_width(cells, term_width) if term_width is not None else None
    if layout is None:
        if term_width is not None:
            LOGGER.debug("no grid fits in %d columns; listing one name per line", term_width)
        layout = single_column(cells)
    return format_grid(cells, layout)


def long_lines(entries: Iterable[Entry], options: RenderOptions) -> list[str]:
    display_locale = options.display_locale or resolve_display_locale()
    rows: list[tuple[Cell, ...]] = []
    for entry in entries:
        date_text = format_date(entry.date, display_locale) if entry.date is not None else None
        metadata = tuple(Cell.measured(text) for text in metadata_fields(entry, date_text))
        rows.append(metadata + (_name_cell(entry, options),))

    dims = [max((row[idx].width for row in rows), default=0) for idx in range(LONG_METADATA_COLUMNS)]
    lines: list[str] = []
    for row in rows:
        padded = [cell.padded(dims[idx]) for idx, cell in enumerate(row[:LONG_METADATA_COLUMNS])]
        padded.append(row[LONG_METADATA_COLUMNS].contents)
        lines.append(COLUMN_SEPARATOR.join(padded))
    return lines


def _write(out: BinaryIO, text: str, stage: str) -> None:
    # Undecodable filename bytes come back out as the raw bytes.
    data = text.encode(OUTPUT_ENCODING, errors="surrogateescape")
    try:
        out.write(data)
    except (OSError, ValueError) as exc:
        raise OutputWriteFailure(stage) from exc


def render_listing(
    entries: Iterable[Entry],
    out: BinaryIO,
    *,
    long: bool = False,
    term_width: int | None = None,
    options: RenderOptions | None = None,
) -> None:
    """Write ``entries`` to ``out`` as a compact grid or a long table.

    Entries are rendered in the order given. ``term_width`` only affects
    compact mode. A failing write raises ``OutputWriteFailure`` and stops
    output; earlier lines stay written.
    """
    active = options or RenderOptions()
    if long:
        lines = long_lines(entries, active)
        stage = "long row"
    else:
        lines = compact_lines(entries, term_width, active)
        stage = "grid row"
    for line in lines:
        _write(out, line + "\n", stage)


__all__ = [
    "Alignment",
    "Cell",
    "GridLayout",
    "RenderOptions",
    "column_widths",
    "max_candidate_columns",
    "fit_into_width",
    "single_column",
    "format_grid",
    "compact_lines",
    "long_lines",
    "render_listing",
]
