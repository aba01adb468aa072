"""ANSI-aware text measurement for listing cells.

Widths count terminal cells: escape sequences occupy none, wide glyphs two.
These helpers keep grid columns aligned when names carry colors or links.
"""

from __future__ import annotations

import unicodedata

SGR_INTRODUCER = "\x1b["
SGR_TERMINATOR = "m"
HYPERLINK_INTRODUCER = "\x1b]8;;"
HYPERLINK_TERMINATOR = "\x1b\\"
ZERO_WIDTH_CATEGORIES = frozenset({"Mn", "Me"})
SOFT_HYPHEN = "\u00ad"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Nonspacing and enclosing marks and invisible format characters (other
    than the soft hyphen) consume no columns. East Asian wide/fullwidth
    characters consume two. Everything else, control characters included,
    counts as one.
    """
    category = unicodedata.category(ch)
    if category in ZERO_WIDTH_CATEGORIES:
        return 0
    if category == "Cf" and ch != SOFT_HYPHEN:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the raw cell width of ``text`` without discounting escapes."""
    return sum(char_display_width(ch) for ch in text)


def _invisible_span_length(text: str, introducer: str, terminator: str) -> int:
    """Sum the lengths of every ``introducer ... terminator`` span.

    Each introducer is matched against the next terminator at or after it.
    An introducer with no terminator contributes nothing.
    """
    total = 0
    start = text.find(introducer)
    while start != -1:
        end = text.find(terminator, start)
        if end != -1:
            total += end - start + len(terminator)
        start = text.find(introducer, start + 1)
    return total


def visible_width(text: str, hyperlink: bool = False) -> int:
    """Return how many terminal cells ``text`` occupies once printed.

    SGR sequences (``ESC [`` through the next ``m``) are discounted. When
    ``hyperlink`` is set, OSC 8 spans (``ESC ] 8 ;;`` through ``ESC \\``) are
    discounted too. Unterminated sequences keep their raw width.
    """
    invisible = _invisible_span_length(text, SGR_INTRODUCER, SGR_TERMINATOR)
    if hyperlink:
        invisible += _invisible_span_length(text, HYPERLINK_INTRODUCER, HYPERLINK_TERMINATOR)
    return max(0, display_width(text) - invisible)


__all__ = [
    "SGR_INTRODUCER",
    "HYPERLINK_INTRODUCER",
    "HYPERLINK_TERMINATOR",
    "char_display_width",
    "display_width",
    "visible_width",
]
