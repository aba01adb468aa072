"""Locale-aware date rendering for long listings.

The display locale comes from ``LC_TIME`` (encoding suffix dropped) and falls
back to ``en_US`` when unset or unparsable. Callers resolve it once and pass
the value around; nothing here caches it.
"""

from __future__ import annotations

import contextlib
import locale
import logging
import os
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime

from ..entry_model.types import EntryDate, Timestamp
from ..errors import LocaleParseFailure

LOGGER = logging.getLogger(__name__)

LOCALE_ENV_VAR = "LC_TIME"
DEFAULT_LOCALE_IDENTIFIER = "en_US"
DATE_FORMAT = "%c"

_LOCALE_IDENTIFIER_RE = re.compile(r"^(?:C|POSIX|[a-z]{2,3}(?:_[A-Z]{2}|_[0-9]{3})?(?:@[a-z]+)?)$")


@dataclass(frozen=True)
class DisplayLocale:
    identifier: str

    def setlocale_candidates(self) -> tuple[str, ...]:
        """Names to try with ``locale.setlocale`` for this identifier."""
        if self.identifier in {"C", "POSIX"}:
            return ("C",)
        base, _, modifier = self.identifier.partition("@")
        suffix = f"@{modifier}" if modifier else ""
        return (f"{base}.UTF-8{suffix}", f"{base}.utf8{suffix}", self.identifier)


DEFAULT_LOCALE = DisplayLocale(DEFAULT_LOCALE_IDENTIFIER)


def parse_locale_identifier(identifier: str) -> DisplayLocale:
    """Parse ``ll``, ``ll_CC``, ``ll_CC@modifier``, ``C`` or ``POSIX``."""
    if not _LOCALE_IDENTIFIER_RE.match(identifier):
        raise LocaleParseFailure(identifier)
    return DisplayLocale(identifier)


def resolve_display_locale(environ: Mapping[str, str] | None = None) -> DisplayLocale:
    """Resolve the display locale from ``LC_TIME`` in ``environ``."""
    env = os.environ if environ is None else environ
    raw = env.get(LOCALE_ENV_VAR)
    if raw is None:
        return DEFAULT_LOCALE
    identifier = raw.split(".", 1)[0]
    try:
        return parse_locale_identifier(identifier)
    except LocaleParseFailure as exc:
        LOGGER.debug("%s; using %s", exc, DEFAULT_LOCALE_IDENTIFIER)
        return DEFAULT_LOCALE


@contextlib.contextmanager
def _time_locale(display_locale: DisplayLocale) -> Iterator[None]:
    """Temporarily switch ``LC_TIME`` to ``display_locale``.

    A locale the host does not know falls back to the default locale; when
    neither is installed the current ``LC_TIME`` stays in effect.
    """
    previous = locale.setlocale(locale.LC_TIME)
    candidates = display_locale.setlocale_candidates()
    if display_locale != DEFAULT_LOCALE:
        candidates += DEFAULT_LOCALE.setlocale_candidates()
    switched = False
    for candidate in candidates:
        try:
            locale.setlocale(locale.LC_TIME, candidate)
        except locale.Error:
            continue
        switched = True
        break
    if not switched:
        LOGGER.debug(
            "neither %s nor %s is installed; keeping %s",
            display_locale.identifier,
            DEFAULT_LOCALE.identifier,
            previous,
        )
    try:
        yield
    finally:
        if switched:
            locale.setlocale(locale.LC_TIME, previous)


def format_timestamp(timestamp: Timestamp, display_locale: DisplayLocale) -> str:
    """Render ``timestamp`` in local time, truncated to whole seconds."""
    try:
        moment = datetime.fromtimestamp(timestamp.seconds)
    except (OverflowError, OSError, ValueError):
        # Outside the platform's representable range.
        return str(timestamp.seconds)
    with _time_locale(display_locale):
        return moment.strftime(DATE_FORMAT)


def format_date(date: EntryDate, display_locale: DisplayLocale) -> str:
    return format_timestamp(date.effective(), display_locale)


__all__ = [
    "LOCALE_ENV_VAR",
    "DEFAULT_LOCALE",
    "DisplayLocale",
    "parse_locale_identifier",
    "resolve_display_locale",
    "format_timestamp",
    "format_date",
]
