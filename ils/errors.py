"""Error taxonomy for directory listing.

Only write failures reach callers. Locale parse failures are recovered
inside date formatting and never escape it.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for errors raised by ``ils``."""


class OutputWriteFailure(ListingError):
    """The output sink rejected a write while rendering ``stage``."""

    def __init__(self, stage: str) -> None:
        super().__init__(f"failed to write {stage}")
        self.stage = stage


class LocaleParseFailure(ListingError):
    """``identifier`` is not a recognizable locale name."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"unparsable locale identifier: {identifier!r}")
        self.identifier = identifier


__all__ = [
    "ListingError",
    "OutputWriteFailure",
    "LocaleParseFailure",
]
