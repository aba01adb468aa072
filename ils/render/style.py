"""Colour and hyperlink decoration for entry names.

Colours come from the pygments console palette and are keyed by file type.
Hyperlinks use the OSC 8 escape so terminals can open the entry directly.
"""

from __future__ import annotations

from pathlib import Path

from pygments.console import ansiformat

from ..entry_model.types import (
    BlockDevice,
    CharDevice,
    Directory,
    Entry,
    FileType,
    Pipe,
    RegularFile,
    Socket,
    SymLink,
)
from .ansi import HYPERLINK_INTRODUCER, HYPERLINK_TERMINATOR


def name_color(file_type: FileType) -> str | None:
    """Return a pygments ``ansiformat`` attribute for ``file_type``."""
    if isinstance(file_type, Directory):
        return "*blue*"
    if isinstance(file_type, SymLink):
        return "cyan"
    if isinstance(file_type, RegularFile):
        if file_type.setuid:
            return "red"
        if file_type.executable:
            return "*green*"
        return None
    if isinstance(file_type, (CharDevice, BlockDevice, Pipe)):
        return "yellow"
    if isinstance(file_type, Socket):
        return "magenta"
    return None


def hyperlink(text: str, target: Path) -> str:
    """Wrap ``text`` in an OSC 8 link pointing at ``target``."""
    uri = target.absolute().as_uri()
    return f"{HYPERLINK_INTRODUCER}{uri}{HYPERLINK_TERMINATOR}{text}{HYPERLINK_INTRODUCER}{HYPERLINK_TERMINATOR}"


def style_name(entry: Entry, *, color: bool, link_target: Path | None = None) -> str:
    text = entry.name
    if color:
        attr = name_color(entry.file_type)
        if attr is not None:
            text = ansiformat(attr, text)
    if link_target is not None:
        text = hyperlink(text, link_target)
    return text


__all__ = [
    "name_color",
    "hyperlink",
    "style_name",
]
