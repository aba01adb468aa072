"""Domain model for listed directory entries.

This package contains non-UI listing primitives:
- immutable entry datatypes with file-type and permission variants
- a host filesystem entry source for one directory level
"""

from __future__ import annotations

from .types import (
    BlockDevice,
    CharDevice,
    Directory,
    Entry,
    EntryDate,
    FileType,
    Owner,
    Permissions,
    PermissionsOrAttributes,
    Pipe,
    RegularFile,
    Socket,
    SymLink,
    Timestamp,
)
from .fs import entry_from_stat, file_type_from_stat, read_directory_entries

__all__ = [
    "BlockDevice",
    "CharDevice",
    "Directory",
    "Entry",
    "EntryDate",
    "FileType",
    "Owner",
    "Permissions",
    "PermissionsOrAttributes",
    "Pipe",
    "RegularFile",
    "Socket",
    "SymLink",
    "Timestamp",
    "entry_from_stat",
    "file_type_from_stat",
    "read_directory_entries",
]
