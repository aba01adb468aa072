"""Build listing entries for one host directory level from ``lstat`` data."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from .types import (
    BlockDevice,
    CharDevice,
    Directory,
    Entry,
    EntryDate,
    FileType,
    Owner,
    Permissions,
    Pipe,
    RegularFile,
    Socket,
    SymLink,
    Timestamp,
)

LOGGER = logging.getLogger(__name__)

_NS_PER_SECOND = 1_000_000_000


def _timestamp_from_ns(value_ns: int) -> Timestamp:
    seconds, nanoseconds = divmod(int(value_ns), _NS_PER_SECOND)
    return Timestamp(seconds=seconds, nanoseconds=nanoseconds)


def file_type_from_stat(st: os.stat_result, path: Path) -> FileType:
    """Classify an ``lstat`` result into a file-type variant.

    Symlinks probe their target so ``SymLink.is_dir`` reflects a directory
    target; dangling links report ``False``.
    """
    mode = st.st_mode
    setuid = bool(mode & stat.S_ISUID)
    if stat.S_ISDIR(mode):
        return Directory(setuid=setuid)
    if stat.S_ISLNK(mode):
        return SymLink(is_dir=os.path.isdir(path))
    if stat.S_ISCHR(mode):
        return CharDevice()
    if stat.S_ISBLK(mode):
        return BlockDevice()
    if stat.S_ISFIFO(mode):
        return Pipe()
    if stat.S_ISSOCK(mode):
        return Socket()
    executable = bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
    return RegularFile(setuid=setuid, executable=executable)


def entry_from_stat(name: str, path: Path, st: os.stat_result) -> Entry:
    """Normalize one ``lstat`` result into an immutable ``Entry``."""
    return Entry(
        name=name,
        file_type=file_type_from_stat(st, path),
        permissions=Permissions.from_mode(stat.S_IMODE(st.st_mode)),
        date=EntryDate(
            modified=_timestamp_from_ns(st.st_mtime_ns),
            changed=_timestamp_from_ns(st.st_ctime_ns),
        ),
        owner=Owner(uid=int(st.st_uid), gid=int(st.st_gid)),
        size=int(st.st_size),
        inode=int(st.st_ino),
    )


def read_directory_entries(directory: Path) -> list[Entry]:
    """List the immediate children of ``directory`` in scan order.

    Raises ``FileNotFoundError`` for a missing path and ``NotADirectoryError``
    when ``directory`` is something else. Children that vanish between the
    scan and their ``lstat`` are skipped.
    """
    if not directory.exists():
        raise FileNotFoundError(f"Path not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    entries: list[Entry] = []
    with os.scandir(directory) as scanned:
        for child in scanned:
            child_path = Path(child.path)
            try:
                st = child.stat(follow_symlinks=False)
            except OSError as exc:
                LOGGER.debug("skipping %s: %s", child_path, exc)
                continue
            entries.append(entry_from_stat(child.name, child_path, st))
    return entries


__all__ = [
    "file_type_from_stat",
    "entry_from_stat",
    "read_directory_entries",
]
