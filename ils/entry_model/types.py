"""Domain datatypes for one directory level of listed entries.

Entries are immutable once built by an entry source. File types and the
permissions-or-attributes value are tagged unions of frozen dataclasses so a
new variant can be added without touching existing call sites.
"""

from __future__ import annotations

from dataclasses import dataclass

EPOCH_SECONDS = 0


@dataclass(frozen=True)
class RegularFile:
    setuid: bool = False
    executable: bool = False


@dataclass(frozen=True)
class Directory:
    setuid: bool = False


@dataclass(frozen=True)
class SymLink:
    """Symbolic link; ``is_dir`` is true when the target is a directory."""

    is_dir: bool = False


@dataclass(frozen=True)
class CharDevice:
    pass


@dataclass(frozen=True)
class BlockDevice:
    pass


@dataclass(frozen=True)
class Pipe:
    pass


@dataclass(frozen=True)
class Socket:
    pass


FileType = RegularFile | Directory | SymLink | CharDevice | BlockDevice | Pipe | Socket


@dataclass(frozen=True)
class Permissions:
    """Unix permission bits parsed from a mode value.

    ``str()`` always yields the 9-character ``rwxrwxrwx`` form. The sticky,
    setgid and setuid bits are kept but not rendered.
    """

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False
    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        return cls(
            user_read=bool(mode & 0o400),
            user_write=bool(mode & 0o200),
            user_execute=bool(mode & 0o100),
            group_read=bool(mode & 0o040),
            group_write=bool(mode & 0o020),
            group_execute=bool(mode & 0o010),
            other_read=bool(mode & 0o004),
            other_write=bool(mode & 0o002),
            other_execute=bool(mode & 0o001),
            sticky=bool(mode & 0o1000),
            setgid=bool(mode & 0o2000),
            setuid=bool(mode & 0o4000),
        )

    def __str__(self) -> str:
        return "".join(
            (
                _triplet(self.user_read, self.user_write, self.user_execute),
                _triplet(self.group_read, self.group_write, self.group_execute),
                _triplet(self.other_read, self.other_write, self.other_execute),
            )
        )


def _triplet(read: bool, write: bool, execute: bool) -> str:
    return ("r" if read else "-") + ("w" if write else "-") + ("x" if execute else "-")


# Single variant for now; extended attribute schemes join this union.
PermissionsOrAttributes = Permissions


@dataclass(frozen=True)
class Owner:
    uid: int
    gid: int

    def __str__(self) -> str:
        return f"{self.uid}:{self.gid}"


@dataclass(frozen=True)
class Timestamp:
    seconds: int
    nanoseconds: int | None = None

    def is_epoch_sentinel(self) -> bool:
        """Return whether this is a bare epoch value with no sub-second part."""
        return self.seconds == EPOCH_SECONDS and self.nanoseconds is None


@dataclass(frozen=True)
class EntryDate:
    """Primary modification time plus a secondary change time fallback."""

    modified: Timestamp
    changed: Timestamp | None = None

    def effective(self) -> Timestamp:
        """Return the timestamp to display.

        ``modified`` wins unless it is the epoch sentinel, in which case
        ``changed`` is used when present.
        """
        if self.modified.is_epoch_sentinel() and self.changed is not None:
            return self.changed
        return self.modified


@dataclass(frozen=True)
class Entry:
    """One item of a directory level with the metadata observed for it."""

    name: str
    file_type: FileType = RegularFile()
    permissions: PermissionsOrAttributes | None = None
    date: EntryDate | None = None
    owner: Owner | None = None
    size: int | None = None
    inode: int | None = None
    children: tuple["Entry", ...] | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("entry name must not be empty")
        if self.size is not None and self.size < 0:
            raise ValueError(f"negative size for {self.name!r}: {self.size}")
        if self.inode is not None and self.inode < 0:
            raise ValueError(f"negative inode for {self.name!r}: {self.inode}")


__all__ = [
    "RegularFile",
    "Directory",
    "SymLink",
    "CharDevice",
    "BlockDevice",
    "Pipe",
    "Socket",
    "FileType",
    "Permissions",
    "PermissionsOrAttributes",
    "Owner",
    "Timestamp",
    "EntryDate",
    "Entry",
]
