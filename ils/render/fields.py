"""Display strings for the metadata columns of a long listing."""

from __future__ import annotations

from ..entry_model.types import Entry, Owner, Permissions, PermissionsOrAttributes

PLACEHOLDER = "_"
MODE_MASK = 0xFFFF


def format_mode(mode: int) -> str:
    """Render the permission bits of ``mode`` as ``rwxrwxrwx``.

    Bits above 16 are ignored.
    """
    return str(Permissions.from_mode(mode & MODE_MASK))


def format_permissions(value: PermissionsOrAttributes | None) -> str:
    return PLACEHOLDER if value is None else str(value)


def format_owner(owner: Owner | None) -> str:
    return PLACEHOLDER if owner is None else str(owner)


def format_size(size: int | None) -> str:
    return PLACEHOLDER if size is None else str(size)


def metadata_fields(entry: Entry, date_text: str | None) -> tuple[str, str, str, str]:
    """Return the permissions, owner, size and date strings for ``entry``."""
    return (
        format_permissions(entry.permissions),
        format_owner(entry.owner),
        format_size(entry.size),
        PLACEHOLDER if date_text is None else date_text,
    )


__all__ = [
    "PLACEHOLDER",
    "format_mode",
    "format_permissions",
    "format_owner",
    "format_size",
    "metadata_fields",
]
