"""Persistent JSON config helpers.

Stores the default listing mode, colour and hyperlink preferences.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "ils"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    long: bool = False
    color: bool = True
    hyperlink: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are honoured; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_listing_defaults() -> ListingDefaults:
    data = load_config()
    fallback = ListingDefaults()
    return ListingDefaults(
        long=_load_bool(data, "long", fallback.long),
        color=_load_bool(data, "color", fallback.color),
        hyperlink=_load_bool(data, "hyperlink", fallback.hyperlink),
    )


def save_listing_defaults(defaults: ListingDefaults) -> None:
    """Persist listing defaults, keeping unrelated keys intact."""
    config = load_config()
    config["long"] = bool(defaults.long)
    config["color"] = bool(defaults.color)
    config["hyperlink"] = bool(defaults.hyperlink)
    save_config(config)
