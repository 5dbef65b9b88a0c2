"""Storage selector: build the right backend from a ``KIND:location`` string."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from snippets_app.errors import ConfigurationError
from snippets_app.storage.base import BaseStorage
from snippets_app.storage.json_backend import JsonStorage
from snippets_app.storage.sqlite_backend import SqliteStorage

logger = logging.getLogger(__name__)

USAGE_HINT = "storage must be JSON:<path> or SQLITE:<path>"


class StorageKind(str, Enum):
    JSON = "JSON"
    SQLITE = "SQLITE"


def parse_storage_config(config: str) -> Tuple[StorageKind, str]:
    """Split ``config`` into (kind, location) without constructing anything.

    Only the first ':' separates kind from location, so locations may
    themselves contain colons.
    """
    kind_tag, sep, location = (config or "").partition(":")
    kind_tag = kind_tag.strip().upper()
    location = location.strip()
    if not sep or not kind_tag or not location:
        raise ConfigurationError(f"Invalid storage {config!r}: {USAGE_HINT}")
    try:
        kind = StorageKind(kind_tag)
    except ValueError:
        raise ConfigurationError(
            f"Unknown storage provider {kind_tag!r}: {USAGE_HINT}"
        ) from None
    return kind, location


def build_storage(config: str) -> BaseStorage:
    """Return a backend for the given storage string.

    Raises ConfigurationError for a malformed string and StorageInitError when
    the SQLite database cannot be opened.
    """
    kind, location = parse_storage_config(config)
    logger.info("Using %s storage at %s", kind.value, location)
    if kind is StorageKind.JSON:
        return JsonStorage(location)
    return SqliteStorage(location)
