"""Storage layer - one load/save contract over JSON file and SQLite backends."""

from snippets_app.storage.base import BaseStorage
from snippets_app.storage.factory import StorageKind, build_storage, parse_storage_config
from snippets_app.storage.json_backend import JsonStorage
from snippets_app.storage.models import Snippet, SnippetCollection
from snippets_app.storage.sqlite_backend import SqliteStorage

__all__ = [
    "BaseStorage",
    "JsonStorage",
    "SqliteStorage",
    "Snippet",
    "SnippetCollection",
    "StorageKind",
    "build_storage",
    "parse_storage_config",
]
