"""Error taxonomy for snippets-app. Every error here is fatal for the current run."""

from __future__ import annotations


class SnippetsError(Exception):
    """Base class for all snippets-app errors."""


class ConfigurationError(SnippetsError):
    """Missing or malformed configuration (environment, YAML file, storage string)."""


class StorageError(SnippetsError):
    """Base class for storage backend failures."""


class StorageInitError(StorageError):
    """The backend could not be constructed (e.g. database cannot be opened)."""


class StorageReadError(StorageError):
    """The store exists but is corrupt, unreadable, or holds an invalid snippet."""


class StorageWriteError(StorageError):
    """The store could not be opened for writing or the write/commit failed."""


class FetchError(SnippetsError):
    """Downloading snippet content from a URL failed."""


class StdinReadError(SnippetsError):
    """Standard input could not be read."""
