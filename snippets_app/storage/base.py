"""Base storage interface for snippets-app."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snippets_app.storage.models import SnippetCollection


class BaseStorage(ABC):
    """Abstract base for snippet stores.

    A store persists the whole snippet collection at once: load() returns every
    snippet, save() replaces everything that was stored with the given mapping.
    """

    kind: str = ""

    @abstractmethod
    def load(self) -> "SnippetCollection":
        """Return the full collection.

        Returns an empty dict when the store was never written. Raises
        StorageReadError when it exists but cannot be read or decoded.
        """
        ...

    @abstractmethod
    def save(self, snippets: "SnippetCollection") -> None:
        """Persist ``snippets``, replacing the previous contents.

        Raises StorageWriteError when the write or commit fails.
        """
        ...

    @property
    @abstractmethod
    def location(self) -> str:
        ...

    def describe(self) -> str:
        return f"{self.kind}:{self.location}"

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self) -> "BaseStorage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
