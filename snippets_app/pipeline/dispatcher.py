"""Command dispatcher: apply create/read/delete to the loaded snippet collection.

The collection is loaded once when the dispatcher is opened. Mutating commands
save the whole collection back; reads never touch the store again.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Callable, Optional

from snippets_app.connectors.downloader import fetch_text
from snippets_app.errors import StdinReadError
from snippets_app.storage.base import BaseStorage
from snippets_app.storage.models import Snippet, SnippetCollection

logger = logging.getLogger(__name__)


def read_stdin() -> str:
    """Read standard input until EOF."""
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StdinReadError(f"Cannot read snippet from standard input: {e}") from e


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SnippetDispatcher:
    """Owns the in-memory collection for a single command invocation.

    Usage:
        dispatcher = SnippetDispatcher.open(storage)
        dispatcher.create("greeting")
    """

    def __init__(
        self,
        storage: BaseStorage,
        snippets: SnippetCollection,
        fetcher: Optional[Callable[[str], str]] = None,
        stdin_reader: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.storage = storage
        self.snippets = snippets
        self.fetcher = fetcher or fetch_text
        self.stdin_reader = stdin_reader or read_stdin
        self.clock = clock or utc_now

    @classmethod
    def open(cls, storage: BaseStorage, **kwargs) -> SnippetDispatcher:
        """Load the full collection from ``storage`` and wrap it."""
        snippets = storage.load()
        logger.info("Loaded %d snippet(s) from %s", len(snippets), storage.describe())
        return cls(storage, snippets, **kwargs)

    def create(self, name: str, download: Optional[str] = None) -> Snippet:
        """Store new content under ``name``, replacing any existing snippet."""
        if download is not None:
            content = self.fetcher(download)
        else:
            content = self.stdin_reader()

        snippet = Snippet.new(content, now=self.clock())
        replaced = name in self.snippets
        self.snippets[name] = snippet
        self.storage.save(self.snippets)
        logger.info(
            "Snippet %r saved (%d characters%s)",
            name, len(content), ", replaced existing" if replaced else "",
        )
        return snippet

    def read(self, name: str) -> Optional[Snippet]:
        """Return the snippet called ``name``, or None."""
        snippet = self.snippets.get(name)
        if snippet is None:
            logger.info("Snippet %r not found", name)
        return snippet

    def delete(self, name: str) -> bool:
        """Remove ``name``. Saves only when something was actually removed."""
        if self.snippets.pop(name, None) is None:
            logger.info("Snippet %r not found, nothing deleted", name)
            return False
        self.storage.save(self.snippets)
        logger.info("Snippet %r deleted", name)
        return True
