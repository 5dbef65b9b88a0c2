"""SQLite store: one row per snippet in a single ``snippets`` table."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from snippets_app.errors import StorageInitError, StorageReadError, StorageWriteError
from snippets_app.storage.base import BaseStorage
from snippets_app.storage.models import Snippet, SnippetCollection

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS snippets (
    name TEXT PRIMARY KEY,
    content TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""


class SqliteStorage(BaseStorage):
    """Relational store backed by a single sqlite3 connection.

    The table is created on construction if it does not exist. save() clears
    the table and re-inserts every snippet inside one transaction.

    Usage:
        with SqliteStorage("data/snippets.db") as store:
            snippets = store.load()
    """

    kind = "SQLITE"

    def __init__(self, db_path: Union[str, Path]) -> None:
        self.db_path = str(db_path)
        self._conn: Optional[sqlite3.Connection] = None

        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute(SCHEMA_SQL)
            self._conn.commit()
        except (sqlite3.Error, OSError) as e:
            self.close()
            raise StorageInitError(f"Failed to open SQLite '{self.db_path}': {e}") from e

        logger.info("SQLite store ready: %s", self.db_path)

    @property
    def location(self) -> str:
        return self.db_path

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """Commit on success, roll back on any error."""
        assert self._conn is not None, "SQLite store is closed"
        try:
            yield self._conn
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def load(self) -> SnippetCollection:
        assert self._conn is not None, "SQLite store is closed"
        try:
            rows = self._conn.execute(
                "SELECT name, content, created_at FROM snippets"
            ).fetchall()
        except sqlite3.Error as e:
            raise StorageReadError(f"Cannot read snippets from '{self.db_path}': {e}") from e

        snippets: SnippetCollection = {}
        for row in rows:
            try:
                snippets[row["name"]] = Snippet.from_row(row)
            except ValueError as e:
                raise StorageReadError(
                    f"Invalid snippet {row['name']!r} in '{self.db_path}': {e}"
                ) from e

        logger.debug("Loaded %d snippet(s) from %s", len(snippets), self.db_path)
        return snippets

    def save(self, snippets: SnippetCollection) -> None:
        rows = [snippet.to_row(name) for name, snippet in snippets.items()]
        try:
            with self._transaction() as conn:
                conn.execute("DELETE FROM snippets")
                conn.executemany(
                    "INSERT INTO snippets (name, content, created_at) VALUES (?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as e:
            raise StorageWriteError(f"Cannot write snippets to '{self.db_path}': {e}") from e

        logger.debug("Saved %d snippet(s) to %s", len(rows), self.db_path)
