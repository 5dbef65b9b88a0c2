"""Single-file JSON store: the whole collection lives in one pretty-printed object.

Writes truncate and rewrite the file in place, so a crash mid-write can leave
a torn file behind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from snippets_app.errors import StorageReadError, StorageWriteError
from snippets_app.storage.base import BaseStorage
from snippets_app.storage.models import Snippet, SnippetCollection

logger = logging.getLogger(__name__)


class JsonStorage(BaseStorage):
    """Store snippets as ``{name: {"content": ..., "created_at": ...}}`` in a JSON file."""

    kind = "JSON"

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def load(self) -> SnippetCollection:
        if not self.path.exists():
            logger.info("JSON store %s does not exist yet, starting empty", self.path)
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StorageReadError(f"Cannot open JSON file '{self.path}': {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageReadError(f"Cannot parse JSON file '{self.path}': {e}") from e

        if not isinstance(data, dict):
            raise StorageReadError(
                f"Cannot parse JSON file '{self.path}': top level must be an object"
            )

        snippets: SnippetCollection = {}
        for name, doc in data.items():
            try:
                snippets[name] = Snippet.from_dict(doc)
            except ValueError as e:
                raise StorageReadError(
                    f"Invalid snippet {name!r} in '{self.path}': {e}"
                ) from e

        logger.debug("Loaded %d snippet(s) from %s", len(snippets), self.path)
        return snippets

    def save(self, snippets: SnippetCollection) -> None:
        data = {name: snippet.to_dict() for name, snippet in snippets.items()}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise StorageWriteError(f"Cannot write JSON file '{self.path}': {e}") from e

        logger.debug("Saved %d snippet(s) to %s", len(snippets), self.path)
