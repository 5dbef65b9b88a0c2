"""Data models for the snippets-app storage layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from dateutil.parser import isoparse


@dataclass(frozen=True)
class Snippet:
    """A stored block of text and the moment it was created."""

    content: str
    created_at: datetime

    @classmethod
    def new(cls, content: str, now: Optional[datetime] = None) -> Snippet:
        """Create a snippet stamped with ``now`` (defaults to the current UTC time)."""
        created_at = now if now is not None else datetime.now(timezone.utc)
        check_offset(created_at)
        return cls(content=content, created_at=created_at)

    def to_dict(self) -> Dict[str, str]:
        return {
            "content": self.content,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Snippet:
        """Build a snippet from its JSON document. Raises ValueError on any bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        missing = [key for key in ("content", "created_at") if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        content = data["content"]
        if not isinstance(content, str):
            raise ValueError(f"content must be a string, got {type(content).__name__}")
        return cls(content=content, created_at=parse_timestamp(data["created_at"]))

    def to_row(self, name: str) -> tuple:
        return (name, self.content, format_timestamp(self.created_at))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Snippet:
        return cls(
            content=row["content"],
            created_at=parse_timestamp(row["created_at"]),
        )


SnippetCollection = Dict[str, Snippet]


# --- Helpers ---

def check_offset(value: datetime) -> timedelta:
    """Return the UTC offset of ``value``. RFC 3339 offsets have whole minutes only."""
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("timestamp must be timezone-aware")
    if offset % timedelta(minutes=1):
        raise ValueError(f"UTC offset {offset} is not a whole number of minutes")
    return offset


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as RFC 3339. A zero UTC offset is written as ``Z``."""
    offset = check_offset(value)
    text = value.isoformat()
    if offset == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp. Raises ValueError for anything without an offset."""
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid timestamp {value!r}: {e}") from e
    if parsed.utcoffset() is None:
        raise ValueError(f"timestamp {value!r} has no timezone offset")
    return parsed
