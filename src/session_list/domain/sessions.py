"""Domain models for listed sessions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SessionMetadata:
    """Descriptive metadata attached to a session."""

    schedule_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class SessionRecord:
    """Represents a stored session as read by the session list."""

    id: str
    metadata: SessionMetadata = field(default_factory=SessionMetadata)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    message_count: int | None = None


def session_from_row(row: Mapping[str, object]) -> SessionRecord:
    """Build a session from a stored row, tolerating missing metadata."""
    raw_metadata = row.get("metadata")
    metadata = (
        SessionMetadata(
            schedule_id=_optional_str(raw_metadata.get("schedule_id")),
            description=_optional_str(raw_metadata.get("description")),
        )
        if isinstance(raw_metadata, Mapping)
        else SessionMetadata()
    )
    message_count = row.get("message_count")
    return SessionRecord(
        id=str(row.get("id", "")),
        metadata=metadata,
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
        message_count=message_count if isinstance(message_count, int) else None,
    )


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None
