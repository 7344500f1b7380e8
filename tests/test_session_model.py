"""Tests for parsing stored session rows."""

from datetime import UTC, datetime

from session_list.domain.sessions import SessionMetadata, session_from_row


def test_session_from_row_reads_metadata() -> None:
    session = session_from_row(
        {
            "id": "abc123",
            "metadata": {"schedule_id": "daily-backup", "description": "Backup"},
            "created_at": "2025-08-20T14:30:00+00:00",
            "updated_at": "2025-08-20T14:35:00+00:00",
            "message_count": 4,
        }
    )

    assert session.id == "abc123"
    assert session.metadata == SessionMetadata(
        schedule_id="daily-backup", description="Backup"
    )
    assert session.created_at == datetime(2025, 8, 20, 14, 30, tzinfo=UTC)
    assert session.message_count == 4


def test_session_from_row_treats_missing_metadata_as_empty() -> None:
    assert session_from_row({"id": "a"}).metadata == SessionMetadata()
    assert session_from_row({"id": "b", "metadata": None}).metadata == (
        SessionMetadata()
    )
    assert session_from_row({"id": "c", "metadata": "oops"}).metadata == (
        SessionMetadata()
    )


def test_session_from_row_drops_non_string_fields() -> None:
    session = session_from_row(
        {"id": 42, "metadata": {"schedule_id": 7, "description": ["x"]}}
    )

    assert session.id == "42"
    assert session.metadata == SessionMetadata()


def test_session_from_row_ignores_bad_timestamps() -> None:
    session = session_from_row(
        {"id": "a", "metadata": {}, "created_at": "yesterday", "message_count": "3"}
    )

    assert session.created_at is None
    assert session.updated_at is None
    assert session.message_count is None
