"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from session_list.config import Settings
from session_list.containers import AppContainer
from session_list.domain.sessions import SessionMetadata, SessionRecord
from session_list.services.sessions import SessionListService, SessionRepository


def make_session(
    session_id: str,
    schedule_id: str | None = None,
    description: str | None = None,
) -> SessionRecord:
    """Build a session with the given metadata fields."""
    return SessionRecord(
        id=session_id,
        metadata=SessionMetadata(schedule_id=schedule_id, description=description),
    )


@dataclass
class InMemorySessionRepository(SessionRepository):
    """In-memory session repository for tests, newest session first."""

    sessions: list[SessionRecord] = field(default_factory=list)
    requested_limits: list[int] = field(default_factory=list)

    def list_recent_sessions(self, limit: int) -> list[SessionRecord]:
        self.requested_limits.append(limit)
        return list(self.sessions[:limit])

    def get_session(self, session_id: str) -> SessionRecord | None:
        for session in self.sessions:
            if session.id == session_id:
                return session
        return None


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
    )


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository(
        sessions=[
            make_session("user-session-1", description="My work project discussion"),
            make_session(
                "abc123",
                schedule_id="daily-backup",
                description="Automated backup task",
            ),
            make_session("xyz789", description="Debug session"),
            make_session("def456", description=""),
            make_session("20250820_143000", description="20250820_143000"),
            make_session("20250821_090000", description="Meeting notes"),
        ]
    )


@pytest.fixture
def container(
    settings: Settings, session_repository: InMemorySessionRepository
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_list_service=SessionListService(session_repository),
        close_resources=close_resources,
    )
