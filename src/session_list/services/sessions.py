"""Session listing with scheduler sessions kept apart."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from session_list.domain.sessions import SessionRecord
from session_list.services.scheduler_detection import (
    is_scheduler_session,
    matching_rule,
)

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Read interface for stored sessions."""

    def list_recent_sessions(self, limit: int) -> list[SessionRecord]:
        """Return the most recently updated sessions."""

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""


@dataclass(frozen=True)
class ScheduledSession:
    """Scheduler session paired with the rule that flagged it."""

    session: SessionRecord
    rule: str


@dataclass(frozen=True)
class SessionPartition:
    """Sessions split by who created them."""

    user_sessions: list[SessionRecord] = field(default_factory=list)
    scheduler_sessions: list[ScheduledSession] = field(default_factory=list)


@dataclass(frozen=True)
class SessionClassification:
    """Classification result for a single session."""

    session_id: str
    is_scheduler: bool
    rule: str | None


@dataclass
class SessionListService:
    """Lists sessions and decides which ones the user gets to see."""

    repository: SessionRepository

    def list_sessions(
        self, limit: int = 50, include_scheduled: bool = False
    ) -> list[SessionRecord]:
        """Return recent sessions, hiding scheduler sessions unless asked."""
        sessions = self.repository.list_recent_sessions(limit)
        if include_scheduled:
            return sessions
        visible = [session for session in sessions if not is_scheduler_session(session)]
        hidden = len(sessions) - len(visible)
        if hidden:
            logger.debug("Hid %d scheduler sessions from the list", hidden)
        return visible

    def partition(self, sessions: Iterable[SessionRecord]) -> SessionPartition:
        """Split sessions into user and scheduler sessions, keeping order."""
        partition = SessionPartition()
        for session in sessions:
            rule = matching_rule(session)
            if rule is None:
                partition.user_sessions.append(session)
            else:
                partition.scheduler_sessions.append(
                    ScheduledSession(session=session, rule=rule.name)
                )
        return partition

    def classify(self, session_id: str) -> SessionClassification | None:
        """Explain how a single session is classified."""
        session = self.repository.get_session(session_id)
        if session is None:
            return None
        rule = matching_rule(session)
        return SessionClassification(
            session_id=session.id,
            is_scheduler=rule is not None,
            rule=rule.name if rule else None,
        )
