"""Supabase-backed session repository."""

from dataclasses import dataclass

from supabase import Client

from session_list.domain.sessions import SessionRecord, session_from_row
from session_list.services.sessions import SessionRepository

_SESSION_COLUMNS = "id, metadata, created_at, updated_at, message_count"


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for listing sessions."""

    client: Client
    table_name: str = "sessions"

    def list_recent_sessions(self, limit: int) -> list[SessionRecord]:
        """Return the most recently updated sessions."""
        response = (
            self.client.table(self.table_name)
            .select(_SESSION_COLUMNS)
            .order("updated_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [session_from_row(row) for row in response.data or []]

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_SESSION_COLUMNS)
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return session_from_row(response.data[0])
