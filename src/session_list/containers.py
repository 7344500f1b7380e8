"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from supabase import ClientOptions, create_client

from session_list.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from session_list.config import Settings
from session_list.services.sessions import SessionListService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_list_service: SessionListService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_client = httpx.Client()
    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(httpx_client=http_client),
    )
    session_repository = SupabaseSessionRepository(
        supabase_client, table_name=resolved_settings.sessions_table
    )
    session_list_service = SessionListService(session_repository)

    async def close_resources() -> None:
        http_client.close()

    return AppContainer(
        settings=resolved_settings,
        session_list_service=session_list_service,
        close_resources=close_resources,
    )
