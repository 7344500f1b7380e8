"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, status

from session_list.api.admin import router as admin_router
from session_list.app_logging import configure_logging
from session_list.containers import AppContainer
from session_list.domain.sessions import SessionRecord
from session_list.services.scheduler_detection import is_scheduler_session


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Session list started (environment=%s)", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/sessions")
    async def list_sessions(
        request: Request,
        limit: int | None = Query(default=None, ge=1),
        include_scheduled: bool | None = None,
    ) -> dict[str, object]:
        """Return recent sessions, hiding scheduler sessions by default."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        sessions = state_container.session_list_service.list_sessions(
            limit=settings.session_list_limit if limit is None else limit,
            include_scheduled=(
                settings.show_scheduler_sessions
                if include_scheduled is None
                else include_scheduled
            ),
        )
        return {"sessions": [serialize_session(session) for session in sessions]}

    @app.get("/sessions/{session_id}/classification")
    async def session_classification(
        session_id: str, request: Request
    ) -> dict[str, object]:
        """Explain whether a session was created by the scheduler."""
        state_container: AppContainer = request.app.state.container
        result = state_container.session_list_service.classify(session_id)
        if result is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {
            "id": result.session_id,
            "is_scheduler": result.is_scheduler,
            "rule": result.rule,
        }

    return app


def serialize_session(session: SessionRecord) -> dict[str, object]:
    """Render a session for JSON responses."""
    return {
        "id": session.id,
        "metadata": {
            "schedule_id": session.metadata.schedule_id,
            "description": session.metadata.description,
        },
        "created_at": session.created_at.isoformat() if session.created_at else None,
        "updated_at": session.updated_at.isoformat() if session.updated_at else None,
        "message_count": session.message_count,
        "is_scheduler": is_scheduler_session(session),
    }
