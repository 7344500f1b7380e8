"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

if TYPE_CHECKING:
    from session_list.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/sessions", dependencies=[Depends(require_admin)])
async def list_sessions(
    request: Request, limit: int | None = Query(default=None, ge=1)
) -> dict[str, object]:
    """Return recent sessions grouped by creator, with the rule that fired."""
    container: AppContainer = request.app.state.container
    service = container.session_list_service
    sessions = service.list_sessions(
        limit=container.settings.session_list_limit if limit is None else limit,
        include_scheduled=True,
    )
    partition = service.partition(sessions)
    return {
        "user_sessions": [
            {"id": session.id, "description": session.metadata.description}
            for session in partition.user_sessions
        ],
        "scheduler_sessions": [
            {
                "id": entry.session.id,
                "description": entry.session.metadata.description,
                "schedule_id": entry.session.metadata.schedule_id,
                "rule": entry.rule,
            }
            for entry in partition.scheduler_sessions
        ],
    }
