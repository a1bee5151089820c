"""Request dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from macro_journal.domain.models import AppUser
from macro_journal.domain.session import SessionContext

if TYPE_CHECKING:
    from macro_journal.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def get_session(
    x_user_id: str | None = Header(default=None),
    x_active_tab: str | None = Header(default=None),
) -> SessionContext:
    """Build the session context from client headers."""
    session = SessionContext()
    if x_user_id:
        try:
            session.select_user(UUID(x_user_id))
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="X-User-Id must be a UUID",
            ) from exc
    session.set_active_tab(x_active_tab)
    return session


async def require_user(
    request: Request, session: SessionContext = Depends(get_session)
) -> AppUser:
    """Return the selected user, rejecting requests without one."""
    if session.user_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Select a user with the X-User-Id header",
        )
    return get_container(request).user_service.get_user(session.user_id)
