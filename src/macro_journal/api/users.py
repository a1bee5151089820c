"""User and session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from macro_journal.api.dependencies import get_container, get_session
from macro_journal.api.schemas import UserCreate
from macro_journal.api.serializers import serialize_user
from macro_journal.domain.session import SessionContext

router = APIRouter(tags=["users"])


@router.get("/users")
async def list_users(request: Request) -> dict[str, object]:
    """Return every user."""
    users = get_container(request).user_service.list_users()
    return {"users": [serialize_user(user) for user in users]}


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, request: Request) -> dict[str, object]:
    """Create a user."""
    user = get_container(request).user_service.create_user(payload.name)
    return serialize_user(user)


@router.get("/session")
async def current_session(
    request: Request, session: SessionContext = Depends(get_session)
) -> dict[str, object]:
    """Return the session context resolved from request headers."""
    user = None
    if session.user_id is not None:
        user = serialize_user(
            get_container(request).user_service.get_user(session.user_id)
        )
    return {"user": user, "active_tab": session.active_tab}
