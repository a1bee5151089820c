"""Daily and weekly summary endpoints for the session user."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from macro_journal.api.dependencies import get_container, require_user
from macro_journal.api.serializers import (
    serialize_daily_summary,
    serialize_weekly_summary,
)
from macro_journal.domain.models import AppUser

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("/daily")
async def daily_summary(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Return totals, macro distribution and meal breakdown for a day."""
    summary = get_container(request).summary_service.daily_summary(
        user.id, day or date.today()
    )
    return serialize_daily_summary(summary)


@router.get("/weekly")
async def weekly_summary(
    request: Request,
    end: date | None = None,
    days: int | None = Query(default=None, ge=1, le=31),
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    container = get_container(request)
    summary = container.summary_service.weekly_summary(
        user.id,
        end_day=end or date.today(),
        days=days or container.settings.summary_days,
    )
    return serialize_weekly_summary(summary)


@router.get("/text", response_class=PlainTextResponse)
async def summary_text(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: AppUser = Depends(require_user),
) -> str:
    """Return the day's summary as shareable plain text."""
    return get_container(request).summary_service.summary_text(
        user.name, user.id, day or date.today()
    )
