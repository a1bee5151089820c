"""Meal log endpoints for the session user."""

from __future__ import annotations

from datetime import date
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, Response, status

from macro_journal.api.dependencies import get_container, require_user
from macro_journal.api.schemas import (
    CopyMealsPayload,
    LogFoodPayload,
    LogRecipePayload,
    MealEntryUpdate,
)
from macro_journal.api.serializers import (
    serialize_day_entries,
    serialize_entry,
    serialize_macros,
)
from macro_journal.domain.models import AppUser
from macro_journal.services.macros import sum_macros
from macro_journal.services.meals import group_by_meal_type, non_empty_groups

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
async def list_meals(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Return the day's entries grouped by meal type."""
    day = day or _today()
    entries = get_container(request).meal_entry_service.list_entries(user.id, day)
    groups = non_empty_groups(group_by_meal_type(entries))
    return {
        "date": day.isoformat(),
        "totals": serialize_macros(sum_macros(entries)),
        "meals": [
            {
                "meal_type": str(meal_type),
                "totals": serialize_macros(sum_macros(items)),
                "entries": [serialize_entry(entry) for entry in items],
            }
            for meal_type, items in groups
        ],
    }


@router.post("/food", status_code=status.HTTP_201_CREATED)
async def log_food(
    payload: LogFoodPayload,
    request: Request,
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Log a food for the session user."""
    entry = get_container(request).meal_entry_service.log_food(
        user_id=user.id,
        day=payload.date,
        meal_type=payload.meal_type,
        food_id=payload.food_id,
        quantity=payload.quantity,
        notes=payload.notes,
    )
    return serialize_entry(entry)


@router.post("/recipe", status_code=status.HTTP_201_CREATED)
async def log_recipe(
    payload: LogRecipePayload,
    request: Request,
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Log recipe servings for the session user."""
    entry = get_container(request).meal_entry_service.log_recipe(
        user_id=user.id,
        day=payload.date,
        meal_type=payload.meal_type,
        recipe_id=payload.recipe_id,
        servings=payload.servings,
        notes=payload.notes,
    )
    return serialize_entry(entry)


@router.patch("/{entry_id}")
async def update_meal(
    entry_id: UUID,
    payload: MealEntryUpdate,
    request: Request,
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Edit an entry's quantity, meal type or notes."""
    entry = get_container(request).meal_entry_service.update_entry(
        user.id,
        entry_id,
        quantity=payload.quantity,
        meal_type=payload.meal_type,
        notes=payload.notes,
    )
    return serialize_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    entry_id: UUID,
    request: Request,
    user: AppUser = Depends(require_user),
) -> Response:
    """Delete one of the session user's entries."""
    get_container(request).meal_entry_service.delete_entry(user.id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/copy", status_code=status.HTTP_201_CREATED)
async def copy_meals(
    payload: CopyMealsPayload,
    request: Request,
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Copy selected meal types from one day to another."""
    created = get_container(request).meal_entry_service.copy_to_date(
        user_id=user.id,
        source_day=payload.source_date,
        target_day=payload.target_date,
        meal_types=payload.meal_types,
    )
    return {"created": [serialize_entry(entry) for entry in created]}


@router.get("/recent-days")
async def recent_days(
    request: Request,
    exclude: date | None = None,
    user: AppUser = Depends(require_user),
) -> dict[str, object]:
    """Return recent days with entries, to pick a copy source."""
    container = get_container(request)
    days = container.meal_entry_service.recent_days_with_entries(
        user.id,
        today=_today(),
        days=container.settings.recent_days_limit,
        exclude=exclude,
    )
    return {"days": [serialize_day_entries(day) for day in days]}


def _today() -> date:
    return date.today()
