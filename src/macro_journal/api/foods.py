"""Food catalogue endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from macro_journal.api.dependencies import get_container
from macro_journal.api.schemas import FoodLabelPayload
from macro_journal.api.serializers import serialize_food, serialize_macros

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(request: Request, q: str | None = None) -> dict[str, object]:
    """Return all foods, or foods matching q."""
    foods = get_container(request).food_service.search(q)
    return {"foods": [serialize_food(food) for food in foods]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: FoodLabelPayload, request: Request
) -> dict[str, object]:
    """Create a food from nutrition label values."""
    food = get_container(request).food_service.create_food(payload.to_domain())
    return serialize_food(food)


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> dict[str, object]:
    """Return a food."""
    return serialize_food(get_container(request).food_service.get_food(food_id))


@router.put("/{food_id}")
async def update_food(
    food_id: UUID, payload: FoodLabelPayload, request: Request
) -> dict[str, object]:
    """Replace a food's values from nutrition label values."""
    food = get_container(request).food_service.update_food(
        food_id, payload.to_domain()
    )
    return serialize_food(food)


@router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(food_id: UUID, request: Request) -> Response:
    """Delete a food nothing references."""
    get_container(request).food_service.delete_food(food_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{food_id}/macros")
async def food_macros(
    food_id: UUID, request: Request, quantity: float | None = None
) -> dict[str, object]:
    """Return macros for a quantity or for the declared serving."""
    macros = get_container(request).food_service.serving_preview(food_id, quantity)
    return {
        "food_id": str(food_id),
        "quantity": quantity,
        "macros": serialize_macros(macros) if macros is not None else None,
    }
