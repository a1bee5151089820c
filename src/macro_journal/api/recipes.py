"""Recipe and recipe batch endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from macro_journal.api.dependencies import get_container
from macro_journal.api.schemas import (
    BatchCreate,
    RecipeCreate,
    RecipePreviewPayload,
    RecipeUpdate,
)
from macro_journal.api.serializers import (
    serialize_recipe,
    serialize_recipe_detail,
    serialize_recipe_totals,
)
from macro_journal.domain.recipes import RecipeDraft

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
async def list_recipes(
    request: Request, user_id: UUID | None = None
) -> dict[str, object]:
    """Return recipes, bases followed by their batches."""
    recipes = get_container(request).recipe_service.list_recipes(user_id)
    return {"recipes": [serialize_recipe(recipe) for recipe in recipes]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(payload: RecipeCreate, request: Request) -> dict[str, object]:
    """Create a base recipe."""
    detail = get_container(request).recipe_service.create_base_recipe(
        RecipeDraft(
            name=payload.name,
            user_id=payload.user_id,
            created_by_name=payload.created_by_name,
            total_servings=payload.total_servings,
        ),
        [line.to_domain() for line in payload.ingredients],
    )
    return serialize_recipe_detail(detail)


@router.post("/preview")
async def preview_recipe(
    payload: RecipePreviewPayload, request: Request
) -> dict[str, object]:
    """Return totals for an unsaved ingredient list."""
    totals = get_container(request).recipe_service.preview(
        [line.to_domain() for line in payload.ingredients], payload.total_servings
    )
    return serialize_recipe_totals(totals)


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Return a recipe with its ingredients."""
    detail = get_container(request).recipe_service.get_recipe(recipe_id)
    return serialize_recipe_detail(detail)


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: UUID, payload: RecipeUpdate, request: Request
) -> dict[str, object]:
    """Update a recipe and replace its ingredients."""
    changes = payload.model_dump(exclude={"ingredients"}, exclude_none=True)
    detail = get_container(request).recipe_service.update_recipe(
        recipe_id, changes, [line.to_domain() for line in payload.ingredients]
    )
    return serialize_recipe_detail(detail)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: UUID, request: Request) -> Response:
    """Delete a recipe that has no batches."""
    get_container(request).recipe_service.delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{recipe_id}/batches")
async def list_batches(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Return the batches forked from a base recipe."""
    batches = get_container(request).recipe_service.list_batches(recipe_id)
    return {"batches": [serialize_recipe(batch) for batch in batches]}


@router.post("/{recipe_id}/batches", status_code=status.HTTP_201_CREATED)
async def create_batch(
    recipe_id: UUID, payload: BatchCreate, request: Request
) -> dict[str, object]:
    """Fork a dated batch from a recipe."""
    detail = get_container(request).recipe_service.create_batch(
        base_recipe_id=recipe_id,
        user_id=payload.user_id,
        created_by_name=payload.created_by_name,
        batch_date=payload.batch_date,
        total_servings=payload.total_servings,
        lines=(
            [line.to_domain() for line in payload.ingredients]
            if payload.ingredients is not None
            else None
        ),
    )
    return serialize_recipe_detail(detail)
