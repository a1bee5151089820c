"""Recipe composition, batches and stored totals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from macro_journal.domain.errors import (
    InvalidServingsError,
    NotFoundError,
    ReferenceInUseError,
    ValidationError,
)
from macro_journal.domain.foods import FoodItem
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.recipes import (
    IngredientLine,
    Recipe,
    RecipeDraft,
    RecipeIngredient,
    RecipeTotals,
    RecipeWithIngredients,
)
from macro_journal.services.foods import FoodRepository
from macro_journal.services.macros import macros_for_quantity

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "user_id", "created_by_name", "total_servings")


class RecipeRepository(Protocol):
    """Persistence interface for recipes and their ingredients."""

    def list_recipes(self, user_id: UUID | None = None) -> list[Recipe]:
        """Return recipes, optionally only those owned by user_id."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_batches(self, base_recipe_id: UUID) -> list[Recipe]:
        """Return recipes forked from the base recipe."""

    def list_ingredients(self, recipe_id: UUID) -> list[RecipeIngredient]:
        """Return ingredient rows joined with their foods."""

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe row and return it."""

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Update recipe columns and return the row."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe row and its ingredient rows."""

    def insert_ingredients(self, recipe_id: UUID, lines: list[IngredientLine]) -> None:
        """Insert ingredient rows for a recipe."""

    def delete_ingredients(self, recipe_id: UUID) -> None:
        """Delete every ingredient row of a recipe."""

    def update_totals(self, recipe_id: UUID, totals: Macros) -> Recipe:
        """Store whole-recipe macro totals."""


def compute_recipe_totals(
    ingredients: Iterable[tuple[FoodItem, float]], total_servings: float | None
) -> RecipeTotals:
    """Sum ingredient macros and split them into servings.

    Servings are floored at one so half-edited drafts still preview.
    """
    total = Macros.zero()
    for food, quantity in ingredients:
        total = total + macros_for_quantity(food, quantity)
    servings = max(total_servings or 0, 1)
    return RecipeTotals(total=total, per_serving=total.scaled(1 / servings))


def batch_name(base_recipe_name: str, batch_date: date) -> str:
    """Return the display name of a batch, e.g. ``Chili (Mar 5)``."""
    return f"{base_recipe_name} ({batch_date:%b} {batch_date.day})"


@dataclass
class RecipeService:
    """Application service for recipes and recipe batches."""

    repository: RecipeRepository
    food_repository: FoodRepository

    def list_recipes(self, user_id: UUID | None = None) -> list[Recipe]:
        """Return recipes grouped by base name, bases before their batches."""
        return self._order(self.repository.list_recipes(user_id))

    def get_recipe(self, recipe_id: UUID) -> RecipeWithIngredients:
        """Return a recipe with its ingredients or raise NotFoundError."""
        recipe = self._require(recipe_id)
        return RecipeWithIngredients(
            recipe=recipe, ingredients=self.repository.list_ingredients(recipe_id)
        )

    def list_batches(self, base_recipe_id: UUID) -> list[Recipe]:
        """Return batches of a base recipe, newest first."""
        self._require(base_recipe_id)
        return self._order(self.repository.list_batches(base_recipe_id))

    def preview(
        self, lines: list[IngredientLine], total_servings: float | None
    ) -> RecipeTotals:
        """Compute unsaved totals for an ingredient list."""
        foods = self._resolve_foods(lines)
        return compute_recipe_totals(
            ((foods[line.food_id], line.quantity) for line in lines), total_servings
        )

    def create_base_recipe(
        self, draft: RecipeDraft, lines: list[IngredientLine]
    ) -> RecipeWithIngredients:
        """Create a base recipe with ingredients and stored totals."""
        _validate_name(draft.name)
        _validate_servings(draft.total_servings)
        self._resolve_foods(lines)
        recipe = self.repository.create_recipe(
            {
                "name": draft.name.strip(),
                "base_recipe_name": draft.name.strip(),
                "user_id": str(draft.user_id),
                "created_by_name": draft.created_by_name,
                "total_servings": draft.total_servings,
                "is_base_recipe": True,
                "batch_date": None,
                "parent_recipe_id": None,
            }
        )
        self._fill_new_recipe(recipe, lines)
        logger.info("Created base recipe", extra={"recipe_id": str(recipe.id)})
        return self.get_recipe(recipe.id)

    def create_batch(  # noqa: PLR0913
        self,
        base_recipe_id: UUID,
        user_id: UUID,
        created_by_name: str,
        batch_date: date,
        total_servings: float | None = None,
        lines: list[IngredientLine] | None = None,
    ) -> RecipeWithIngredients:
        """Fork a dated batch from a recipe.

        Without explicit ingredients or servings the batch starts as a copy
        of the source recipe. Later edits to either side do not propagate.
        """
        source = self.get_recipe(base_recipe_id)
        base_id = source.recipe.parent_recipe_id or source.recipe.id
        if lines is None:
            lines = [
                IngredientLine(food_id=row.food_id, quantity=row.quantity)
                for row in source.ingredients
            ]
        servings = (
            total_servings
            if total_servings is not None
            else source.recipe.total_servings
        )
        _validate_servings(servings)
        self._resolve_foods(lines)
        recipe = self.repository.create_recipe(
            {
                "name": batch_name(source.recipe.base_recipe_name, batch_date),
                "base_recipe_name": source.recipe.base_recipe_name,
                "user_id": str(user_id),
                "created_by_name": created_by_name,
                "total_servings": servings,
                "is_base_recipe": False,
                "batch_date": batch_date.isoformat(),
                "parent_recipe_id": str(base_id),
            }
        )
        self._fill_new_recipe(recipe, lines)
        logger.info(
            "Created recipe batch",
            extra={"recipe_id": str(recipe.id), "parent_recipe_id": str(base_id)},
        )
        return self.get_recipe(recipe.id)

    def update_recipe(
        self,
        recipe_id: UUID,
        changes: dict[str, object],
        lines: list[IngredientLine],
    ) -> RecipeWithIngredients:
        """Update safe fields, replace ingredients and recompute totals."""
        current = self.get_recipe(recipe_id)
        payload = {
            key: value for key, value in changes.items() if key in UPDATABLE_FIELDS
        }
        if "name" in payload:
            _validate_name(str(payload["name"]))
            payload["name"] = str(payload["name"]).strip()
        if "total_servings" in payload:
            _validate_servings(payload["total_servings"])
        if "user_id" in payload and payload["user_id"] is not None:
            payload["user_id"] = str(payload["user_id"])
        self._resolve_foods(lines)

        previous_fields = {
            "name": current.recipe.name,
            "user_id": str(current.recipe.user_id) if current.recipe.user_id else None,
            "created_by_name": current.recipe.created_by_name,
            "total_servings": current.recipe.total_servings,
        }
        previous_lines = [
            IngredientLine(food_id=row.food_id, quantity=row.quantity)
            for row in current.ingredients
        ]
        try:
            if payload:
                self.repository.update_recipe(recipe_id, payload)
            self.repository.delete_ingredients(recipe_id)
            self.repository.insert_ingredients(recipe_id, lines)
            self.recalculate_totals(recipe_id)
        except Exception:
            logger.exception(
                "Recipe update failed, restoring previous state",
                extra={"recipe_id": str(recipe_id)},
            )
            self.repository.update_recipe(recipe_id, previous_fields)
            self.repository.delete_ingredients(recipe_id)
            self.repository.insert_ingredients(recipe_id, previous_lines)
            self.recalculate_totals(recipe_id)
            raise
        logger.info("Updated recipe", extra={"recipe_id": str(recipe_id)})
        return self.get_recipe(recipe_id)

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe that has no batches."""
        self._require(recipe_id)
        batches = self.repository.list_batches(recipe_id)
        if batches:
            names = [batch.name for batch in batches]
            bullet_list = "\n".join(f"• {name}" for name in names)
            raise ReferenceInUseError(
                f"Cannot delete base recipe. It has {len(batches)} batch(es). "
                f"Delete batches first:\n{bullet_list}",
                references=names,
            )
        self.repository.delete_recipe(recipe_id)
        logger.info("Deleted recipe", extra={"recipe_id": str(recipe_id)})

    def recalculate_totals(self, recipe_id: UUID) -> Recipe:
        """Recompute stored totals from the ingredient rows as persisted."""
        rows = self.repository.list_ingredients(recipe_id)
        foods = {
            food.id: food
            for food in self.food_repository.get_foods(
                list({row.food_id for row in rows})
            )
        }
        missing = [row.food_id for row in rows if row.food_id not in foods]
        if missing:
            raise NotFoundError("Food", missing[0])
        totals = compute_recipe_totals(
            ((foods[row.food_id], row.quantity) for row in rows), None
        )
        return self.repository.update_totals(recipe_id, totals.total)

    def _fill_new_recipe(self, recipe: Recipe, lines: list[IngredientLine]) -> None:
        try:
            self.repository.insert_ingredients(recipe.id, lines)
            self.recalculate_totals(recipe.id)
        except Exception:
            logger.exception(
                "Recipe creation failed, removing partial recipe",
                extra={"recipe_id": str(recipe.id)},
            )
            self.repository.delete_recipe(recipe.id)
            raise

    def _require(self, recipe_id: UUID) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def _resolve_foods(self, lines: list[IngredientLine]) -> dict[UUID, FoodItem]:
        if not lines:
            raise ValidationError("A recipe needs at least one ingredient")
        for line in lines:
            if line.quantity <= 0:
                raise ValidationError("Ingredient quantity must be greater than zero")
        food_ids = list({line.food_id for line in lines})
        foods = {food.id: food for food in self.food_repository.get_foods(food_ids)}
        for food_id in food_ids:
            if food_id not in foods:
                raise NotFoundError("Food", food_id)
        return foods

    @staticmethod
    def _order(recipes: list[Recipe]) -> list[Recipe]:
        """Order by base name, bases first, then newest batch and creation."""
        oldest = datetime.min.replace(tzinfo=UTC)
        ordered = sorted(
            recipes, key=lambda item: item.created_at or oldest, reverse=True
        )
        ordered = sorted(
            ordered,
            key=lambda item: item.batch_date or date.min,
            reverse=True,
        )
        return sorted(
            ordered, key=lambda item: (item.base_recipe_name, not item.is_base_recipe)
        )


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Recipe name is required")


def _validate_servings(total_servings: object) -> None:
    if (
        not isinstance(total_servings, int | float)
        or isinstance(total_servings, bool)
        or total_servings <= 0
    ):
        raise InvalidServingsError("Total servings must be greater than zero")
