"""Services for the shared food catalogue."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_journal.domain.errors import (
    NotFoundError,
    ReferenceInUseError,
    ValidationError,
)
from macro_journal.domain.foods import FoodItem, FoodLabel
from macro_journal.domain.nutrition import Macros
from macro_journal.services.macros import macros_for_quantity, macros_for_serving_size

logger = logging.getLogger(__name__)

RECIPE_REFERENCE_LIMIT = 3


class FoodRepository(Protocol):
    """Persistence interface for food items."""

    def list_foods(self) -> list[FoodItem]:
        """Return all foods ordered by name."""

    def search_foods(self, term: str, limit: int) -> list[FoodItem]:
        """Return foods whose name contains term."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the foods with the given ids."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food row and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food row and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row."""

    def list_recipe_names_using_food(self, food_id: UUID, limit: int) -> list[str]:
        """Return names of recipes that have the food as an ingredient."""

    def is_food_in_recipes(self, food_id: UUID) -> bool:
        """Return True when any recipe ingredient row references the food."""

    def is_food_logged(self, food_id: UUID) -> bool:
        """Return True when a meal entry references the food."""


@dataclass
class FoodService:
    """Application service for food catalogue operations."""

    repository: FoodRepository

    def list_foods(self) -> list[FoodItem]:
        """Return every food, ordered by name."""
        return self.repository.list_foods()

    def search(self, term: str | None, limit: int = 20) -> list[FoodItem]:
        """Search foods by name, falling back to the full list without a term."""
        if not term or not term.strip():
            return self.repository.list_foods()
        return self.repository.search_foods(term.strip(), limit)

    def get_food(self, food_id: UUID) -> FoodItem:
        """Return a food or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError("Food", food_id)
        return food

    def create_food(self, label: FoodLabel) -> FoodItem:
        """Create a food from nutrition label values."""
        food = self.repository.create_food(label_to_payload(label))
        logger.info("Created food", extra={"food_id": str(food.id)})
        return food

    def update_food(self, food_id: UUID, label: FoodLabel) -> FoodItem:
        """Replace a food's values from nutrition label values."""
        self.get_food(food_id)
        return self.repository.update_food(food_id, label_to_payload(label))

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food that no recipe or meal entry references."""
        self.get_food(food_id)
        recipe_names = self.repository.list_recipe_names_using_food(
            food_id, RECIPE_REFERENCE_LIMIT
        )
        if recipe_names or self.repository.is_food_in_recipes(food_id):
            used_in = f": {', '.join(recipe_names)}" if recipe_names else ""
            raise ReferenceInUseError(
                f"Cannot delete - used in recipes{used_in}. "
                "Edit the food item to fix data instead.",
                references=recipe_names,
            )
        if self.repository.is_food_logged(food_id):
            raise ReferenceInUseError(
                "Cannot delete - this food has been logged in your meals. "
                "Edit the food item to fix data instead."
            )
        self.repository.delete_food(food_id)
        logger.info("Deleted food", extra={"food_id": str(food_id)})

    def serving_preview(
        self, food_id: UUID, quantity: float | None = None
    ) -> Macros | None:
        """Return macros for quantity, or for the declared serving size."""
        food = self.get_food(food_id)
        if quantity is not None:
            if quantity < 0:
                raise ValidationError("Quantity must not be negative")
            return macros_for_quantity(food, quantity)
        return macros_for_serving_size(food)


def label_to_payload(label: FoodLabel) -> dict[str, object]:
    """Normalize label values to per-100-unit columns."""
    if label.serving_size <= 0:
        raise ValidationError("Label serving size must be greater than zero")
    if not label.name.strip():
        raise ValidationError("Food name is required")
    nutrients = (label.calories, label.protein, label.carbs, label.fat, label.fiber)
    if any(value is not None and value < 0 for value in nutrients):
        raise ValidationError("Nutrient values must not be negative")

    def per100(value: float) -> float:
        return round(value / label.serving_size * 100, 2)

    return {
        "name": label.name.strip(),
        "base_unit": str(label.serving_unit),
        "calories": per100(label.calories),
        "protein": per100(label.protein),
        "carbs": per100(label.carbs),
        "fat": per100(label.fat),
        "fiber": per100(label.fiber) if label.fiber else None,
        "serving_label": label.serving_label or None,
        "serving_size": label.serving_size,
    }
