"""Meal entry logging, grouping and copying."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from macro_journal.domain.errors import (
    InvalidEntryError,
    InvalidServingsError,
    NotFoundError,
    ValidationError,
)
from macro_journal.domain.meals import (
    DayEntries,
    MealEntry,
    MealType,
    NewMealEntry,
    QuantityType,
)
from macro_journal.services.foods import FoodRepository
from macro_journal.services.recipes import RecipeRepository

logger = logging.getLogger(__name__)


class MealEntryRepository(Protocol):
    """Persistence interface for meal entries."""

    def list_entries(self, user_id: UUID, day: date) -> list[MealEntry]:
        """Return a day's entries with food and recipe details, oldest first."""

    def list_entries_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealEntry]:
        """Return entries with details for the inclusive date range."""

    def get_entry(self, entry_id: UUID) -> MealEntry | None:
        """Return an entry with details, if present."""

    def create_entries(self, entries: list[NewMealEntry]) -> list[MealEntry]:
        """Insert entries in one request and return them with details."""

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> MealEntry:
        """Update entry columns and return the entry with details."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""


@dataclass
class MealEntryService:
    """Application service for the daily meal log."""

    repository: MealEntryRepository
    food_repository: FoodRepository
    recipe_repository: RecipeRepository

    def list_entries(self, user_id: UUID, day: date) -> list[MealEntry]:
        """Return the user's entries for a day in logging order."""
        return self.repository.list_entries(user_id, day)

    def log_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        food_id: UUID,
        quantity: float,
        notes: str | None = None,
    ) -> MealEntry:
        """Log a quantity of a food, measured in the food's base unit."""
        _validate_quantity(quantity)
        food = self.food_repository.get_food(food_id)
        if food is None:
            raise NotFoundError("Food", food_id)
        entry = NewMealEntry(
            user_id=user_id,
            day=day,
            meal_type=meal_type,
            quantity=quantity,
            quantity_type=QuantityType(str(food.base_unit)),
            food_id=food_id,
            notes=notes or None,
        )
        return self._create(entry)

    def log_recipe(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        meal_type: MealType,
        recipe_id: UUID,
        servings: float,
        notes: str | None = None,
    ) -> MealEntry:
        """Log a number of servings of a recipe."""
        _validate_quantity(servings)
        recipe = self.recipe_repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        if not recipe.total_servings or recipe.total_servings <= 0:
            raise InvalidServingsError(
                f"Recipe {recipe.name!r} has no positive serving count"
            )
        entry = NewMealEntry(
            user_id=user_id,
            day=day,
            meal_type=meal_type,
            quantity=servings,
            quantity_type=QuantityType.SERVINGS,
            recipe_id=recipe_id,
            notes=notes or None,
        )
        return self._create(entry)

    def update_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        entry_id: UUID,
        quantity: float,
        meal_type: MealType | None = None,
        notes: str | None = None,
    ) -> MealEntry:
        """Change an entry's quantity, and optionally its meal type or notes."""
        _validate_quantity(quantity)
        self._require_owned(user_id, entry_id)
        payload: dict[str, object] = {"quantity": quantity}
        if meal_type is not None:
            payload["meal_type"] = str(meal_type)
        if notes is not None:
            payload["notes"] = notes
        return self.repository.update_entry(entry_id, payload)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a single entry owned by the user."""
        self._require_owned(user_id, entry_id)
        self.repository.delete_entry(entry_id)

    def copy_to_date(
        self,
        user_id: UUID,
        source_day: date,
        target_day: date,
        meal_types: Iterable[MealType],
    ) -> list[MealEntry]:
        """Duplicate the selected meal types of one day onto another.

        Copies are new rows; the source day is left untouched and repeated
        copies produce repeated rows.
        """
        selected = set(meal_types)
        if not selected:
            raise ValidationError("Select at least one meal type to copy")
        if source_day == target_day:
            raise ValidationError("Source and target dates must differ")
        copies = [
            NewMealEntry(
                user_id=user_id,
                day=target_day,
                meal_type=entry.meal_type,
                quantity=entry.quantity,
                quantity_type=entry.quantity_type,
                food_id=entry.food_id,
                recipe_id=entry.recipe_id,
                notes=entry.notes,
            )
            for entry in self.repository.list_entries(user_id, source_day)
            if entry.meal_type in selected
        ]
        if not copies:
            return []
        created = self.repository.create_entries(copies)
        logger.info(
            "Copied meal entries",
            extra={
                "user_id": str(user_id),
                "source_day": source_day.isoformat(),
                "target_day": target_day.isoformat(),
                "count": len(created),
            },
        )
        return created

    def recent_days_with_entries(
        self,
        user_id: UUID,
        today: date,
        days: int = 10,
        exclude: date | None = None,
    ) -> list[DayEntries]:
        """Return recent days that have entries, newest first."""
        start = today - timedelta(days=max(days, 1) - 1)
        by_day: dict[date, list[MealEntry]] = {}
        for entry in self.repository.list_entries_between(user_id, start, today):
            if entry.day == exclude:
                continue
            by_day.setdefault(entry.day, []).append(entry)
        return [
            DayEntries(day=day, entries=by_day[day])
            for day in sorted(by_day, reverse=True)
        ]

    def _require_owned(self, user_id: UUID, entry_id: UUID) -> MealEntry:
        # Another user's entry is reported as missing.
        entry = self.repository.get_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            raise NotFoundError("Meal entry", entry_id)
        return entry

    def _create(self, entry: NewMealEntry) -> MealEntry:
        _validate_reference(entry)
        created = self.repository.create_entries([entry])
        if not created:
            raise RuntimeError("Failed to create meal entry")
        logger.info(
            "Logged meal entry",
            extra={"user_id": str(entry.user_id), "entry_id": str(created[0].id)},
        )
        return created[0]


def group_by_meal_type(
    entries: Iterable[MealEntry],
) -> dict[MealType, list[MealEntry]]:
    """Partition entries into every meal type bucket, keeping logging order."""
    groups: dict[MealType, list[MealEntry]] = {meal_type: [] for meal_type in MealType}
    for entry in entries:
        groups[entry.meal_type].append(entry)
    return groups


def non_empty_groups(
    groups: dict[MealType, list[MealEntry]],
) -> list[tuple[MealType, list[MealEntry]]]:
    """Return only the buckets that have entries, in display order."""
    return [(meal_type, items) for meal_type, items in groups.items() if items]


def _validate_quantity(quantity: float) -> None:
    if quantity <= 0:
        raise InvalidEntryError("Quantity must be greater than zero")


def _validate_reference(entry: NewMealEntry) -> None:
    if (entry.food_id is None) == (entry.recipe_id is None):
        raise InvalidEntryError("A meal entry references exactly one food or recipe")
