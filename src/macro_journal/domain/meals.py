"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from macro_journal.domain.foods import FoodItem
from macro_journal.domain.recipes import Recipe


class MealType(StrEnum):
    """Fixed meal categories, in display order."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACKS = "Snacks"
    PRE_WORKOUT = "Pre Workout"
    POST_WORKOUT = "Post Workout"


class QuantityType(StrEnum):
    """Unit of a meal entry quantity."""

    GRAMS = "g"
    MILLILITERS = "ml"
    SERVINGS = "servings"


@dataclass(frozen=True)
class MealEntry:
    """A single logged consumption event.

    Exactly one of ``food_id`` and ``recipe_id`` is set. ``food`` and
    ``recipe`` carry the referenced row when the entry was loaded with its
    details.
    """

    id: UUID
    user_id: UUID
    day: date
    meal_type: MealType
    quantity: float
    quantity_type: QuantityType
    food_id: UUID | None = None
    recipe_id: UUID | None = None
    notes: str | None = None
    created_at: datetime | None = None
    food: FoodItem | None = None
    recipe: Recipe | None = None

    @property
    def display_name(self) -> str:
        """Return the name of the logged food or recipe."""
        if self.food is not None:
            return self.food.name
        if self.recipe is not None:
            return self.recipe.name
        return "Unknown"


@dataclass(frozen=True)
class NewMealEntry:
    """Row data for a meal entry that has not been stored yet."""

    user_id: UUID
    day: date
    meal_type: MealType
    quantity: float
    quantity_type: QuantityType
    food_id: UUID | None = None
    recipe_id: UUID | None = None
    notes: str | None = None


@dataclass(frozen=True)
class DayEntries:
    """Entries logged on one day."""

    day: date
    entries: list[MealEntry] = field(default_factory=list)

    @property
    def meal_types(self) -> list[MealType]:
        """Return the meal types present on the day, in display order."""
        present = {entry.meal_type for entry in self.entries}
        return [meal_type for meal_type in MealType if meal_type in present]
