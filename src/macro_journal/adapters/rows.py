"""Row parsers shared by the Supabase repositories.

Nullable nutrient columns are normalized here, once, so domain code never
branches on missing values.
"""

from datetime import date, datetime
from uuid import UUID

from macro_journal.domain.foods import BaseUnit, FoodItem
from macro_journal.domain.meals import MealEntry, MealType, QuantityType
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.recipes import Recipe, RecipeIngredient

MEAL_ENTRY_DETAILS = "*, food_items(*), recipes(*)"


def parse_food(row: dict[str, object]) -> FoodItem:
    """Parse a food_items row into a domain model."""
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        base_unit=BaseUnit(str(row.get("base_unit") or BaseUnit.GRAMS)),
        calories=_number(row.get("calories")),
        protein=_number(row.get("protein")),
        carbs=_number(row.get("carbs")),
        fat=_number(row.get("fat")),
        fiber=_number(row.get("fiber")),
        serving_label=row.get("serving_label") or None,
        serving_size=_optional_number(row.get("serving_size")),
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipes row into a domain model."""
    name = str(row.get("name") or "")
    return Recipe(
        id=UUID(str(row["id"])),
        name=name,
        base_recipe_name=str(row.get("base_recipe_name") or name),
        user_id=_optional_uuid(row.get("user_id")),
        created_by_name=row.get("created_by_name"),
        total_servings=_number(row.get("total_servings")),
        is_base_recipe=bool(row.get("is_base_recipe", True)),
        parent_recipe_id=_optional_uuid(row.get("parent_recipe_id")),
        batch_date=_parse_date(row.get("batch_date")),
        totals=Macros(
            calories=_number(row.get("total_calories")),
            protein=_number(row.get("total_protein")),
            carbs=_number(row.get("total_carbs")),
            fat=_number(row.get("total_fat")),
            fiber=_number(row.get("total_fiber")),
        ),
        created_at=parse_datetime(row.get("created_at")),
    )


def parse_ingredient(row: dict[str, object]) -> RecipeIngredient:
    """Parse a recipe_ingredients row with an optional embedded food."""
    food_row = row.get("food_items")
    return RecipeIngredient(
        id=UUID(str(row["id"])),
        recipe_id=UUID(str(row["recipe_id"])),
        food_id=UUID(str(row["food_id"])),
        quantity=_number(row.get("quantity")),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )


def parse_meal_entry(row: dict[str, object]) -> MealEntry:
    """Parse a meal_entries row with embedded food and recipe details."""
    food_row = row.get("food_items")
    recipe_row = row.get("recipes")
    return MealEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        meal_type=MealType(str(row["meal_type"])),
        quantity=_number(row.get("quantity")),
        quantity_type=QuantityType(str(row.get("quantity_type") or "g")),
        food_id=_optional_uuid(row.get("food_id")),
        recipe_id=_optional_uuid(row.get("recipe_id")),
        notes=row.get("notes"),
        created_at=parse_datetime(row.get("created_at")),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
        recipe=parse_recipe(recipe_row) if isinstance(recipe_row, dict) else None,
    )


def _number(value: object) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str) and value:
        return float(value)
    return 0.0


def _optional_number(value: object) -> float | None:
    if value is None:
        return None
    return _number(value)


def _optional_uuid(value: object) -> UUID | None:
    if not value:
        return None
    return UUID(str(value))


def _parse_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def parse_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
