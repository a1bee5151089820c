"""JSON serializers for API responses."""

from macro_journal.domain.foods import FoodItem
from macro_journal.domain.meals import DayEntries, MealEntry
from macro_journal.domain.models import AppUser
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.recipes import Recipe, RecipeTotals, RecipeWithIngredients
from macro_journal.domain.stats import DailySummary, WeeklySummary
from macro_journal.services.macros import calculate_entry_macros, format_macros


def serialize_macros(macros: Macros) -> dict[str, float]:
    rounded = format_macros(macros)
    return {
        "calories": rounded.calories,
        "protein": rounded.protein,
        "carbs": rounded.carbs,
        "fat": rounded.fat,
        "fiber": rounded.fiber,
    }


def serialize_user(user: AppUser) -> dict[str, object]:
    return {
        "id": str(user.id),
        "name": user.name,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def serialize_food(food: FoodItem) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "base_unit": str(food.base_unit),
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "fiber": food.fiber,
        "serving_label": food.serving_label,
        "serving_size": food.serving_size,
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "base_recipe_name": recipe.base_recipe_name,
        "user_id": str(recipe.user_id) if recipe.user_id else None,
        "created_by_name": recipe.created_by_name,
        "total_servings": recipe.total_servings,
        "is_base_recipe": recipe.is_base_recipe,
        "parent_recipe_id": (
            str(recipe.parent_recipe_id) if recipe.parent_recipe_id else None
        ),
        "batch_date": recipe.batch_date.isoformat() if recipe.batch_date else None,
        "totals": serialize_macros(recipe.totals),
    }


def serialize_recipe_detail(detail: RecipeWithIngredients) -> dict[str, object]:
    payload = serialize_recipe(detail.recipe)
    payload["ingredients"] = [
        {
            "id": str(row.id),
            "food_id": str(row.food_id),
            "name": row.food.name if row.food else None,
            "base_unit": str(row.food.base_unit) if row.food else None,
            "quantity": row.quantity,
        }
        for row in detail.ingredients
    ]
    return payload


def serialize_recipe_totals(totals: RecipeTotals) -> dict[str, object]:
    return {
        "total": serialize_macros(totals.total),
        "per_serving": serialize_macros(totals.per_serving),
    }


def serialize_entry(entry: MealEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "user_id": str(entry.user_id),
        "date": entry.day.isoformat(),
        "meal_type": str(entry.meal_type),
        "name": entry.display_name,
        "quantity": entry.quantity,
        "quantity_type": str(entry.quantity_type),
        "food_id": str(entry.food_id) if entry.food_id else None,
        "recipe_id": str(entry.recipe_id) if entry.recipe_id else None,
        "notes": entry.notes,
        "macros": serialize_macros(calculate_entry_macros(entry)),
    }


def serialize_day_entries(day: DayEntries) -> dict[str, object]:
    return {
        "date": day.day.isoformat(),
        "meal_types": [str(meal_type) for meal_type in day.meal_types],
        "entries": [serialize_entry(entry) for entry in day.entries],
    }


def serialize_daily_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "totals": serialize_macros(summary.totals),
        "percentages": {
            "protein": summary.percentages.protein,
            "carbs": summary.percentages.carbs,
            "fat": summary.percentages.fat,
        },
        "meals": [
            {
                "meal_type": str(group.meal_type),
                "totals": serialize_macros(group.totals),
                "entries": [serialize_entry(entry) for entry in group.entries],
            }
            for group in summary.meals
            if group.entries
        ],
    }


def serialize_weekly_summary(summary: WeeklySummary) -> dict[str, object]:
    return {
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "totals": serialize_macros(summary.totals),
        "averages": serialize_macros(summary.averages),
        "daily": [
            {"date": day.day.isoformat(), **serialize_macros(day.macros)}
            for day in summary.daily
        ],
    }
