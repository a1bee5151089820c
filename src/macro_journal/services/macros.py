"""Macro aggregation for foods, recipes and logged meal entries.

All functions here are pure. They never round; rounding happens only in
``format_macros`` and ``round_half_away`` at presentation boundaries.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from macro_journal.domain.errors import InvalidServingsError
from macro_journal.domain.foods import FoodItem
from macro_journal.domain.meals import MealEntry
from macro_journal.domain.nutrition import MacroPercentages, Macros
from macro_journal.domain.recipes import Recipe

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


def calculate_entry_macros(entry: MealEntry) -> Macros:
    """Return the macros contributed by a single meal entry."""
    if entry.food is not None:
        return macros_for_quantity(entry.food, entry.quantity)
    if entry.recipe is not None:
        return macros_for_servings(entry.recipe, entry.quantity)
    return Macros.zero()


def sum_macros(entries: Iterable[MealEntry]) -> Macros:
    """Sum entry macros field by field."""
    total = Macros.zero()
    for entry in entries:
        total = total + calculate_entry_macros(entry)
    return total


def macros_for_quantity(food: FoodItem, quantity: float) -> Macros:
    """Scale a food's per-100-unit nutrients to quantity base units."""
    return Macros(
        calories=food.calories * quantity / 100,
        protein=food.protein * quantity / 100,
        carbs=food.carbs * quantity / 100,
        fat=food.fat * quantity / 100,
        fiber=food.fiber * quantity / 100,
    )


def macros_for_serving_size(food: FoodItem) -> Macros | None:
    """Return macros for the food's declared serving, or None without one."""
    if food.serving_size is None:
        return None
    return macros_for_quantity(food, food.serving_size)


def macros_for_servings(recipe: Recipe, servings: float) -> Macros:
    """Return the share of a recipe's stored totals eaten in servings."""
    total_servings = recipe.total_servings
    if not total_servings or total_servings <= 0:
        raise InvalidServingsError(
            f"Recipe {recipe.name!r} has no positive serving count"
        )
    totals = recipe.totals
    return Macros(
        calories=totals.calories * servings / total_servings,
        protein=totals.protein * servings / total_servings,
        carbs=totals.carbs * servings / total_servings,
        fat=totals.fat * servings / total_servings,
        fiber=totals.fiber * servings / total_servings,
    )


def calories_from_macros(totals: Macros) -> float:
    """Return Atwater calories implied by protein, carbs and fat."""
    return (
        totals.protein * PROTEIN_KCAL_PER_G
        + totals.carbs * CARBS_KCAL_PER_G
        + totals.fat * FAT_KCAL_PER_G
    )


def macro_percentage(grams: float, calories_per_gram: float, totals: Macros) -> int:
    """Return the whole-number share of macro calories for grams of a nutrient.

    The denominator is the Atwater sum of the totals, not their stated
    calories, so the three shares of a day add up to roughly 100.
    """
    denominator = calories_from_macros(totals)
    if denominator == 0:
        return 0
    return int(round_half_away(grams * calories_per_gram * 100 / denominator, 0))


def macro_distribution(totals: Macros) -> MacroPercentages:
    """Return protein, carbs and fat shares for totals."""
    return MacroPercentages(
        protein=macro_percentage(totals.protein, PROTEIN_KCAL_PER_G, totals),
        carbs=macro_percentage(totals.carbs, CARBS_KCAL_PER_G, totals),
        fat=macro_percentage(totals.fat, FAT_KCAL_PER_G, totals),
    )


def round_half_away(value: float, digits: int) -> float:
    """Round value to digits decimals with halves rounded away from zero."""
    exponent = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def format_macros(macros: Macros) -> Macros:
    """Round macros for display: whole calories, one-decimal nutrients."""
    return Macros(
        calories=round_half_away(macros.calories, 0),
        protein=round_half_away(macros.protein, 1),
        carbs=round_half_away(macros.carbs, 1),
        fat=round_half_away(macros.fat, 1),
        fiber=round_half_away(macros.fiber, 1),
    )
