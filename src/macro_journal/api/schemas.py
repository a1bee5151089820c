"""Pydantic models for API request payloads."""

import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from macro_journal.domain.foods import BaseUnit, FoodLabel
from macro_journal.domain.meals import MealType
from macro_journal.domain.recipes import IngredientLine


class UserCreate(BaseModel):
    """New journal user."""

    name: str = Field(min_length=1)


class FoodLabelPayload(BaseModel):
    """Food values as printed on a nutrition label."""

    name: str = Field(min_length=1)
    label_serving_size: float = Field(gt=0)
    label_serving_unit: BaseUnit = BaseUnit.GRAMS
    label_calories: float = Field(ge=0)
    label_protein: float = Field(default=0, ge=0)
    label_carbs: float = Field(default=0, ge=0)
    label_fat: float = Field(default=0, ge=0)
    label_fiber: float | None = Field(default=None, ge=0)
    serving_label: str | None = None

    def to_domain(self) -> FoodLabel:
        return FoodLabel(
            name=self.name,
            serving_size=self.label_serving_size,
            serving_unit=self.label_serving_unit,
            calories=self.label_calories,
            protein=self.label_protein,
            carbs=self.label_carbs,
            fat=self.label_fat,
            fiber=self.label_fiber,
            serving_label=self.serving_label,
        )


class IngredientPayload(BaseModel):
    """Food and quantity in the food's base unit."""

    food_id: UUID
    quantity: float = Field(gt=0)

    def to_domain(self) -> IngredientLine:
        return IngredientLine(food_id=self.food_id, quantity=self.quantity)


class RecipePreviewPayload(BaseModel):
    """Unsaved ingredient list for a totals preview."""

    total_servings: float | None = None
    ingredients: list[IngredientPayload] = Field(min_length=1)


class RecipeCreate(BaseModel):
    """New base recipe."""

    name: str = Field(min_length=1)
    user_id: UUID
    created_by_name: str
    total_servings: float = Field(gt=0)
    ingredients: list[IngredientPayload] = Field(min_length=1)


class RecipeUpdate(BaseModel):
    """Changes to a recipe and its full replacement ingredient list."""

    name: str | None = None
    user_id: UUID | None = None
    created_by_name: str | None = None
    total_servings: float | None = Field(default=None, gt=0)
    ingredients: list[IngredientPayload] = Field(min_length=1)


class BatchCreate(BaseModel):
    """New dated batch of a base recipe."""

    user_id: UUID
    created_by_name: str
    batch_date: datetime.date
    total_servings: float | None = Field(default=None, gt=0)
    ingredients: list[IngredientPayload] | None = None


class LogFoodPayload(BaseModel):
    """Food eaten in a meal."""

    date: datetime.date
    meal_type: MealType
    food_id: UUID
    quantity: float = Field(gt=0)
    notes: str | None = None


class LogRecipePayload(BaseModel):
    """Recipe servings eaten in a meal."""

    date: datetime.date
    meal_type: MealType
    recipe_id: UUID
    servings: float = Field(gt=0)
    notes: str | None = None


class MealEntryUpdate(BaseModel):
    """Editable meal entry fields."""

    quantity: float = Field(gt=0)
    meal_type: MealType | None = None
    notes: str | None = None


class CopyMealsPayload(BaseModel):
    """Meal types to duplicate from one day onto another."""

    source_date: datetime.date
    target_date: datetime.date
    meal_types: list[MealType] = Field(min_length=1)
