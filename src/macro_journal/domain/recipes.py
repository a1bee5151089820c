"""Domain models for recipes and recipe batches."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from macro_journal.domain.foods import FoodItem
from macro_journal.domain.nutrition import Macros


@dataclass(frozen=True)
class Recipe:
    """A base recipe or a dated batch forked from one."""

    id: UUID
    name: str
    base_recipe_name: str
    user_id: UUID | None
    created_by_name: str | None
    total_servings: float
    is_base_recipe: bool
    parent_recipe_id: UUID | None
    batch_date: date | None
    totals: Macros
    created_at: datetime | None = None

    @property
    def is_batch(self) -> bool:
        """Return True when the recipe was forked from a base recipe."""
        return self.parent_recipe_id is not None


@dataclass(frozen=True)
class IngredientLine:
    """Food and quantity requested for a recipe."""

    food_id: UUID
    quantity: float


@dataclass(frozen=True)
class RecipeIngredient:
    """Stored ingredient row joined with its food."""

    id: UUID
    recipe_id: UUID
    food_id: UUID
    quantity: float
    food: FoodItem | None = None


@dataclass(frozen=True)
class RecipeWithIngredients:
    """Recipe together with its ingredient rows."""

    recipe: Recipe
    ingredients: list[RecipeIngredient] = field(default_factory=list)


@dataclass(frozen=True)
class RecipeDraft:
    """Fields supplied when creating a base recipe."""

    name: str
    user_id: UUID
    created_by_name: str
    total_servings: float


@dataclass(frozen=True)
class RecipeTotals:
    """Whole-recipe and per-serving macros."""

    total: Macros
    per_serving: Macros
