"""Supabase repository for recipes and recipe ingredients."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_journal.adapters.rows import parse_ingredient, parse_recipe
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.recipes import IngredientLine, Recipe, RecipeIngredient
from macro_journal.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipes."""

    client: Client

    def list_recipes(self, user_id: UUID | None = None) -> list[Recipe]:
        """Return recipes grouped by base name, bases first."""
        query = self.client.table("recipes").select("*")
        if user_id is not None:
            query = query.eq("user_id", str(user_id))
        response = (
            query.order("base_recipe_name")
            .order("is_base_recipe", desc=True)
            .order("batch_date", desc=True, nullsfirst=False)
            .order("created_at", desc=True)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def list_batches(self, base_recipe_id: UUID) -> list[Recipe]:
        """Return recipes whose parent is the base recipe."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("parent_recipe_id", str(base_recipe_id))
            .order("batch_date", desc=True)
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def list_ingredients(self, recipe_id: UUID) -> list[RecipeIngredient]:
        """Return ingredient rows with their foods embedded."""
        response = (
            self.client.table("recipe_ingredients")
            .select("*, food_items(*)")
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        return [parse_ingredient(row) for row in response.data or []]

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe row and return it."""
        response = self.client.table("recipes").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return parse_recipe(response.data[0])

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Update recipe columns and return the row."""
        response = (
            self.client.table("recipes")
            .update(payload)
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update recipe")
        return parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe; ingredient rows cascade in the database."""
        self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()

    def insert_ingredients(self, recipe_id: UUID, lines: list[IngredientLine]) -> None:
        """Insert ingredient rows in a single request."""
        payload = [
            {
                "recipe_id": str(recipe_id),
                "food_id": str(line.food_id),
                "quantity": line.quantity,
            }
            for line in lines
        ]
        if payload:
            self.client.table("recipe_ingredients").insert(payload).execute()

    def delete_ingredients(self, recipe_id: UUID) -> None:
        """Delete every ingredient row of a recipe."""
        self.client.table("recipe_ingredients").delete().eq(
            "recipe_id", str(recipe_id)
        ).execute()

    def update_totals(self, recipe_id: UUID, totals: Macros) -> Recipe:
        """Store whole-recipe macro totals."""
        return self.update_recipe(
            recipe_id,
            {
                "total_calories": totals.calories,
                "total_protein": totals.protein,
                "total_carbs": totals.carbs,
                "total_fat": totals.fat,
                "total_fiber": totals.fiber,
            },
        )
