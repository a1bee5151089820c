"""Supabase implementation for the food catalogue."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_journal.adapters.rows import parse_food
from macro_journal.domain.foods import FoodItem
from macro_journal.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for food items."""

    client: Client

    def list_foods(self) -> list[FoodItem]:
        """Return all foods ordered by name."""
        response = self.client.table("food_items").select("*").order("name").execute()
        return [parse_food(row) for row in response.data or []]

    def search_foods(self, term: str, limit: int) -> list[FoodItem]:
        """Return foods whose name contains term, case-insensitively."""
        response = (
            self.client.table("food_items")
            .select("*")
            .ilike("name", f"%{term}%")
            .order("name")
            .limit(limit)
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the foods with the given ids."""
        if not food_ids:
            return []
        response = (
            self.client.table("food_items")
            .select("*")
            .in_("id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food row and return it."""
        response = self.client.table("food_items").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food row and return it."""
        response = (
            self.client.table("food_items")
            .update(payload)
            .eq("id", str(food_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food item")
        return parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("food_items").delete().eq("id", str(food_id)).execute()

    def list_recipe_names_using_food(self, food_id: UUID, limit: int) -> list[str]:
        """Return names of recipes that use the food."""
        response = (
            self.client.table("recipe_ingredients")
            .select("recipes(name)")
            .eq("food_id", str(food_id))
            .limit(limit)
            .execute()
        )
        names = []
        for row in response.data or []:
            recipe = row.get("recipes")
            if isinstance(recipe, dict) and recipe.get("name"):
                names.append(str(recipe["name"]))
        return names

    def is_food_in_recipes(self, food_id: UUID) -> bool:
        """Return True when any recipe ingredient row references the food."""
        response = (
            self.client.table("recipe_ingredients")
            .select("id")
            .eq("food_id", str(food_id))
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def is_food_logged(self, food_id: UUID) -> bool:
        """Return True when a meal entry references the food."""
        response = (
            self.client.table("meal_entries")
            .select("id")
            .eq("food_id", str(food_id))
            .limit(1)
            .execute()
        )
        return bool(response.data)
