"""Supabase repository for meal entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_journal.adapters.rows import MEAL_ENTRY_DETAILS, parse_meal_entry
from macro_journal.domain.meals import MealEntry, NewMealEntry
from macro_journal.services.meals import MealEntryRepository


@dataclass
class SupabaseMealEntryRepository(MealEntryRepository):
    """Supabase implementation for meal entries."""

    client: Client

    def list_entries(self, user_id: UUID, day: date) -> list[MealEntry]:
        """Return a day's entries with details, oldest first."""
        response = (
            self.client.table("meal_entries")
            .select(MEAL_ENTRY_DETAILS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at")
            .execute()
        )
        return [parse_meal_entry(row) for row in response.data or []]

    def list_entries_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealEntry]:
        """Return entries with details for the inclusive date range."""
        response = (
            self.client.table("meal_entries")
            .select(MEAL_ENTRY_DETAILS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date")
            .order("created_at")
            .execute()
        )
        return [parse_meal_entry(row) for row in response.data or []]

    def get_entry(self, entry_id: UUID) -> MealEntry | None:
        """Return an entry with details, if present."""
        response = (
            self.client.table("meal_entries")
            .select(MEAL_ENTRY_DETAILS)
            .eq("id", str(entry_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_meal_entry(response.data[0])

    def create_entries(self, entries: list[NewMealEntry]) -> list[MealEntry]:
        """Insert entries in one request and reload them with details."""
        payload = [
            {
                "user_id": str(entry.user_id),
                "date": entry.day.isoformat(),
                "meal_type": str(entry.meal_type),
                "quantity": entry.quantity,
                "quantity_type": str(entry.quantity_type),
                "food_id": str(entry.food_id) if entry.food_id else None,
                "recipe_id": str(entry.recipe_id) if entry.recipe_id else None,
                "notes": entry.notes,
            }
            for entry in entries
        ]
        if not payload:
            return []
        response = self.client.table("meal_entries").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal entries")
        ids = [str(row["id"]) for row in response.data]
        detail_response = (
            self.client.table("meal_entries")
            .select(MEAL_ENTRY_DETAILS)
            .in_("id", ids)
            .execute()
        )
        by_id = {
            str(row["id"]): parse_meal_entry(row) for row in detail_response.data or []
        }
        return [by_id[entry_id] for entry_id in ids if entry_id in by_id]

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> MealEntry:
        """Update entry columns and return the entry with details."""
        response = (
            self.client.table("meal_entries")
            .update(payload)
            .eq("id", str(entry_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal entry")
        entry = self.get_entry(entry_id)
        if entry is None:
            raise RuntimeError("Failed to reload meal entry")
        return entry

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""
        self.client.table("meal_entries").delete().eq("id", str(entry_id)).execute()
