"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_journal.adapters.rows import parse_datetime
from macro_journal.domain.models import AppUser
from macro_journal.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self) -> list[AppUser]:
        """Return all users ordered by name."""
        response = self.client.table("app_users").select("*").order("name").execute()
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> AppUser | None:
        """Return a user by id, if present."""
        response = (
            self.client.table("app_users")
            .select("*")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, name: str) -> AppUser:
        """Create a new user row and return it."""
        response = self.client.table("app_users").insert({"name": name}).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> AppUser:
    return AppUser(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        created_at=parse_datetime(row.get("created_at")),
    )
