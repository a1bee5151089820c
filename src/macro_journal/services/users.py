"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_journal.domain.errors import NotFoundError, ValidationError
from macro_journal.domain.models import AppUser


class UserRepository(Protocol):
    """Persistence interface for journal users."""

    def list_users(self) -> list[AppUser]:
        """Return all users ordered by name."""

    def get_user(self, user_id: UUID) -> AppUser | None:
        """Return a user by id, if present."""

    def create_user(self, name: str) -> AppUser:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for journal users."""

    repository: UserRepository

    def list_users(self) -> list[AppUser]:
        """Return every user, ordered by name."""
        return self.repository.list_users()

    def get_user(self, user_id: UUID) -> AppUser:
        """Return a user or raise NotFoundError."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def create_user(self, name: str) -> AppUser:
        """Create a user with a non-blank display name."""
        cleaned = name.strip()
        if not cleaned:
            raise ValidationError("User name is required")
        return self.repository.create_user(cleaned)
