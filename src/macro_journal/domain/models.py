"""Domain models for the nutrition journal."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AppUser:
    """Represents a journal user stored in the database."""

    id: UUID
    name: str
    created_at: datetime | None = None
