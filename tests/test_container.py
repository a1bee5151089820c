"""Tests for container wiring."""

from macro_journal.adapters.supabase_meal_entry_repository import (
    SupabaseMealEntryRepository,
)
from macro_journal.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.food_service is not None
    assert container.recipe_service.food_repository is (
        container.food_service.repository
    )
    assert isinstance(
        container.summary_service.repository, SupabaseMealEntryRepository
    )
    assert container.meal_entry_service.repository is (
        container.summary_service.repository
    )
