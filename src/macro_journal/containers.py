"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_journal.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_journal.adapters.supabase_meal_entry_repository import (
    SupabaseMealEntryRepository,
)
from macro_journal.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from macro_journal.adapters.supabase_user_repository import SupabaseUserRepository
from macro_journal.config import Settings
from macro_journal.services.foods import FoodService
from macro_journal.services.meals import MealEntryService
from macro_journal.services.recipes import RecipeService
from macro_journal.services.summary import SummaryService
from macro_journal.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_service: FoodService
    recipe_service: RecipeService
    meal_entry_service: MealEntryService
    summary_service: SummaryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    meal_entry_repository = SupabaseMealEntryRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        food_service=FoodService(food_repository),
        recipe_service=RecipeService(
            repository=recipe_repository,
            food_repository=food_repository,
        ),
        meal_entry_service=MealEntryService(
            repository=meal_entry_repository,
            food_repository=food_repository,
            recipe_repository=recipe_repository,
        ),
        summary_service=SummaryService(meal_entry_repository),
    )
