"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from macro_journal.adapters.rows import parse_food, parse_recipe
from macro_journal.config import Settings
from macro_journal.containers import AppContainer
from macro_journal.domain.foods import FoodItem
from macro_journal.domain.meals import MealEntry, MealType, NewMealEntry
from macro_journal.domain.models import AppUser
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.recipes import IngredientLine, Recipe, RecipeIngredient
from macro_journal.services.foods import FoodRepository, FoodService
from macro_journal.services.meals import MealEntryRepository, MealEntryService
from macro_journal.services.recipes import RecipeRepository, RecipeService
from macro_journal.services.summary import SummaryService
from macro_journal.services.users import UserRepository, UserService

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class _Clock:
    """Hands out strictly increasing timestamps."""

    ticks: int = 0

    def now(self) -> datetime:
        self.ticks += 1
        return _EPOCH + timedelta(seconds=self.ticks)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, AppUser] = field(default_factory=dict)

    def list_users(self) -> list[AppUser]:
        return sorted(self.users.values(), key=lambda user: user.name)

    def get_user(self, user_id: UUID) -> AppUser | None:
        return self.users.get(user_id)

    def create_user(self, name: str) -> AppUser:
        user = AppUser(id=uuid4(), name=name, created_at=datetime.now(tz=UTC))
        self.users[user.id] = user
        return user


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalogue that can see recipe and meal references."""

    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    recipes: "InMemoryRecipeRepository | None" = None
    meals: "InMemoryMealEntryRepository | None" = None
    clock: _Clock = field(default_factory=_Clock)

    def list_foods(self) -> list[FoodItem]:
        return sorted(
            (parse_food(row) for row in self.rows.values()), key=lambda f: f.name
        )

    def search_foods(self, term: str, limit: int) -> list[FoodItem]:
        matches = [
            food for food in self.list_foods() if term.lower() in food.name.lower()
        ]
        return matches[:limit]

    def get_food(self, food_id: UUID) -> FoodItem | None:
        row = self.rows.get(str(food_id))
        return parse_food(row) if row else None

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        return [
            parse_food(self.rows[str(food_id)])
            for food_id in food_ids
            if str(food_id) in self.rows
        ]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        food_id = str(uuid4())
        self.rows[food_id] = {
            **payload,
            "id": food_id,
            "created_at": self.clock.now().isoformat(),
        }
        return parse_food(self.rows[food_id])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        self.rows[str(food_id)].update(payload)
        return parse_food(self.rows[str(food_id)])

    def delete_food(self, food_id: UUID) -> None:
        self.rows.pop(str(food_id), None)

    def list_recipe_names_using_food(self, food_id: UUID, limit: int) -> list[str]:
        if self.recipes is None:
            return []
        names = []
        for row in self.recipes.ingredients.values():
            recipe = self.recipes.rows.get(str(row["recipe_id"]))
            if row["food_id"] == str(food_id) and recipe and recipe.get("name"):
                names.append(str(recipe["name"]))
        return names[:limit]

    def is_food_in_recipes(self, food_id: UUID) -> bool:
        if self.recipes is None:
            return False
        return any(
            row["food_id"] == str(food_id)
            for row in self.recipes.ingredients.values()
        )

    def is_food_logged(self, food_id: UUID) -> bool:
        if self.meals is None:
            return False
        return any(entry.food_id == food_id for entry in self.meals.entries.values())


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe store with ingredient rows joined to foods."""

    foods: InMemoryFoodRepository
    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    ingredients: dict[str, dict[str, object]] = field(default_factory=dict)
    clock: _Clock = field(default_factory=_Clock)
    fail_next_insert: bool = False

    def list_recipes(self, user_id: UUID | None = None) -> list[Recipe]:
        return [
            parse_recipe(row)
            for row in self.rows.values()
            if user_id is None or row.get("user_id") == str(user_id)
        ]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        row = self.rows.get(str(recipe_id))
        return parse_recipe(row) if row else None

    def list_batches(self, base_recipe_id: UUID) -> list[Recipe]:
        return [
            parse_recipe(row)
            for row in self.rows.values()
            if row.get("parent_recipe_id") == str(base_recipe_id)
        ]

    def list_ingredients(self, recipe_id: UUID) -> list[RecipeIngredient]:
        return [
            RecipeIngredient(
                id=UUID(ingredient_id),
                recipe_id=recipe_id,
                food_id=UUID(str(row["food_id"])),
                quantity=float(row["quantity"]),
                food=self.foods.get_food(UUID(str(row["food_id"]))),
            )
            for ingredient_id, row in self.ingredients.items()
            if row["recipe_id"] == str(recipe_id)
        ]

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        recipe_id = str(uuid4())
        self.rows[recipe_id] = {
            **payload,
            "id": recipe_id,
            "created_at": self.clock.now().isoformat(),
        }
        return parse_recipe(self.rows[recipe_id])

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        self.rows[str(recipe_id)].update(payload)
        return parse_recipe(self.rows[str(recipe_id)])

    def delete_recipe(self, recipe_id: UUID) -> None:
        self.rows.pop(str(recipe_id), None)
        self.delete_ingredients(recipe_id)

    def insert_ingredients(self, recipe_id: UUID, lines: list[IngredientLine]) -> None:
        if self.fail_next_insert:
            self.fail_next_insert = False
            raise RuntimeError("ingredient insert failed")
        for line in lines:
            self.ingredients[str(uuid4())] = {
                "recipe_id": str(recipe_id),
                "food_id": str(line.food_id),
                "quantity": line.quantity,
            }

    def delete_ingredients(self, recipe_id: UUID) -> None:
        for ingredient_id in [
            key
            for key, row in self.ingredients.items()
            if row["recipe_id"] == str(recipe_id)
        ]:
            del self.ingredients[ingredient_id]

    def update_totals(self, recipe_id: UUID, totals: Macros) -> Recipe:
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


@dataclass
class InMemoryMealEntryRepository(MealEntryRepository):
    """In-memory meal log that attaches food and recipe details on read."""

    foods: InMemoryFoodRepository
    recipes: InMemoryRecipeRepository
    entries: dict[UUID, MealEntry] = field(default_factory=dict)
    clock: _Clock = field(default_factory=_Clock)

    def list_entries(self, user_id: UUID, day: date) -> list[MealEntry]:
        return [
            self._with_details(entry)
            for entry in self.entries.values()
            if entry.user_id == user_id and entry.day == day
        ]

    def list_entries_between(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealEntry]:
        matches = [
            entry
            for entry in self.entries.values()
            if entry.user_id == user_id and start <= entry.day <= end
        ]
        return [
            self._with_details(entry)
            for entry in sorted(matches, key=lambda item: item.day)
        ]

    def get_entry(self, entry_id: UUID) -> MealEntry | None:
        entry = self.entries.get(entry_id)
        return self._with_details(entry) if entry else None

    def create_entries(self, entries: list[NewMealEntry]) -> list[MealEntry]:
        created = []
        for new in entries:
            entry = MealEntry(
                id=uuid4(),
                user_id=new.user_id,
                day=new.day,
                meal_type=new.meal_type,
                quantity=new.quantity,
                quantity_type=new.quantity_type,
                food_id=new.food_id,
                recipe_id=new.recipe_id,
                notes=new.notes,
                created_at=self.clock.now(),
            )
            self.entries[entry.id] = entry
            created.append(self._with_details(entry))
        return created

    def update_entry(self, entry_id: UUID, payload: dict[str, object]) -> MealEntry:
        changes = dict(payload)
        if "meal_type" in changes:
            changes["meal_type"] = MealType(str(changes["meal_type"]))
        self.entries[entry_id] = replace(self.entries[entry_id], **changes)
        return self._with_details(self.entries[entry_id])

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def _with_details(self, entry: MealEntry) -> MealEntry:
        return replace(
            entry,
            food=self.foods.get_food(entry.food_id) if entry.food_id else None,
            recipe=(
                self.recipes.get_recipe(entry.recipe_id) if entry.recipe_id else None
            ),
        )


@dataclass
class Repositories:
    """Linked in-memory repositories sharing one set of rows."""

    users: InMemoryUserRepository
    foods: InMemoryFoodRepository
    recipes: InMemoryRecipeRepository
    meals: InMemoryMealEntryRepository


def build_repositories() -> Repositories:
    foods = InMemoryFoodRepository()
    recipes = InMemoryRecipeRepository(foods=foods)
    meals = InMemoryMealEntryRepository(foods=foods, recipes=recipes)
    foods.recipes = recipes
    foods.meals = meals
    return Repositories(
        users=InMemoryUserRepository(), foods=foods, recipes=recipes, meals=meals
    )


def add_food(  # noqa: PLR0913
    repository: InMemoryFoodRepository,
    name: str,
    calories: float,
    protein: float = 0.0,
    carbs: float = 0.0,
    fat: float = 0.0,
    fiber: float | None = None,
    base_unit: str = "g",
    serving_size: float | None = None,
) -> FoodItem:
    """Store a food with per-100-unit values."""
    return repository.create_food(
        {
            "name": name,
            "base_unit": base_unit,
            "calories": calories,
            "protein": protein,
            "carbs": carbs,
            "fat": fat,
            "fiber": fiber,
            "serving_size": serving_size,
        }
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
    )


@pytest.fixture
def repositories() -> Repositories:
    return build_repositories()


@pytest.fixture
def food_service(repositories: Repositories) -> FoodService:
    return FoodService(repositories.foods)


@pytest.fixture
def recipe_service(repositories: Repositories) -> RecipeService:
    return RecipeService(
        repository=repositories.recipes, food_repository=repositories.foods
    )


@pytest.fixture
def meal_entry_service(repositories: Repositories) -> MealEntryService:
    return MealEntryService(
        repository=repositories.meals,
        food_repository=repositories.foods,
        recipe_repository=repositories.recipes,
    )


@pytest.fixture
def container(settings: Settings, repositories: Repositories) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(repositories.users),
        food_service=FoodService(repositories.foods),
        recipe_service=RecipeService(
            repository=repositories.recipes, food_repository=repositories.foods
        ),
        meal_entry_service=MealEntryService(
            repository=repositories.meals,
            food_repository=repositories.foods,
            recipe_repository=repositories.recipes,
        ),
        summary_service=SummaryService(repositories.meals),
    )
