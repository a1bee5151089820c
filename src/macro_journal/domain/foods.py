"""Domain models for the shared food catalogue."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class BaseUnit(StrEnum):
    """Unit a food's nutrients are normalized against."""

    GRAMS = "g"
    MILLILITERS = "ml"


@dataclass(frozen=True)
class FoodItem:
    """A reusable nutrition reference with values per 100 base units."""

    id: UUID
    name: str
    base_unit: BaseUnit
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    serving_label: str | None = None
    serving_size: float | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class FoodLabel:
    """Nutrition label values as printed for one label serving."""

    name: str
    serving_size: float
    serving_unit: BaseUnit
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    serving_label: str | None = None
