"""Domain models for summaries."""

from dataclasses import dataclass
from datetime import date

from macro_journal.domain.meals import MealEntry, MealType
from macro_journal.domain.nutrition import MacroPercentages, Macros


@dataclass(frozen=True)
class DayTotals:
    """Total macros logged on a day."""

    day: date
    macros: Macros


@dataclass(frozen=True)
class MealGroup:
    """Entries of one meal type with their combined macros."""

    meal_type: MealType
    entries: list[MealEntry]
    totals: Macros


@dataclass(frozen=True)
class DailySummary:
    """Totals, distribution and per-meal breakdown for a day."""

    day: date
    totals: Macros
    percentages: MacroPercentages
    meals: list[MealGroup]


@dataclass(frozen=True)
class WeeklySummary:
    """Per-day totals with period totals and daily averages."""

    start: date
    end: date
    daily: list[DayTotals]
    totals: Macros
    averages: Macros
