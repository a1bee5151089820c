"""Daily and weekly macro summaries."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from macro_journal.domain.meals import MealEntry
from macro_journal.domain.nutrition import Macros
from macro_journal.domain.stats import DailySummary, DayTotals, MealGroup, WeeklySummary
from macro_journal.services.macros import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    calculate_entry_macros,
    format_macros,
    macro_distribution,
    round_half_away,
    sum_macros,
)
from macro_journal.services.meals import (
    MealEntryRepository,
    group_by_meal_type,
    non_empty_groups,
)


@dataclass
class SummaryService:
    """Service for daily and weekly summaries of the meal log."""

    repository: MealEntryRepository

    def daily_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Return totals, distribution and per-meal breakdown for a day."""
        entries = self.repository.list_entries(user_id, day)
        return build_daily_summary(day, entries)

    def weekly_summary(
        self, user_id: UUID, end_day: date, days: int = 7
    ) -> WeeklySummary:
        """Return per-day totals and averages for the days ending at end_day."""
        span = max(days, 1)
        start = end_day - timedelta(days=span - 1)
        entries = self.repository.list_entries_between(user_id, start, end_day)
        return build_weekly_summary(start, end_day, entries)

    def summary_text(self, user_name: str, user_id: UUID, day: date) -> str:
        """Return a shareable plain-text summary of a day."""
        summary = self.daily_summary(user_id, day)
        return format_summary_text(user_name, summary)


def build_daily_summary(day: date, entries: list[MealEntry]) -> DailySummary:
    groups = group_by_meal_type(entries)
    meals = [
        MealGroup(meal_type=meal_type, entries=items, totals=sum_macros(items))
        for meal_type, items in groups.items()
    ]
    totals = sum_macros(entries)
    return DailySummary(
        day=day,
        totals=totals,
        percentages=macro_distribution(totals),
        meals=meals,
    )


def build_weekly_summary(
    start: date, end: date, entries: list[MealEntry]
) -> WeeklySummary:
    by_day: dict[date, list[MealEntry]] = {}
    for entry in entries:
        by_day.setdefault(entry.day, []).append(entry)

    daily = []
    current = start
    while current <= end:
        daily.append(
            DayTotals(day=current, macros=sum_macros(by_day.get(current, [])))
        )
        current += timedelta(days=1)

    totals = Macros.zero()
    for day_totals in daily:
        totals = totals + day_totals.macros
    return WeeklySummary(
        start=start,
        end=end,
        daily=daily,
        totals=totals,
        averages=totals.scaled(1 / max(len(daily), 1)),
    )


def format_summary_text(user_name: str, summary: DailySummary) -> str:
    """Format a daily summary for pasting into a chat."""
    totals = summary.totals
    lines = [
        f"Daily Summary - {summary.day:%A, %B} {summary.day.day}, {summary.day.year}",
        f"User: {user_name}",
        "",
        f"Calories: {_whole(totals.calories)}",
        f"Protein: {_tenths(totals.protein)}g "
        f"({_share(totals.protein, PROTEIN_KCAL_PER_G, totals.calories)}%)",
        f"Carbs: {_tenths(totals.carbs)}g "
        f"({_share(totals.carbs, CARBS_KCAL_PER_G, totals.calories)}%)",
        f"Fat: {_tenths(totals.fat)}g "
        f"({_share(totals.fat, FAT_KCAL_PER_G, totals.calories)}%)",
    ]
    groups = {group.meal_type: group.entries for group in summary.meals}
    for meal_type, entries in non_empty_groups(groups):
        lines.append("")
        lines.append(f"{str(meal_type).upper()}:")
        for entry in entries:
            macros = format_macros(calculate_entry_macros(entry))
            lines.append(
                f"  • {entry.display_name}: {_whole(macros.calories)} cal | "
                f"P: {_tenths(macros.protein)}g | C: {_tenths(macros.carbs)}g | "
                f"F: {_tenths(macros.fat)}g"
            )
    return "\n".join(lines)


def _share(grams: float, calories_per_gram: int, calories: float) -> int:
    # Share of stated calories, unlike macro_percentage.
    if calories <= 0:
        return 0
    return int(round_half_away(grams * calories_per_gram / calories * 100, 0))


def _whole(value: float) -> str:
    return f"{round_half_away(value, 0):.0f}"


def _tenths(value: float) -> str:
    return f"{round_half_away(value, 1):g}"
