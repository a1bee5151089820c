"""Tests for daily and weekly summaries."""

from datetime import date, timedelta
from uuid import uuid4

import pytest

from macro_journal.domain.meals import MealType
from macro_journal.services.summary import SummaryService
from tests.conftest import add_food

USER_ID = uuid4()
MONDAY = date(2024, 3, 4)


@pytest.fixture
def summary_service(repositories) -> SummaryService:
    return SummaryService(repositories.meals)


@pytest.fixture
def logged_day(meal_entry_service, repositories) -> None:
    oats = add_food(
        repositories.foods, "Oats", calories=389, protein=16.9, carbs=66.3, fat=6.9
    )
    chicken = add_food(
        repositories.foods, "Chicken breast", calories=165, protein=31, fat=3.6
    )
    meal_entry_service.log_food(
        user_id=USER_ID,
        day=MONDAY,
        meal_type=MealType.BREAKFAST,
        food_id=oats.id,
        quantity=40,
    )
    meal_entry_service.log_food(
        user_id=USER_ID,
        day=MONDAY,
        meal_type=MealType.LUNCH,
        food_id=chicken.id,
        quantity=150,
    )
    meal_entry_service.log_food(
        user_id=USER_ID,
        day=MONDAY - timedelta(days=3),
        meal_type=MealType.DINNER,
        food_id=chicken.id,
        quantity=200,
    )


@pytest.mark.usefixtures("logged_day")
def test_daily_summary(summary_service) -> None:
    summary = summary_service.daily_summary(USER_ID, MONDAY)

    assert summary.totals.calories == pytest.approx(403.1)
    assert summary.totals.protein == pytest.approx(53.26)
    assert (
        summary.percentages.protein,
        summary.percentages.carbs,
        summary.percentages.fat,
    ) == (54, 27, 19)
    assert [group.meal_type for group in summary.meals] == list(MealType)
    lunch = summary.meals[1]
    assert lunch.totals.calories == pytest.approx(247.5)
    assert summary.meals[2].entries == []


def test_daily_summary_of_empty_day(summary_service) -> None:
    summary = summary_service.daily_summary(USER_ID, MONDAY)

    assert summary.totals.calories == 0
    assert summary.percentages.protein == 0


@pytest.mark.usefixtures("logged_day")
def test_weekly_summary(summary_service) -> None:
    summary = summary_service.weekly_summary(USER_ID, MONDAY, days=7)

    assert summary.start == date(2024, 2, 27)
    assert summary.end == MONDAY
    assert [day.day for day in summary.daily] == [
        date(2024, 2, 27) + timedelta(days=offset) for offset in range(7)
    ]
    assert summary.daily[3].macros.calories == pytest.approx(330)
    assert summary.daily[0].macros.calories == 0
    assert summary.totals.calories == pytest.approx(733.1)
    assert summary.averages.calories == pytest.approx(733.1 / 7)


@pytest.mark.usefixtures("logged_day")
def test_summary_text(summary_service) -> None:
    text = summary_service.summary_text("Sam", USER_ID, MONDAY)

    assert text == "\n".join(
        [
            "Daily Summary - Monday, March 4, 2024",
            "User: Sam",
            "",
            "Calories: 403",
            "Protein: 53.3g (53%)",
            "Carbs: 26.5g (26%)",
            "Fat: 8.2g (18%)",
            "",
            "BREAKFAST:",
            "  • Oats: 156 cal | P: 6.8g | C: 26.5g | F: 2.8g",
            "",
            "LUNCH:",
            "  • Chicken breast: 248 cal | P: 46.5g | C: 0g | F: 5.4g",
        ]
    )


def test_summary_text_of_empty_day(summary_service) -> None:
    text = summary_service.summary_text("Sam", USER_ID, MONDAY)

    assert text.splitlines()[3:] == [
        "Calories: 0",
        "Protein: 0g (0%)",
        "Carbs: 0g (0%)",
        "Fat: 0g (0%)",
    ]
