"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Macros:
    """Macronutrient values for a portion, a meal or a day."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float = 0.0

    @classmethod
    def zero(cls) -> "Macros":
        """Return an all-zero macro record."""
        return cls(calories=0.0, protein=0.0, carbs=0.0, fat=0.0, fiber=0.0)

    def scaled(self, factor: float) -> "Macros":
        """Return every nutrient multiplied by factor."""
        return Macros(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
            fiber=self.fiber * factor,
        )

    def __add__(self, other: "Macros") -> "Macros":
        return Macros(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            fiber=self.fiber + other.fiber,
        )


@dataclass(frozen=True)
class MacroPercentages:
    """Share of macro calories contributed by each macronutrient."""

    protein: int
    carbs: int
    fat: int
