"""Domain models for analytics."""

from dataclasses import dataclass

from calorie_tracker.domain.models import WeightLog


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: str
    calories: float
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class NutritionSummary:
    """Per-day totals and averages over a date range."""

    daily: list[DailyTotals]
    avg_calories: int
    avg_protein: int


@dataclass(frozen=True)
class WeightSummary:
    """Weight logs within a range and progress towards the target weight."""

    logs: list[WeightLog]
    progress: float
