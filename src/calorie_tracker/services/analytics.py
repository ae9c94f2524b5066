"""Chart data for weight and nutrition trends."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal
from zoneinfo import ZoneInfo

from calorie_tracker.domain.food import DailyLog
from calorie_tracker.domain.models import Goal, User, WeightLog
from calorie_tracker.domain.stats import DailyTotals, NutritionSummary, WeightSummary
from calorie_tracker.services.calculations import get_last_n_days

WeightRange = Literal["7days", "30days", "90days", "all"]

WEIGHT_RANGE_DAYS: dict[str, int] = {"7days": 7, "30days": 30, "90days": 90}


@dataclass
class AnalyticsService:
    """Computes trend data from the ledger's daily logs and user weight logs."""

    timezone: ZoneInfo | None = None

    def weight_summary(self, user: User, weight_range: WeightRange) -> WeightSummary:
        """Return weight logs in range and progress towards the target."""
        logs = self.weight_history(user.weight_logs, weight_range)
        return WeightSummary(
            logs=logs,
            progress=weight_progress(logs, user.goal, user.target_weight),
        )

    def weight_history(
        self, weight_logs: list[WeightLog], weight_range: WeightRange
    ) -> list[WeightLog]:
        """Return weight logs within the range, oldest first."""
        if weight_range == "all":
            return sorted(weight_logs, key=lambda log: log.date)
        dates = set(get_last_n_days(WEIGHT_RANGE_DAYS[weight_range], self.timezone))
        return sorted(
            (log for log in weight_logs if log.date in dates),
            key=lambda log: log.date,
        )

    def nutrition_summary(
        self, daily_logs: Mapping[str, DailyLog], days: int
    ) -> NutritionSummary:
        """Return per-day totals for the last n days with rounded averages."""
        daily = []
        for day in get_last_n_days(days, self.timezone):
            log = daily_logs.get(day)
            if log is None:
                daily.append(
                    DailyTotals(day=day, calories=0, protein=0, carbs=0, fats=0)
                )
                continue
            daily.append(
                DailyTotals(
                    day=day,
                    calories=log.total_calories,
                    protein=log.total_protein,
                    carbs=log.total_carbs,
                    fats=log.total_fats,
                )
            )

        if not daily:
            return NutritionSummary(daily=[], avg_calories=0, avg_protein=0)
        return NutritionSummary(
            daily=daily,
            avg_calories=round(sum(item.calories for item in daily) / len(daily)),
            avg_protein=round(sum(item.protein for item in daily) / len(daily)),
        )


def weight_progress(logs: list[WeightLog], goal: Goal, target_weight: float) -> float:
    """Return percent progress from the first to the last weight log.

    Cutting counts weight lost against the loss still needed, bulking counts
    weight gained, and maintaining counts how much closer the latest weight
    is to the target than the first one was. The result is clamped to 0-100.
    """
    if len(logs) < 2:  # noqa: PLR2004
        return 0.0
    first = logs[0].weight
    last = logs[-1].weight
    if goal == "cutting":
        numerator, denominator = first - last, first - target_weight
    elif goal == "bulking":
        numerator, denominator = last - first, target_weight - first
    else:
        max_deviation = abs(first - target_weight)
        numerator = max_deviation - abs(last - target_weight)
        denominator = max_deviation
    if denominator == 0:
        return 0.0
    return max(0.0, min(100.0, numerator * 100 / denominator))
