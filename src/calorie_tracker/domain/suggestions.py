"""Domain models for meal suggestions."""

from calorie_tracker.domain.food import FoodEntryDraft


class MealSuggestion(FoodEntryDraft):
    """Suggested meal with preparation steps."""

    meal: str
    instructions: str
