"""Pre-generated daily meal suggestions for Pro users."""

from dataclasses import dataclass

from calorie_tracker.domain.food import FoodEntry, FoodEntryDraft
from calorie_tracker.domain.suggestions import MealSuggestion
from calorie_tracker.services.food_log import FoodLogService

DAILY_MEAL_SUGGESTIONS: dict[str, MealSuggestion] = {
    "breakfast": MealSuggestion(
        meal="breakfast",
        name="Greek Yogurt Protein Bowl",
        calories=380,
        protein=28,
        carbs=42,
        fats=12,
        ingredients=(
            "1 cup Greek yogurt (0% fat), 1 scoop vanilla protein powder, "
            "1/2 cup mixed berries, 1 tbsp honey, 2 tbsp granola, 1 tbsp chia seeds"
        ),
        instructions=(
            "1. Mix Greek yogurt with protein powder in a bowl until smooth.\n"
            "2. Top with berries, granola, and chia seeds.\n"
            "3. Drizzle with honey and serve immediately."
        ),
    ),
    "lunch": MealSuggestion(
        meal="lunch",
        name="Mediterranean Chicken Wrap",
        calories=450,
        protein=35,
        carbs=38,
        fats=18,
        ingredients=(
            "4 oz grilled chicken breast, 1 whole wheat tortilla, 2 tbsp hummus, "
            "1/4 cup diced cucumber, 1/4 cup diced tomatoes, 2 tbsp feta cheese, "
            "1 cup mixed greens, 1 tbsp olive oil, 1 tsp lemon juice"
        ),
        instructions=(
            "1. Spread hummus on the tortilla.\n"
            "2. Layer with mixed greens, grilled chicken, cucumber, tomatoes, "
            "and feta cheese.\n"
            "3. Drizzle with olive oil and lemon juice.\n"
            "4. Roll up tightly and cut in half before serving."
        ),
    ),
    "dinner": MealSuggestion(
        meal="dinner",
        name="Baked Salmon with Quinoa and Roasted Vegetables",
        calories=520,
        protein=42,
        carbs=35,
        fats=22,
        ingredients=(
            "5 oz salmon fillet, 1/2 cup cooked quinoa, 1 cup mixed vegetables "
            "(broccoli, bell peppers, zucchini), 1 tbsp olive oil, "
            "1 clove garlic (minced), 1 tsp dried herbs, 1/2 lemon, "
            "salt and pepper to taste"
        ),
        instructions=(
            "1. Preheat oven to 400°F (200°C).\n"
            "2. Place salmon on a baking sheet, season with salt, pepper, "
            "and a squeeze of lemon.\n"
            "3. Toss vegetables with olive oil, garlic, herbs, salt, and pepper.\n"
            "4. Spread vegetables on another baking sheet.\n"
            "5. Bake salmon for 12-15 minutes and vegetables for 20-25 minutes.\n"
            "6. Serve salmon over cooked quinoa with roasted vegetables on the side."
        ),
    ),
}


@dataclass
class SuggestionService:
    """Lists suggested meals and logs them to the ledger."""

    food_log: FoodLogService

    def daily_suggestions(self) -> list[MealSuggestion]:
        return list(DAILY_MEAL_SUGGESTIONS.values())

    def get_suggestion(self, meal: str) -> MealSuggestion | None:
        return DAILY_MEAL_SUGGESTIONS.get(meal)

    def log_suggestion(self, meal: str) -> FoodEntry | None:
        """Add a suggested meal to today's log; None if unknown or over limit."""
        suggestion = self.get_suggestion(meal)
        if suggestion is None:
            return None
        draft = FoodEntryDraft.model_validate(
            suggestion.model_dump(exclude={"meal", "instructions"})
        )
        return self.food_log.add_entry(draft)
