"""Models for food image analysis results."""

import math

from pydantic import BaseModel, field_validator


class FoodEstimate(BaseModel):
    """Nutrition estimate returned by image analysis."""

    name: str = "Unknown Food"
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "Unknown Food"
        return str(value)

    @field_validator("calories", "protein", "carbs", "fats", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> float:
        if isinstance(value, bool):
            return 0.0
        if isinstance(value, int | float | str):
            try:
                number = float(value)
            except ValueError:
                return 0.0
            return number if math.isfinite(number) else 0.0
        return 0.0


FALLBACK_ESTIMATE = FoodEstimate(
    name="Unknown Food", calories=200, protein=5, carbs=20, fats=8
)
