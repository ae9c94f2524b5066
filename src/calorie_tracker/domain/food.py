"""Domain models for food logging."""

from datetime import datetime

from pydantic import BaseModel, Field


class FoodEntryDraft(BaseModel):
    """Food entry fields supplied by the caller before logging."""

    name: str
    calories: float
    protein: float
    carbs: float | None = None
    fats: float | None = None
    ingredients: str | None = None
    image_uri: str | None = None


class FoodEntry(FoodEntryDraft):
    """Logged food entry attributed to the date it was created on."""

    id: str
    date: str
    created_at: datetime


class DailyLog(BaseModel):
    """Running nutrition totals and entries for one calendar date."""

    date: str
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    entries: list[FoodEntry] = Field(default_factory=list)


class FoodLogState(BaseModel):
    """Persisted record for the nutrition ledger."""

    entries: list[FoodEntry] = Field(default_factory=list)
    daily_logs: dict[str, DailyLog] = Field(default_factory=dict)
    pinned_entries: list[str] = Field(default_factory=list)


class NutritionStats(BaseModel):
    """Macro totals for a single day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
