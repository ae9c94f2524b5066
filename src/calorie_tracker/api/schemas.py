"""Pydantic request and response models for the HTTP API."""

import base64
import binascii
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from calorie_tracker.domain.food import (
    DailyLog,
    FoodEntry,
    FoodEntryDraft,
    NutritionStats,
)
from calorie_tracker.domain.models import Gender, Goal, UnitSystem, User, WeightLog


class OnboardingRequest(BaseModel):
    """Profile details collected during onboarding."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    age: int = Field(gt=0, lt=150)
    weight: float = Field(gt=0)
    target_weight: float = Field(gt=0)
    goal: Goal
    unit_system: UnitSystem = "metric"
    gender: Gender = "male"


class LoginRequest(BaseModel):
    """Credentials for the local user."""

    username: str
    password: str


class WeightRequest(BaseModel):
    weight: float = Field(gt=0)


class GoalRequest(BaseModel):
    goal: Goal


class TargetCaloriesRequest(BaseModel):
    target_calories: int = Field(gt=0)


class TargetProteinRequest(BaseModel):
    target_protein: int = Field(gt=0)


class FoodEntryRequest(BaseModel):
    """Manually entered food; blank optional fields are treated as absent."""

    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fats: float | None = Field(default=None, ge=0)
    ingredients: str | None = None
    image_uri: str | None = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Food name is required")
        return cleaned

    @field_validator("ingredients", "image_uri")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    def to_draft(self) -> FoodEntryDraft:
        return FoodEntryDraft.model_validate(self.model_dump())


class ScanRequest(BaseModel):
    """Base64-encoded photo of a meal, bare or as a data URL."""

    image_base64: str = Field(min_length=1)

    @field_validator("image_base64")
    @classmethod
    def _check_base64(cls, value: str) -> str:
        if value.startswith("data:"):
            value = value.partition(",")[2]
        value = value.strip()
        try:
            decoded = base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError("Image must be base64 encoded") from exc
        if not decoded:
            raise ValueError("Image is empty")
        return value


class PublicUser(BaseModel):
    """User profile as returned to clients; the password never leaves storage."""

    username: str
    name: str
    age: int
    weight: float
    target_weight: float
    goal: Goal
    target_calories: int
    target_protein: int | None
    unit_system: UnitSystem
    gender: Gender
    weight_logs: list[WeightLog]

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls.model_validate(user.model_dump(exclude={"password"}))


class ProfileResponse(BaseModel):
    """User profile with derived display values."""

    user: PublicUser
    weight_unit: str
    protein_target: int | None
    is_onboarded: bool
    is_logged_in: bool


class TodayResponse(BaseModel):
    """Today's entries, totals and calorie progress."""

    date: str
    entries: list[FoodEntry]
    stats: NutritionStats
    calorie_progress: float
    can_add_entry: bool


class PinResponse(BaseModel):
    id: str
    pinned: bool


class HistoryDay(BaseModel):
    """A daily log with a display label."""

    label: str
    log: DailyLog


class WeightAnalyticsResponse(BaseModel):
    logs: list[WeightLog]
    progress: float
    weight_unit: str


class SubscriptionResponse(BaseModel):
    is_pro: bool
    subscription_date: datetime | None
