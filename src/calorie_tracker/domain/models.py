"""Domain models for user profiles."""

from typing import Literal

from pydantic import BaseModel, Field

Goal = Literal["bulking", "cutting", "maintaining"]
UnitSystem = Literal["metric", "imperial"]
Gender = Literal["male", "female"]


class WeightLog(BaseModel):
    """Body weight recorded for a calendar date."""

    date: str
    weight: float


class User(BaseModel):
    """Single local user profile with computed targets."""

    username: str
    password: str
    name: str
    age: int
    weight: float
    target_weight: float
    goal: Goal
    target_calories: int
    target_protein: int | None = None
    unit_system: UnitSystem = "metric"
    gender: Gender = "male"
    weight_logs: list[WeightLog] = Field(default_factory=list)


class UserState(BaseModel):
    """Persisted record for the user profile store."""

    user: User | None = None
    is_onboarded: bool = False
    is_logged_in: bool = False
