"""Pure nutrition, weight and date helpers."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from calorie_tracker.domain.models import Gender, Goal, UnitSystem

LB_TO_KG = 0.453592
KG_TO_LB = 2.20462
ACTIVITY_FACTOR = 1.55
GOAL_CALORIE_OFFSETS: dict[str, int] = {
    "bulking": 500,
    "cutting": -500,
    "maintaining": 0,
}
# No height is collected, so an average height per gender is assumed.
ESTIMATED_HEIGHT_CM: dict[str, float] = {"male": 175, "female": 163}


def calculate_daily_calories(
    age: int,
    weight: float,
    gender: Gender = "male",
    unit_system: UnitSystem = "metric",
) -> int:
    """Estimate daily calorie needs with the Mifflin-St Jeor equation."""
    weight_kg = weight * LB_TO_KG if unit_system == "imperial" else weight
    height_cm = ESTIMATED_HEIGHT_CM[gender]
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr += 5 if gender == "male" else -161
    return round(bmr * ACTIVITY_FACTOR)


def goal_calorie_offset(goal: Goal) -> int:
    """Return the calorie surplus or deficit applied for a goal."""
    return GOAL_CALORIE_OFFSETS.get(goal, 0)


def default_protein_target(weight: float, unit_system: UnitSystem) -> int:
    """Return grams of protein per day: 0.8 g/kg or 0.36 g/lb."""
    factor = 0.8 if unit_system == "metric" else 0.36
    return round(weight * factor)


def calculate_progress(current: float, target: float) -> float:
    """Return progress towards a target as a percentage capped at 100."""
    if target == 0:
        return 0
    return min(current / target * 100, 100)


def convert_weight(weight: float, from_unit: UnitSystem, to_unit: UnitSystem) -> float:
    """Convert between kilograms and pounds, rounded to one decimal."""
    if from_unit == to_unit:
        return weight
    factor = KG_TO_LB if from_unit == "metric" else LB_TO_KG
    return round(weight * factor, 1)


def get_weight_unit(unit_system: UnitSystem) -> str:
    """Return the weight unit label for a unit system."""
    return "kg" if unit_system == "metric" else "lb"


def format_date(value: date) -> str:
    """Format a date as an ISO calendar date string."""
    return value.isoformat()


def today(tz: ZoneInfo | None = None) -> date:
    """Return the current calendar date, local unless a timezone is given."""
    if tz is None:
        return date.today()
    return datetime.now(tz=tz).date()


def get_today_date(tz: ZoneInfo | None = None) -> str:
    """Return today's date as YYYY-MM-DD."""
    return format_date(today(tz))


def format_date_for_display(date_string: str) -> str:
    """Format an ISO date as a short label such as 'Mon, Oct 19'."""
    value = date.fromisoformat(date_string)
    return f"{value:%a}, {value:%b} {value.day}"


def get_last_n_days(n: int, tz: ZoneInfo | None = None) -> list[str]:
    """Return the last n dates ending today, oldest first."""
    end = today(tz)
    return [
        format_date(end - timedelta(days=offset)) for offset in range(n - 1, -1, -1)
    ]
