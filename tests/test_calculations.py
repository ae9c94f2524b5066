"""Tests for calculation helpers."""

from datetime import date, timedelta

from calorie_tracker.services.calculations import (
    calculate_daily_calories,
    calculate_progress,
    convert_weight,
    default_protein_target,
    format_date_for_display,
    get_last_n_days,
    get_today_date,
    get_weight_unit,
    goal_calorie_offset,
)


def test_calculate_daily_calories_male_metric() -> None:
    # (10*80 + 6.25*175 - 5*30 + 5) * 1.55
    assert calculate_daily_calories(30, 80) == 2711


def test_calculate_daily_calories_female_uses_shorter_height() -> None:
    # (10*60 + 6.25*163 - 5*25 - 161) * 1.55
    assert calculate_daily_calories(25, 60, gender="female") == 2066


def test_calculate_daily_calories_converts_pounds() -> None:
    assert calculate_daily_calories(30, 176, unit_system="imperial") == 2708


def test_goal_offsets() -> None:
    assert goal_calorie_offset("bulking") == 500
    assert goal_calorie_offset("cutting") == -500
    assert goal_calorie_offset("maintaining") == 0


def test_default_protein_target_by_unit_system() -> None:
    assert default_protein_target(80, "metric") == 64
    assert default_protein_target(180, "imperial") == 65


def test_calculate_progress() -> None:
    assert calculate_progress(50, 200) == 25
    assert calculate_progress(300, 200) == 100
    assert calculate_progress(10, 0) == 0


def test_convert_weight_rounds_to_one_decimal() -> None:
    assert convert_weight(80, "metric", "imperial") == 176.4
    assert convert_weight(176.4, "imperial", "metric") == 80.0
    assert convert_weight(72.25, "metric", "metric") == 72.25


def test_get_weight_unit() -> None:
    assert get_weight_unit("metric") == "kg"
    assert get_weight_unit("imperial") == "lb"


def test_format_date_for_display() -> None:
    assert format_date_for_display("2024-01-05") == "Fri, Jan 5"


def test_get_last_n_days_is_consecutive_and_ends_today() -> None:
    days = get_last_n_days(7)

    assert len(days) == 7
    assert len(set(days)) == 7
    assert days[-1] == get_today_date()
    parsed = [date.fromisoformat(day) for day in days]
    for earlier, later in zip(parsed, parsed[1:], strict=False):
        assert later - earlier == timedelta(days=1)


def test_get_last_n_days_single_day() -> None:
    assert get_last_n_days(1) == [get_today_date()]
