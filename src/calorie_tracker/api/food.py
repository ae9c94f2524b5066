"""Food logging, history, analytics and Pro food features."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from calorie_tracker.api.schemas import (
    FoodEntryRequest,
    HistoryDay,
    PinResponse,
    ScanRequest,
    TodayResponse,
    WeightAnalyticsResponse,
)
from calorie_tracker.domain.food import DailyLog, FoodEntry, NutritionStats
from calorie_tracker.domain.stats import NutritionSummary
from calorie_tracker.domain.suggestions import MealSuggestion
from calorie_tracker.domain.vision import FoodEstimate
from calorie_tracker.services.analytics import WeightRange
from calorie_tracker.services.calculations import (
    calculate_progress,
    format_date_for_display,
    get_today_date,
    get_weight_unit,
)
from calorie_tracker.services.food_log import MEAL_LIMIT_MESSAGE, PIN_LIMIT_MESSAGE
from calorie_tracker.services.vision import FoodAnalysisError

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["food"])

PRO_FEATURE_MESSAGE = "This is a Pro feature. Upgrade to Pro to use it."


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _require_pro(container: AppContainer) -> None:
    if not container.subscription_service.is_pro():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=PRO_FEATURE_MESSAGE
        )


def _meal_limit_error(container: AppContainer) -> HTTPException:
    limit = container.food_log_service.free_daily_entry_limit
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=MEAL_LIMIT_MESSAGE.format(limit=limit),
    )


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def add_entry(payload: FoodEntryRequest, request: Request) -> FoodEntry:
    """Log a food entry for today."""
    container = _container(request)
    ledger = container.food_log_service
    if not ledger.can_add_entry():
        raise _meal_limit_error(container)
    entry = ledger.add_entry(payload.to_draft())
    if entry is None:
        raise _meal_limit_error(container)
    return entry


@router.get("/entries/today")
async def today(request: Request) -> TodayResponse:
    """Return today's entries with totals and progress to the calorie target."""
    container = _container(request)
    ledger = container.food_log_service
    stats = ledger.get_today_stats()
    user = container.user_service.user
    target = user.target_calories if user else 0
    return TodayResponse(
        date=get_today_date(ledger.timezone),
        entries=ledger.get_today_entries(),
        stats=stats,
        calorie_progress=calculate_progress(stats.calories, target),
        can_add_entry=ledger.can_add_entry(),
    )


@router.get("/entries/pinned")
async def pinned_entries(request: Request) -> list[FoodEntry]:
    return _container(request).food_log_service.get_pinned_entries()


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_entry(entry_id: str, request: Request) -> None:
    """Remove an entry; unknown ids are ignored."""
    _container(request).food_log_service.remove_entry(entry_id)


@router.delete("/entries", status_code=status.HTTP_204_NO_CONTENT)
async def clear_entries(request: Request) -> None:
    """Wipe all food data; the user profile is kept."""
    _container(request).food_log_service.clear_all_data()


@router.post("/entries/{entry_id}/pin")
async def toggle_pin(entry_id: str, request: Request) -> PinResponse:
    """Pin or unpin an entry. Pinning requires Pro."""
    container = _container(request)
    ledger = container.food_log_service
    if not ledger.is_pinned(entry_id) and not container.subscription_service.is_pro():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=PIN_LIMIT_MESSAGE
        )
    pinned = ledger.toggle_pin_entry(entry_id)
    return PinResponse(id=entry_id, pinned=pinned)


@router.get("/stats/today")
async def today_stats(request: Request) -> NutritionStats:
    return _container(request).food_log_service.get_today_stats()


@router.get("/history")
async def history(request: Request) -> list[HistoryDay]:
    """Return every daily log, newest first."""
    ledger = _container(request).food_log_service
    days = []
    for day in ledger.list_log_dates():
        log = ledger.get_daily_log(day)
        if log is not None:
            days.append(HistoryDay(label=format_date_for_display(day), log=log))
    return days


@router.get("/history/{day}")
async def history_day(day: str, request: Request) -> DailyLog:
    log = _container(request).food_log_service.get_daily_log(day)
    if log is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Nothing logged that day."
        )
    return log


@router.get("/analytics/weight")
async def weight_analytics(
    request: Request, weight_range: WeightRange = Query("7days", alias="range")
) -> WeightAnalyticsResponse:
    """Return weight logs in range and progress towards the target weight."""
    container = _container(request)
    user = container.user_service.user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No user profile yet."
        )
    summary = container.analytics_service.weight_summary(user, weight_range)
    return WeightAnalyticsResponse(
        logs=summary.logs,
        progress=summary.progress,
        weight_unit=get_weight_unit(user.unit_system),
    )


@router.get("/analytics/nutrition")
async def nutrition_analytics(
    request: Request, days: int = Query(7, ge=1, le=365)
) -> NutritionSummary:
    """Return daily nutrition totals and averages for the last n days."""
    container = _container(request)
    return container.analytics_service.nutrition_summary(
        container.food_log_service.daily_logs, days
    )


@router.post("/scan")
async def scan_food(payload: ScanRequest, request: Request) -> FoodEstimate:
    """Estimate nutrition from a meal photo."""
    container = _container(request)
    _require_pro(container)
    try:
        return await container.food_analysis_service.analyze_base64(
            payload.image_base64
        )
    except FoodAnalysisError as exc:
        logger.warning("Scan failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to analyze the image. Please try again or add manually.",
        ) from exc


@router.get("/suggestions")
async def suggestions(request: Request) -> list[MealSuggestion]:
    container = _container(request)
    _require_pro(container)
    return container.suggestion_service.daily_suggestions()


@router.post("/suggestions/{meal}", status_code=status.HTTP_201_CREATED)
async def log_suggestion(meal: str, request: Request) -> FoodEntry:
    """Add a suggested meal to today's log."""
    container = _container(request)
    _require_pro(container)
    if container.suggestion_service.get_suggestion(meal) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Unknown meal."
        )
    entry = container.suggestion_service.log_suggestion(meal)
    if entry is None:
        raise _meal_limit_error(container)
    return entry
