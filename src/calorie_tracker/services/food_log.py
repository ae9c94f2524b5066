"""Nutrition ledger: food entries, daily totals and pinned meals."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4
from zoneinfo import ZoneInfo

from calorie_tracker.domain.food import (
    DailyLog,
    FoodEntry,
    FoodEntryDraft,
    FoodLogState,
    NutritionStats,
)
from calorie_tracker.services.calculations import get_today_date
from calorie_tracker.services.storage import (
    FOOD_STORAGE_KEY,
    StateRepository,
    load_state,
    save_state,
)

logger = logging.getLogger(__name__)

FREE_DAILY_ENTRY_LIMIT = 3
# Decimal places kept on daily totals so repeated add/remove does not drift.
TOTAL_PRECISION = 6
MEAL_LIMIT_MESSAGE = (
    "Free users are limited to {limit} meals per day. "
    "Upgrade to Pro for unlimited tracking."
)
PIN_LIMIT_MESSAGE = (
    "Pinning meals is a Pro feature. Upgrade to Pro to pin your favorite meals."
)


class ProStatus(Protocol):
    """Policy check for Pro-only features."""

    def is_pro(self) -> bool:
        """Return True when the caller has an active Pro subscription."""


@dataclass
class FoodLogService:
    """Ledger of food entries with incrementally maintained daily totals."""

    repository: StateRepository
    pro_status: ProStatus
    free_daily_entry_limit: int = FREE_DAILY_ENTRY_LIMIT
    timezone: ZoneInfo | None = None
    state: FoodLogState = field(init=False)

    def __post_init__(self) -> None:
        self.state = load_state(self.repository, FOOD_STORAGE_KEY, FoodLogState)

    @property
    def daily_logs(self) -> Mapping[str, DailyLog]:
        """Daily logs keyed by ISO date."""
        return self.state.daily_logs

    def can_add_entry(self) -> bool:
        """Return False when the free-tier daily meal limit is reached."""
        if self.pro_status.is_pro():
            return True
        return len(self.get_today_entries()) < self.free_daily_entry_limit

    def add_entry(self, draft: FoodEntryDraft) -> FoodEntry | None:
        """Log a food entry for today, or return None when over the limit."""
        if not self.can_add_entry():
            logger.warning(
                MEAL_LIMIT_MESSAGE.format(limit=self.free_daily_entry_limit)
            )
            return None

        today = get_today_date(self.timezone)
        entry = FoodEntry(
            **draft.model_dump(),
            id=str(uuid4()),
            date=today,
            created_at=datetime.now(tz=UTC),
        )
        log = self.state.daily_logs.get(today)
        if log is None:
            log = DailyLog(date=today)
        log.total_calories = _add(log.total_calories, entry.calories)
        log.total_protein = _add(log.total_protein, entry.protein)
        log.total_carbs = _add(log.total_carbs, entry.carbs or 0)
        log.total_fats = _add(log.total_fats, entry.fats or 0)
        log.entries.append(entry)
        self.state.daily_logs[today] = log
        self.state.entries.append(entry)
        self._persist()
        return entry

    def remove_entry(self, entry_id: str) -> bool:
        """Remove an entry and subtract it from its daily totals."""
        entry = self._find_entry(entry_id)
        if entry is None:
            return False

        log = self.state.daily_logs.get(entry.date)
        if log is None:
            logger.warning(
                "No daily log for %s while removing %s", entry.date, entry_id
            )
        else:
            log.total_calories = _subtract(log.total_calories, entry.calories, log)
            log.total_protein = _subtract(log.total_protein, entry.protein, log)
            log.total_carbs = _subtract(log.total_carbs, entry.carbs or 0, log)
            log.total_fats = _subtract(log.total_fats, entry.fats or 0, log)
            log.entries = [item for item in log.entries if item.id != entry_id]

        self.state.entries = [
            item for item in self.state.entries if item.id != entry_id
        ]
        self.state.pinned_entries = [
            pinned for pinned in self.state.pinned_entries if pinned != entry_id
        ]
        self._persist()
        return True

    def get_today_entries(self) -> list[FoodEntry]:
        """Return entries logged on today's date."""
        today = get_today_date(self.timezone)
        return [entry for entry in self.state.entries if entry.date == today]

    def get_today_stats(self) -> NutritionStats:
        """Return today's totals, zero when nothing is logged."""
        log = self.state.daily_logs.get(get_today_date(self.timezone))
        if log is None:
            return NutritionStats()
        return NutritionStats(
            calories=log.total_calories,
            protein=log.total_protein,
            carbs=log.total_carbs,
            fats=log.total_fats,
        )

    def get_daily_log(self, day: str) -> DailyLog | None:
        """Return the log for a date, if any entries were ever added."""
        return self.state.daily_logs.get(day)

    def list_log_dates(self) -> list[str]:
        """Return dates with a daily log, newest first."""
        return sorted(self.state.daily_logs, reverse=True)

    def toggle_pin_entry(self, entry_id: str) -> bool:
        """Flip the pinned flag; free users may unpin but not pin."""
        pinned = self.is_pinned(entry_id)
        if not pinned:
            if not self.pro_status.is_pro():
                logger.warning(PIN_LIMIT_MESSAGE)
                return False
            if self._find_entry(entry_id) is None:
                return False
            self.state.pinned_entries.append(entry_id)
        else:
            self.state.pinned_entries.remove(entry_id)
        self._persist()
        return not pinned

    def is_pinned(self, entry_id: str) -> bool:
        """Return True when the entry is pinned."""
        return entry_id in self.state.pinned_entries

    def get_pinned_entries(self) -> list[FoodEntry]:
        """Return pinned entries in the order they were pinned."""
        by_id = {entry.id: entry for entry in self.state.entries}
        return [by_id[pid] for pid in self.state.pinned_entries if pid in by_id]

    def clear_all_data(self) -> None:
        """Forget every entry, daily log and pin."""
        self.state = FoodLogState()
        self._persist()

    def _find_entry(self, entry_id: str) -> FoodEntry | None:
        for entry in self.state.entries:
            if entry.id == entry_id:
                return entry
        return None

    def _persist(self) -> None:
        save_state(self.repository, FOOD_STORAGE_KEY, self.state)


def _add(total: float, amount: float) -> float:
    return round(total + amount, TOTAL_PRECISION)


def _subtract(total: float, amount: float, log: DailyLog) -> float:
    remaining = round(total - amount, TOTAL_PRECISION)
    if remaining < 0:
        logger.warning("Clamping negative total for %s to zero", log.date)
        return 0.0
    return remaining
