"""Tests for the JSON file state repository."""

import json

from calorie_tracker.adapters.json_state_repository import JsonFileStateRepository
from calorie_tracker.services.food_log import FoodLogService
from tests.conftest import FakeProStatus, make_draft


def test_save_and_load_round_trip(tmp_path) -> None:
    repository = JsonFileStateRepository(tmp_path / "state")

    repository.save("subscription-storage", {"is_pro": True})

    assert repository.load("subscription-storage") == {"is_pro": True}
    stored = json.loads((tmp_path / "state" / "subscription-storage.json").read_text())
    assert stored == {"is_pro": True}


def test_missing_file_loads_none(tmp_path) -> None:
    assert JsonFileStateRepository(tmp_path).load("user-storage") is None


def test_corrupt_file_loads_none(tmp_path) -> None:
    (tmp_path / "food-storage.json").write_text("{not json", encoding="utf-8")

    assert JsonFileStateRepository(tmp_path).load("food-storage") is None


def test_non_object_file_loads_none(tmp_path) -> None:
    (tmp_path / "food-storage.json").write_text("[]", encoding="utf-8")

    assert JsonFileStateRepository(tmp_path).load("food-storage") is None


def test_ledger_persists_to_disk(tmp_path) -> None:
    repository = JsonFileStateRepository(tmp_path)
    ledger = FoodLogService(repository=repository, pro_status=FakeProStatus())
    entry = ledger.add_entry(make_draft(calories=410, protein=30))
    assert entry is not None

    reloaded = FoodLogService(
        repository=JsonFileStateRepository(tmp_path), pro_status=FakeProStatus()
    )

    assert reloaded.get_today_stats().calories == 410
    assert reloaded.get_today_entries()[0].created_at == entry.created_at
