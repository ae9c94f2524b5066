"""Shared test fixtures."""

import copy
import json
from dataclasses import dataclass, field

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, build_container
from calorie_tracker.domain.food import FoodEntryDraft
from calorie_tracker.services.food_log import FoodLogService, ProStatus
from calorie_tracker.services.storage import StateRepository
from calorie_tracker.services.subscription import SubscriptionService
from calorie_tracker.services.users import UserService
from calorie_tracker.services.vision import FoodAnalysisService, VisionClient


@dataclass
class InMemoryStateRepository(StateRepository):
    """In-memory state repository for tests."""

    records: dict[str, dict[str, object]] = field(default_factory=dict)
    saves: int = 0

    def load(self, key: str) -> dict[str, object] | None:
        record = self.records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def save(self, key: str, data: dict[str, object]) -> None:
        self.records[key] = copy.deepcopy(data)
        self.saves += 1


@dataclass
class FakeProStatus(ProStatus):
    """Fixed subscription policy."""

    pro: bool = False

    def is_pro(self) -> bool:
        return self.pro


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed answer or raising."""

    response: str = field(
        default_factory=lambda: json.dumps(
            {
                "name": "Chicken Rice Bowl",
                "calories": 540,
                "protein": 38,
                "carbs": 62,
                "fats": 14,
            }
        )
    )
    error: Exception | None = None
    calls: list[dict[str, str]] = field(default_factory=list)

    async def complete(
        self, *, system_prompt: str, user_prompt: str, image_data_url: str
    ) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "image_data_url": image_data_url,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


def make_draft(
    calories: float = 100,
    protein: float = 10,
    carbs: float | None = None,
    fats: float | None = None,
    name: str = "Oatmeal",
) -> FoodEntryDraft:
    return FoodEntryDraft(
        name=name, calories=calories, protein=protein, carbs=carbs, fats=fats
    )


@pytest.fixture
def repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def free_ledger(repository: InMemoryStateRepository) -> FoodLogService:
    return FoodLogService(repository=repository, pro_status=FakeProStatus(pro=False))


@pytest.fixture
def pro_ledger(repository: InMemoryStateRepository) -> FoodLogService:
    return FoodLogService(repository=repository, pro_status=FakeProStatus(pro=True))


@pytest.fixture
def user_service(repository: InMemoryStateRepository) -> UserService:
    return UserService(repository)


@pytest.fixture
def subscription_service(repository: InMemoryStateRepository) -> SubscriptionService:
    return SubscriptionService(repository)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        openai_api_key="test-openai-key",
        vision_provider="openai",
        environment="test",
    )


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(
    settings: Settings,
    repository: InMemoryStateRepository,
    vision_client: FakeVisionClient,
) -> AppContainer:
    built = build_container(settings, repository=repository)
    built.food_analysis_service = FoodAnalysisService(client=vision_client)
    return built
