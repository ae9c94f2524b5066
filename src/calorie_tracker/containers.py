"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_tracker.adapters.completion_vision_client import (
    HttpxCompletionVisionClient,
)
from calorie_tracker.adapters.json_state_repository import JsonFileStateRepository
from calorie_tracker.adapters.openai_vision_client import OpenAIVisionClient
from calorie_tracker.config import Settings, parse_timezone
from calorie_tracker.services.analytics import AnalyticsService
from calorie_tracker.services.food_log import FoodLogService
from calorie_tracker.services.storage import StateRepository
from calorie_tracker.services.subscription import SubscriptionService
from calorie_tracker.services.suggestions import SuggestionService
from calorie_tracker.services.users import UserService
from calorie_tracker.services.vision import FoodAnalysisService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    subscription_service: SubscriptionService
    food_log_service: FoodLogService
    analytics_service: AnalyticsService
    food_analysis_service: FoodAnalysisService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    repository: StateRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    tz = parse_timezone(resolved_settings.timezone)
    state_repository = repository or JsonFileStateRepository(
        resolved_settings.data_dir
    )
    user_service = UserService(state_repository, timezone=tz)
    subscription_service = SubscriptionService(state_repository)
    food_log_service = FoodLogService(
        repository=state_repository,
        pro_status=subscription_service,
        free_daily_entry_limit=resolved_settings.free_daily_entry_limit,
        timezone=tz,
    )
    vision_client = _build_vision_client(resolved_settings)

    async def close_resources() -> None:
        await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        subscription_service=subscription_service,
        food_log_service=food_log_service,
        analytics_service=AnalyticsService(timezone=tz),
        food_analysis_service=FoodAnalysisService(client=vision_client),
        suggestion_service=SuggestionService(food_log_service),
        close_resources=close_resources,
    )


def _build_vision_client(
    settings: Settings,
) -> OpenAIVisionClient | HttpxCompletionVisionClient:
    if settings.vision_provider == "openai":
        if settings.openai_api_key:
            return OpenAIVisionClient.create(
                settings.openai_api_key, settings.openai_model
            )
        logger.warning("OPENAI_API_KEY is not set; using the completion endpoint")
    return HttpxCompletionVisionClient.create(settings.completion_url)
