"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calorie_tracker.api.food import router as food_router
from calorie_tracker.api.profile import router as profile_router
from calorie_tracker.api.subscription import router as subscription_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Calorie tracker started (environment=%s, data_dir=%s)",
            container.settings.environment,
            container.settings.data_dir,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Calorie Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(profile_router)
    app.include_router(food_router)
    app.include_router(subscription_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
