"""Key-value persistence shared by the state services."""

import logging
from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

USER_STORAGE_KEY = "user-storage"
FOOD_STORAGE_KEY = "food-storage"
SUBSCRIPTION_STORAGE_KEY = "subscription-storage"

StateT = TypeVar("StateT", bound=BaseModel)


class StateRepository(Protocol):
    """Persistence interface for JSON-serializable state records."""

    def load(self, key: str) -> dict[str, object] | None:
        """Return the stored record for a key, if present."""

    def save(self, key: str, data: dict[str, object]) -> None:
        """Replace the stored record for a key."""


def load_state(
    repository: StateRepository, key: str, model: type[StateT]
) -> StateT:
    """Load a record into a model, falling back to defaults when unusable."""
    raw = repository.load(key)
    if raw is None:
        return model()
    try:
        return model.model_validate(raw)
    except ValidationError:
        logger.exception("Discarding invalid state stored under %s", key)
        return model()


def save_state(repository: StateRepository, key: str, state: BaseModel) -> None:
    """Serialize a model and store it under a key."""
    repository.save(key, state.model_dump(mode="json"))
