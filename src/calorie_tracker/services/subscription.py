"""Pro subscription flag."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calorie_tracker.domain.subscription import SubscriptionState
from calorie_tracker.services.storage import (
    SUBSCRIPTION_STORAGE_KEY,
    StateRepository,
    load_state,
    save_state,
)


@dataclass
class SubscriptionService:
    """Stands in for a billing system with a persisted boolean flag."""

    repository: StateRepository
    state: SubscriptionState = field(init=False)

    def __post_init__(self) -> None:
        self.state = load_state(
            self.repository, SUBSCRIPTION_STORAGE_KEY, SubscriptionState
        )

    def is_pro(self) -> bool:
        """Return True when the Pro subscription is active."""
        return self.state.is_pro

    def set_pro_status(self, status: bool) -> SubscriptionState:
        """Activate or deactivate Pro, stamping the activation time."""
        self.state = SubscriptionState(
            is_pro=status,
            subscription_date=datetime.now(tz=UTC) if status else None,
        )
        self._persist()
        return self.state

    def cancel_subscription(self) -> SubscriptionState:
        """Deactivate Pro and forget the activation time."""
        return self.set_pro_status(False)

    def _persist(self) -> None:
        save_state(self.repository, SUBSCRIPTION_STORAGE_KEY, self.state)
