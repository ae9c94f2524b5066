"""Domain models for the Pro subscription flag."""

from datetime import datetime

from pydantic import BaseModel


class SubscriptionState(BaseModel):
    """Persisted record for the subscription store."""

    is_pro: bool = False
    subscription_date: datetime | None = None
