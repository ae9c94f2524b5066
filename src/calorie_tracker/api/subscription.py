"""Subscription endpoints standing in for a billing flow."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.schemas import SubscriptionResponse

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/subscription", tags=["subscription"])


@router.get("")
async def get_subscription(request: Request) -> SubscriptionResponse:
    container: AppContainer = request.app.state.container
    state = container.subscription_service.state
    return SubscriptionResponse(
        is_pro=state.is_pro, subscription_date=state.subscription_date
    )


@router.post("")
async def subscribe(request: Request) -> SubscriptionResponse:
    """Activate Pro."""
    container: AppContainer = request.app.state.container
    state = container.subscription_service.set_pro_status(True)
    return SubscriptionResponse(
        is_pro=state.is_pro, subscription_date=state.subscription_date
    )


@router.delete("")
async def cancel(request: Request) -> SubscriptionResponse:
    """Cancel Pro; the activation date is discarded."""
    container: AppContainer = request.app.state.container
    state = container.subscription_service.cancel_subscription()
    return SubscriptionResponse(
        is_pro=state.is_pro, subscription_date=state.subscription_date
    )
