"""Tests for the subscription service."""

from calorie_tracker.services.subscription import SubscriptionService
from tests.conftest import InMemoryStateRepository


def test_defaults_to_free(subscription_service: SubscriptionService) -> None:
    assert subscription_service.is_pro() is False
    assert subscription_service.state.subscription_date is None


def test_set_pro_status_stamps_activation(
    subscription_service: SubscriptionService,
) -> None:
    state = subscription_service.set_pro_status(True)

    assert state.is_pro is True
    assert state.subscription_date is not None
    assert subscription_service.is_pro() is True


def test_set_pro_status_false_clears_timestamp(
    subscription_service: SubscriptionService,
) -> None:
    subscription_service.set_pro_status(True)

    state = subscription_service.set_pro_status(False)

    assert state.is_pro is False
    assert state.subscription_date is None


def test_cancel_subscription(repository: InMemoryStateRepository) -> None:
    service = SubscriptionService(repository)
    service.set_pro_status(True)

    service.cancel_subscription()

    reloaded = SubscriptionService(repository)
    assert reloaded.is_pro() is False
    assert reloaded.state.subscription_date is None


def test_status_survives_reload(repository: InMemoryStateRepository) -> None:
    SubscriptionService(repository).set_pro_status(True)

    reloaded = SubscriptionService(repository)

    assert reloaded.is_pro() is True
    assert reloaded.state.subscription_date is not None
