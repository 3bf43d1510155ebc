"""Shared fixtures for the test suite."""

import pytest

from fry_core.application.services import (
    CheckoutService,
    LoyaltyService,
    OrderApplicationService,
)
from fry_core.infrastructure.adapters.notifications import BranchNotifier
from fry_core.infrastructure.adapters.persistence import (
    InMemoryNotificationRepository,
    InMemoryOrderRepository,
    InMemoryPointsRepository,
)
from fry_core.infrastructure.event_bus import InMemoryEventBus
from fry_core.settings import OrderSettings, PointsSettings

from factories import FrozenClock


@pytest.fixture
def order_settings() -> OrderSettings:
    return OrderSettings(number_prefix="FRY", cancellation_window_minutes=5, currency="HNL")


@pytest.fixture
def points_settings() -> PointsSettings:
    return PointsSettings(enabled=True, conversion_rate=10, redeemable_categories=["prizes"])


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def points_repository() -> InMemoryPointsRepository:
    return InMemoryPointsRepository()


@pytest.fixture
def notification_repository() -> InMemoryNotificationRepository:
    return InMemoryNotificationRepository()


@pytest.fixture
def event_bus(notification_repository) -> InMemoryEventBus:
    bus = InMemoryEventBus()
    BranchNotifier(notification_repository).register(bus)
    return bus


@pytest.fixture
def loyalty_service(points_repository, points_settings) -> LoyaltyService:
    return LoyaltyService(points_repository, points_settings)


@pytest.fixture
def order_service(order_repository, event_bus, loyalty_service, order_settings, clock) -> OrderApplicationService:
    return OrderApplicationService(
        order_repository=order_repository,
        event_bus=event_bus,
        loyalty_service=loyalty_service,
        settings=order_settings,
        clock=clock,
    )


@pytest.fixture
def checkout_service(order_repository, event_bus, loyalty_service, order_settings) -> CheckoutService:
    return CheckoutService(
        order_repository=order_repository,
        event_bus=event_bus,
        loyalty_service=loyalty_service,
        settings=order_settings,
    )
