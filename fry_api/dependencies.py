"""
FastAPI Dependencies.

Provides dependency injection for repositories and application services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

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
from fry_core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES (in-memory, single process)
# =============================================================================

_order_repository = None
_points_repository = None
_notification_repository = None
_event_bus = None
_loyalty_service = None
_order_service = None
_checkout_service = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_repository() -> InMemoryOrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")
    return _order_repository


def get_points_repository() -> InMemoryPointsRepository:
    global _points_repository
    if _points_repository is None:
        _points_repository = InMemoryPointsRepository()
        logger.info("Created InMemoryPointsRepository instance")
    return _points_repository


def get_notification_repository() -> InMemoryNotificationRepository:
    global _notification_repository
    if _notification_repository is None:
        _notification_repository = InMemoryNotificationRepository()
        logger.info("Created InMemoryNotificationRepository instance")
    return _notification_repository


def get_event_bus() -> InMemoryEventBus:
    """Event bus with the branch notifier subscribed."""
    global _event_bus
    if _event_bus is None:
        _event_bus = InMemoryEventBus()
        BranchNotifier(get_notification_repository()).register(_event_bus)
        logger.info("Created InMemoryEventBus with BranchNotifier")
    return _event_bus


def get_loyalty_service() -> LoyaltyService:
    global _loyalty_service
    if _loyalty_service is None:
        _loyalty_service = LoyaltyService(
            points_repository=get_points_repository(),
            settings=get_app_settings().points,
        )
        logger.info("Created LoyaltyService instance")
    return _loyalty_service


def get_order_service() -> OrderApplicationService:
    global _order_service
    if _order_service is None:
        _order_service = OrderApplicationService(
            order_repository=get_order_repository(),
            event_bus=get_event_bus(),
            loyalty_service=get_loyalty_service(),
            settings=get_app_settings().orders,
        )
        logger.info("Created OrderApplicationService instance")
    return _order_service


def get_checkout_service() -> CheckoutService:
    global _checkout_service
    if _checkout_service is None:
        _checkout_service = CheckoutService(
            order_repository=get_order_repository(),
            event_bus=get_event_bus(),
            loyalty_service=get_loyalty_service(),
            settings=get_app_settings().orders,
        )
        logger.info("Created CheckoutService instance")
    return _checkout_service


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _order_repository, _points_repository, _notification_repository
    global _event_bus, _loyalty_service, _order_service, _checkout_service

    _order_repository = None
    _points_repository = None
    _notification_repository = None
    _event_bus = None
    _loyalty_service = None
    _order_service = None
    _checkout_service = None

    logger.info("Dependencies reset")
