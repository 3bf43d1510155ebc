"""Domain events for the Event Bus."""
from .base import DomainEvent
from .order_events import (
    OrderEvent,
    OrderPlacedEvent,
    OrderStatusChangedEvent,
    OrderApprovedEvent,
    TransferAuthorizedEvent,
    DeliveryAssignedEvent,
    OrderCancelledEvent,
    OrderDelayedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderEvent",
    "OrderPlacedEvent",
    "OrderStatusChangedEvent",
    "OrderApprovedEvent",
    "TransferAuthorizedEvent",
    "DeliveryAssignedEvent",
    "OrderCancelledEvent",
    "OrderDelayedEvent",
]
