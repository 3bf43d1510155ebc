"""In-memory persistence adapters."""

from .in_memory_notification_repository import InMemoryNotificationRepository
from .in_memory_order_repository import InMemoryOrderRepository
from .in_memory_points_repository import InMemoryPointsRepository

__all__ = [
    "InMemoryNotificationRepository",
    "InMemoryOrderRepository",
    "InMemoryPointsRepository",
]
