"""Repository interfaces."""

from .notification_repository import NotificationRepository
from .order_repository import OrderRepository
from .points_repository import PointsRepository

__all__ = [
    "NotificationRepository",
    "OrderRepository",
    "PointsRepository",
]
