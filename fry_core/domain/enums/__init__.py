"""Domain enums."""

from .order_status import DeliveryType, NotificationType, OrderStatus, PaymentMethod

__all__ = [
    "DeliveryType",
    "NotificationType",
    "OrderStatus",
    "PaymentMethod",
]
