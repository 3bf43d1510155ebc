"""
Order enums.

Status, fulfilment and payment values as persisted on order records.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order lifecycle status values."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DISPATCHED = "dispatched"
    DELIVERED = "delivered"
    REJECTED = "rejected"


class DeliveryType(str, Enum):
    """How the customer receives the order."""

    PICKUP = "pickup"
    DELIVERY = "delivery"


class PaymentMethod(str, Enum):
    """How the customer pays."""

    CASH = "cash"
    TRANSFER = "transfer"


class NotificationType(str, Enum):
    """Kinds of in-app notifications sent to a branch."""

    DELIVERY_COMPLETED = "delivery_completed"
    ORDER_REJECTED = "order_rejected"
    ORDER_DELAYED = "order_delayed"
    ORDER_CANCELLED = "order_cancelled"
