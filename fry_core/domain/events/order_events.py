"""
Order Domain Events.

Events that occur during the order lifecycle. Recorded by the Order
aggregate, published on the event bus by the application layer after the
order is saved.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderEvent(DomainEvent):
    """Common fields for events about one order."""

    order_id: str = ""
    order_number: str = ""
    branch_id: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderPlacedEvent(OrderEvent):
    """
    Customer checked out.

    Trigger: CheckoutService.place_order
    """

    customer_id: str = ""
    total: Optional[Decimal] = None
    currency: str = ""
    delivery_type: str = ""
    payment_method: str = ""
    points_redeemed: int = 0


@dataclass
class OrderStatusChangedEvent(OrderEvent):
    """
    Order status changed.

    Tracks guarded transitions (pending -> confirmed -> ... -> delivered,
    or -> rejected). Consumers: BranchNotifier.
    """

    previous_status: str = ""
    new_status: str = ""
    reason: Optional[str] = None


@dataclass
class OrderApprovedEvent(OrderEvent):
    """Admin approved the order (it moves to confirmed)."""

    admin_id: str = ""


@dataclass
class TransferAuthorizedEvent(OrderEvent):
    """Admin verified the bank transfer receipt."""

    admin_id: str = ""


@dataclass
class DeliveryAssignedEvent(OrderEvent):
    """A delivery user was attached to the order."""

    delivery_id: str = ""
    assigned_by_branch: bool = False


@dataclass
class OrderCancelledEvent(OrderEvent):
    """
    Customer cancelled the order inside the cancellation window.

    The order ends up rejected; this event replaces the status-change
    event for that transition.
    """

    customer_id: str = ""
    reason: str = ""
    previous_status: str = ""


@dataclass
class OrderDelayedEvent(OrderEvent):
    """Delivery user reported a delay."""

    delivery_id: str = ""
    delay_minutes: int = 0
    reason: str = ""
