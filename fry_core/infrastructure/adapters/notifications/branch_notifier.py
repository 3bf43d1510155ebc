"""
Branch Notifier.

Listens to order events on the event bus and stores in-app notifications
for the branch that owns the order.
"""
import logging
from typing import Optional

from fry_core.domain.entities.notification import BranchNotification
from fry_core.domain.enums import NotificationType, OrderStatus
from fry_core.domain.events.order_events import (
    OrderCancelledEvent,
    OrderDelayedEvent,
    OrderStatusChangedEvent,
)
from fry_core.domain.repositories.notification_repository import NotificationRepository


logger = logging.getLogger(__name__)


class BranchNotifier:
    """
    Creates branch notifications from order events.

    Mapping:
    - status changed to delivered -> delivery_completed
    - status changed to rejected  -> order_rejected
    - OrderCancelledEvent         -> order_cancelled
    - OrderDelayedEvent           -> order_delayed

    Events without a branch are ignored.
    """

    def __init__(self, notification_repository: NotificationRepository):
        self._notifications = notification_repository

    def register(self, bus) -> None:
        """Subscribe the handlers on an InMemoryEventBus."""
        bus.subscribe(self.on_status_changed, OrderStatusChangedEvent.__name__)
        bus.subscribe(self.on_order_cancelled, OrderCancelledEvent.__name__)
        bus.subscribe(self.on_order_delayed, OrderDelayedEvent.__name__)

    async def on_status_changed(self, event: OrderStatusChangedEvent) -> None:
        if event.new_status == OrderStatus.DELIVERED.value:
            await self._notify(
                event,
                NotificationType.DELIVERY_COMPLETED,
                title="Order delivered",
                message=f"Order {event.order_number} was delivered",
                delivery_id=event.actor_id,
            )
        elif event.new_status == OrderStatus.REJECTED.value:
            message = f"Order {event.order_number} was rejected"
            if event.reason:
                message += f". Reason: {event.reason}"
            await self._notify(
                event,
                NotificationType.ORDER_REJECTED,
                title="Order rejected",
                message=message,
            )

    async def on_order_cancelled(self, event: OrderCancelledEvent) -> None:
        await self._notify(
            event,
            NotificationType.ORDER_CANCELLED,
            title="Order cancelled",
            message=(
                f"The customer cancelled order {event.order_number}. "
                f"Reason: {event.reason}"
            ),
        )

    async def on_order_delayed(self, event: OrderDelayedEvent) -> None:
        await self._notify(
            event,
            NotificationType.ORDER_DELAYED,
            title="Delivery delayed",
            message=(
                f"Delivery reports a delay of {event.delay_minutes} minutes "
                f"on order {event.order_number}"
            ),
            delivery_id=event.delivery_id,
        )

    async def _notify(
        self,
        event,
        notification_type: NotificationType,
        title: str,
        message: str,
        delivery_id: Optional[str] = None,
    ) -> None:
        if not event.branch_id:
            logger.debug(f"No branch on {event.event_type} for order {event.order_id}, skipping")
            return

        notification = BranchNotification(
            branch_id=event.branch_id,
            type=notification_type,
            order_id=event.order_id,
            title=title,
            message=message,
            delivery_id=delivery_id,
        )
        await self._notifications.add(notification)
        logger.info(
            f"🔔 {notification_type.value} -> branch {event.branch_id} (order {event.order_number})"
        )
