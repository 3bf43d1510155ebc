"""Application service for Order operations."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from fry_core.application.dtos.order_dto import OrderDTO
from fry_core.application.mappers import order_to_dto
from fry_core.application.services.loyalty_service import LoyaltyService
from fry_core.domain.entities.order import Order
from fry_core.domain.enums import OrderStatus
from fry_core.domain.errors import CancellationWindowExpiredError, OrderNotFoundError
from fry_core.domain.event_bus import EventBus
from fry_core.domain.repositories.order_repository import OrderRepository
from fry_core.domain.sorting import parse_timestamp, sort_orders_by_priority_and_time
from fry_core.settings import OrderSettings


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Load and save the Order aggregate
    - Publish the aggregate's domain events after each save
    - Apply service-level rules (cancellation window, loyalty on delivery)
    - Transform domain entities into DTOs
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        event_bus: EventBus,
        loyalty_service: LoyaltyService,
        settings: OrderSettings,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            order_repository: Order storage
            event_bus: Bus receiving the aggregate's events
            loyalty_service: Credits points for delivered orders
            settings: Order settings (cancellation window)
            clock: Returns the current UTC instant; injectable for tests
        """
        self._orders = order_repository
        self._event_bus = event_bus
        self._loyalty = loyalty_service
        self._settings = settings
        self._clock = clock or _utcnow

    async def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        branch_id: Optional[str] = None,
        delivery_id: Optional[str] = None,
        customer_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[OrderDTO]:
        """List orders, highest priority first.

        Filters are applied before sorting; limit after.

        Returns:
            List of OrderDTO instances
        """
        orders = await self._orders.find_all()
        if status is not None:
            orders = [o for o in orders if o.status == OrderStatus(status)]
        if branch_id is not None:
            orders = [o for o in orders if o.branch_id == branch_id]
        if delivery_id is not None:
            orders = [o for o in orders if o.delivery_id == delivery_id]
        if customer_id is not None:
            orders = [o for o in orders if o.customer_id == customer_id]

        ordered = sort_orders_by_priority_and_time(orders)
        if limit is not None:
            ordered = ordered[:limit]
        return [order_to_dto(order) for order in ordered]

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID.

        Raises:
            OrderNotFoundError: If no order has this ID
        """
        return order_to_dto(await self._load(order_id))

    async def update_status(
        self,
        order_id: str,
        status: OrderStatus,
        delivery_id: Optional[str] = None,
        assigned_by_branch: Optional[bool] = None,
    ) -> OrderDTO:
        """Move an order along its lifecycle.

        Args:
            order_id: Order to update
            status: Requested status
            delivery_id: Delivery user to assign with this change
            assigned_by_branch: Branch assigned the delivery user

        Raises:
            OrderNotFoundError: Unknown order
            InvalidTransitionError: Status not reachable from the current one
        """
        order = await self._load(order_id)
        now = self._clock()

        if delivery_id:
            order.assign_delivery(delivery_id, assigned_by_branch=assigned_by_branch, at=now)
        order.transition_to(OrderStatus(status), actor_id=delivery_id, at=now)

        await self._commit(order)
        logger.info(f"Order {order.order_number} is now {order.status.value}")

        if order.status == OrderStatus.DELIVERED:
            await self._loyalty.earn_from_order(order)

        return order_to_dto(order)

    async def approve_order(self, order_id: str, admin_id: str) -> OrderDTO:
        order = await self._load(order_id)
        order.approve(admin_id, at=self._clock())
        await self._commit(order)
        logger.info(f"Order {order.order_number} approved by {admin_id}")
        return order_to_dto(order)

    async def authorize_transfer(self, order_id: str, admin_id: str) -> OrderDTO:
        order = await self._load(order_id)
        order.authorize_transfer(admin_id, at=self._clock())
        await self._commit(order)
        logger.info(f"Transfer for order {order.order_number} authorized by {admin_id}")
        return order_to_dto(order)

    async def cancel_order(self, order_id: str, customer_id: str, reason: str) -> OrderDTO:
        """Customer cancellation, only within the cancellation window.

        Raises:
            OrderNotFoundError: Unknown order
            CancellationWindowExpiredError: Window has passed
            InvalidTransitionError: Order already delivered or rejected
        """
        order = await self._load(order_id)
        now = self._clock()
        window = timedelta(minutes=self._settings.cancellation_window_minutes)

        if now - parse_timestamp(order.created_at) > window:
            raise CancellationWindowExpiredError(order_id, self._settings.cancellation_window_minutes)

        order.cancel(customer_id, reason, at=now)
        await self._commit(order)
        logger.info(f"Order {order.order_number} cancelled by customer {customer_id}")
        return order_to_dto(order)

    async def report_delay(
        self, order_id: str, delivery_id: str, delay_minutes: int, reason: str
    ) -> OrderDTO:
        order = await self._load(order_id)
        order.report_delay(delivery_id, delay_minutes, reason)
        await self._commit(order)
        logger.info(f"Order {order.order_number} delayed {delay_minutes} min ({delivery_id})")
        return order_to_dto(order)

    async def _load(self, order_id: str) -> Order:
        order = await self._orders.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def _commit(self, order: Order) -> None:
        """Save the aggregate, then publish and clear its events."""
        await self._orders.save(order)
        await self._event_bus.publish_all(order.get_domain_events())
        order.clear_domain_events()
