"""
In-Memory Order Repository Implementation.

Stores order snapshots, so callers never hold a live reference to the
stored state. Used by the API and tests.
"""
from typing import Optional, List, Dict, Any
import logging

from fry_core.domain.entities.order import Order
from fry_core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Keeps one snapshot dictionary per order id, in insertion order.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Dict[str, Any]] = {}
        logger.info("InMemoryOrderRepository initialized")

    async def save(self, order: Order) -> None:
        """
        Save order snapshot.

        Args:
            order: Order entity to save
        """
        self._storage[order.id] = order.to_snapshot_dict()
        logger.info(
            f"Order saved: {order.order_number} (id: {order.id}, status: {order.status.value})"
        )

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Get order by ID.

        Args:
            order_id: Order ID to lookup

        Returns:
            Fresh Order rebuilt from the snapshot, None if unknown
        """
        snapshot = self._storage.get(order_id)
        if snapshot is None:
            logger.info(f"Order not found: {order_id}")
            return None
        return Order.from_snapshot_dict(snapshot)

    async def find_all(self, limit: Optional[int] = None) -> List[Order]:
        """
        Get stored orders.

        Args:
            limit: Maximum number of orders to return

        Returns:
            List of orders (up to limit)
        """
        snapshots = list(self._storage.values())
        if limit is not None:
            snapshots = snapshots[:limit]
        logger.debug(f"Found {len(snapshots)} order(s) (limit: {limit})")
        return [Order.from_snapshot_dict(snapshot) for snapshot in snapshots]

    async def count(self) -> int:
        return len(self._storage)

    def clear(self) -> None:
        """Clear all orders (for testing)."""
        self._storage.clear()
        logger.info("Order repository cleared")
