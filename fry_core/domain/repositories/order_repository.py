"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Insert or replace an order.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Opaque order id

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: Optional[int] = None) -> List[Order]:
        """List stored orders in insertion order.

        Args:
            limit: Maximum number of orders to return, None for all

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored orders (drives order number allocation)."""
        pass
