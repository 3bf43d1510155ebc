"""Domain layer - pure domain models and interfaces."""

from .entities import Cart, Order, OrderItem
from .enums import OrderStatus
from .errors import DomainError, InvalidTransitionError
from .lifecycle import ensure_transition
from .repositories import OrderRepository
from .sorting import sort_orders_by_priority_and_time, status_rank
from .value_objects import Money, OrderNumber

__all__ = [
    "Cart",
    "DomainError",
    "InvalidTransitionError",
    "Money",
    "Order",
    "OrderItem",
    "OrderNumber",
    "OrderRepository",
    "OrderStatus",
    "ensure_transition",
    "sort_orders_by_priority_and_time",
    "status_rank",
]
