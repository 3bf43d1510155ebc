"""Domain value objects."""

from .value_objects import Money, format_price
from .order_number import OrderNumber

__all__ = [
    "Money",
    "OrderNumber",
    "format_price",
]
