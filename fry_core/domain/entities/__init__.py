"""Domain entities."""

from .cart import Cart, CartExtra, CartItem, ProductSnapshot
from .notification import BranchNotification
from .order import Order, OrderItem
from .points import UserPoints

__all__ = [
    "BranchNotification",
    "Cart",
    "CartExtra",
    "CartItem",
    "Order",
    "OrderItem",
    "ProductSnapshot",
    "UserPoints",
]
