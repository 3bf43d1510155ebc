"""Application layer - services, mappers, and DTOs."""

from .dtos import OrderDTO, OrderItemDTO, OrderListDTO, PlaceOrderRequest
from .services import CheckoutService, LoyaltyService, OrderApplicationService

__all__ = [
    # DTOs
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "PlaceOrderRequest",
    # Services
    "CheckoutService",
    "LoyaltyService",
    "OrderApplicationService",
]
