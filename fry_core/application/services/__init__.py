"""Application services."""
from .checkout_service import CheckoutService
from .loyalty_service import LoyaltyService
from .order_service import OrderApplicationService

__all__ = ["CheckoutService", "LoyaltyService", "OrderApplicationService"]
