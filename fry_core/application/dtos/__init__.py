"""Application DTOs."""

from .notification_dto import BranchNotificationDTO, NotificationListDTO
from .order_dto import (
    AdminActionRequest,
    CancelOrderRequest,
    CartExtraDTO,
    CartItemDTO,
    DelayReportRequest,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    PlaceOrderRequest,
    ProductDTO,
    UpdateStatusRequest,
)
from .points_dto import PrizeQuoteDTO, UserPointsDTO

__all__ = [
    "AdminActionRequest",
    "BranchNotificationDTO",
    "CancelOrderRequest",
    "CartExtraDTO",
    "CartItemDTO",
    "DelayReportRequest",
    "NotificationListDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "PlaceOrderRequest",
    "PrizeQuoteDTO",
    "ProductDTO",
    "UpdateStatusRequest",
    "UserPointsDTO",
]
