"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from fry_core.domain.enums import DeliveryType, OrderStatus, PaymentMethod


class OrderItemDTO(BaseModel):
    """DTO for a stored order line."""

    product_id: str = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name at checkout")
    product_image: str = Field(default="", description="Product image URL")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., ge=0, description="Unit price, extras included")
    line_total: Decimal = Field(..., ge=0, description="unit_price x quantity")
    selected_drink: Optional[str] = Field(None, description="Drink chosen with the item")
    is_prize_redemption: bool = Field(default=False, description="Paid with points")
    points_used: int = Field(default=0, ge=0, description="Points spent on this line")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    order_number: str = Field(..., description="Display code, e.g. FRY-000001")
    customer_id: str = Field(..., description="Customer ID")
    branch_id: str = Field(..., description="Branch ID")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    currency: str = Field(..., description="Currency code")
    subtotal: Decimal = Field(..., ge=0, description="Sum of line totals")
    delivery_fee: Decimal = Field(..., ge=0, description="Delivery fee")
    discount: Decimal = Field(..., ge=0, description="Discount")
    total: Decimal = Field(..., ge=0, description="subtotal + delivery_fee - discount")
    total_display: str = Field(..., description="Formatted total, e.g. L. 1,234.50")
    status: OrderStatus = Field(..., description="Order status")
    status_rank: int = Field(..., description="Display priority of the status")
    delivery_type: DeliveryType = Field(..., description="pickup or delivery")
    payment_method: PaymentMethod = Field(..., description="cash or transfer")
    created_at: datetime = Field(..., description="Creation instant (UTC)")
    updated_at: datetime = Field(..., description="Last change (UTC)")
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    delivery_id: Optional[str] = None
    delivery_address: Optional[str] = None
    delivery_zone: Optional[str] = None
    notes: Optional[str] = None
    coupon_code: Optional[str] = None
    assigned_by_branch: bool = False
    request_approved: bool = False
    transfer_authorized: Optional[bool] = None
    transfer_authorized_by: Optional[str] = None
    transfer_authorized_at: Optional[datetime] = None
    admin_approved: bool = False
    admin_approved_by: Optional[str] = None
    admin_approved_at: Optional[datetime] = None

    model_config = {"frozen": True}


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="Orders, highest priority first")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}


class ProductDTO(BaseModel):
    """Catalogue product as sent by the client at checkout."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., ge=0, description="Product price")
    category_id: str = Field(default="", description="Category ID")
    image: str = Field(default="", description="Product image URL")

    model_config = {"frozen": True}


class CartExtraDTO(BaseModel):
    """Extra bought with a cart item."""

    product: ProductDTO
    quantity: int = Field(default=1, gt=0)

    model_config = {"frozen": True}


class CartItemDTO(BaseModel):
    """Cart line submitted at checkout."""

    product: ProductDTO
    quantity: int = Field(default=1, gt=0, description="Quantity")
    selected_drink: Optional[ProductDTO] = Field(None, description="Drink chosen with the item")
    extras: List[CartExtraDTO] = Field(default_factory=list, description="Extras")
    notes: Optional[str] = None
    is_prize_redemption: bool = Field(default=False, description="Redeem with points")

    model_config = {"frozen": True}


class PlaceOrderRequest(BaseModel):
    """Request DTO for checkout."""

    customer_id: str = Field(..., description="Customer placing the order")
    branch_id: str = Field(..., description="Branch fulfilling the order")
    items: List[CartItemDTO] = Field(default_factory=list, description="Cart items")
    delivery_type: DeliveryType = Field(default=DeliveryType.PICKUP)
    payment_method: PaymentMethod = Field(default=PaymentMethod.CASH)
    delivery_zone: Optional[str] = Field(None, description="Delivery zone name")
    delivery_fee: Decimal = Field(default=Decimal("0"), ge=0, description="Zone price")
    delivery_address: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    notes: Optional[str] = None
    coupon_code: Optional[str] = Field(None, description="Recorded only, no discount applied")
    receipt_sent: bool = Field(default=False, description="Transfer receipt was sent")

    model_config = {"frozen": True}


class UpdateStatusRequest(BaseModel):
    """Request DTO for a status change."""

    status: OrderStatus = Field(..., description="Requested status")
    delivery_id: Optional[str] = Field(None, description="Delivery user to assign")
    assigned_by_branch: Optional[bool] = Field(None, description="Assigned by the branch")

    model_config = {"frozen": True}


class AdminActionRequest(BaseModel):
    """Request DTO for admin approval and transfer authorization."""

    admin_id: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class CancelOrderRequest(BaseModel):
    """Request DTO for a customer cancellation."""

    customer_id: str = Field(..., min_length=1)
    reason: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class DelayReportRequest(BaseModel):
    """Request DTO for a delivery delay report."""

    delivery_id: str = Field(..., min_length=1)
    delay_minutes: int = Field(..., gt=0)
    reason: str = Field(default="")

    model_config = {"frozen": True}
