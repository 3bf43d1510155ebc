"""Domain entity -> DTO mappers shared by the application services."""

from fry_core.application.dtos import (
    BranchNotificationDTO,
    OrderDTO,
    OrderItemDTO,
    UserPointsDTO,
)
from fry_core.domain.entities.notification import BranchNotification
from fry_core.domain.entities.order import Order
from fry_core.domain.entities.points import UserPoints
from fry_core.domain.sorting import status_rank


def order_to_dto(order: Order) -> OrderDTO:
    """Transform Order domain entity to OrderDTO."""
    items = [
        OrderItemDTO(
            product_id=item.product_id,
            product_name=item.product_name,
            product_image=item.product_image,
            quantity=item.quantity,
            unit_price=item.unit_price.amount,
            line_total=item.line_total.amount,
            selected_drink=item.selected_drink,
            is_prize_redemption=item.is_prize_redemption,
            points_used=item.points_used,
        )
        for item in order.items
    ]

    return OrderDTO(
        id=order.id,
        order_number=str(order.order_number),
        customer_id=order.customer_id,
        branch_id=order.branch_id,
        items=items,
        currency=order.currency,
        subtotal=order.subtotal.amount,
        delivery_fee=order.delivery_fee.amount,
        discount=order.discount.amount,
        total=order.total.amount,
        total_display=order.total.display(),
        status=order.status,
        status_rank=status_rank(order.status),
        delivery_type=order.delivery_type,
        payment_method=order.payment_method,
        created_at=order.created_at,
        updated_at=order.updated_at,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        delivery_id=order.delivery_id,
        delivery_address=order.delivery_address,
        delivery_zone=order.delivery_zone,
        notes=order.notes,
        coupon_code=order.coupon_code,
        assigned_by_branch=order.assigned_by_branch,
        request_approved=order.request_approved,
        transfer_authorized=order.transfer_authorized,
        transfer_authorized_by=order.transfer_authorized_by,
        transfer_authorized_at=order.transfer_authorized_at,
        admin_approved=order.admin_approved,
        admin_approved_by=order.admin_approved_by,
        admin_approved_at=order.admin_approved_at,
    )


def points_to_dto(points: UserPoints) -> UserPointsDTO:
    return UserPointsDTO(
        user_id=points.user_id,
        available_points=points.available_points,
        total_points=points.total_points,
        last_updated=points.last_updated,
    )


def notification_to_dto(notification: BranchNotification) -> BranchNotificationDTO:
    return BranchNotificationDTO(
        id=notification.id,
        branch_id=notification.branch_id,
        type=notification.type,
        order_id=notification.order_id,
        title=notification.title,
        message=notification.message,
        delivery_id=notification.delivery_id,
        read=notification.read,
        created_at=notification.created_at,
    )
