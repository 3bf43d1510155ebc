"""
Orders management endpoints.

Checkout, priority-sorted listing and the order lifecycle actions.
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional
import logging

from fry_core.application.dtos import (
    AdminActionRequest,
    CancelOrderRequest,
    DelayReportRequest,
    OrderDTO,
    OrderListDTO,
    PlaceOrderRequest,
    UpdateStatusRequest,
)
from fry_core.application.services import CheckoutService, OrderApplicationService
from fry_core.domain.enums import OrderStatus
from fry_core.domain.errors import (
    CancellationWindowExpiredError,
    CheckoutValidationError,
    InsufficientPointsError,
    InvalidTransitionError,
    OrderClosedError,
    OrderNotFoundError,
)
from fry_api.dependencies import get_checkout_service, get_order_service


logger = logging.getLogger(__name__)
router = APIRouter()


def _http_error(exc: Exception) -> HTTPException:
    """Map a domain failure to its HTTP status."""
    if isinstance(exc, OrderNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, (InvalidTransitionError, CancellationWindowExpiredError, OrderClosedError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


# =============================================================================
# LIST ORDERS
# =============================================================================

@router.get(
    "",
    response_model=OrderListDTO,
    status_code=status.HTTP_200_OK,
    summary="List orders by priority",
    description="Orders needing attention first, oldest first within a status rank",
)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status"),
    branch_id: Optional[str] = Query(default=None),
    delivery_id: Optional[str] = Query(default=None),
    customer_id: Optional[str] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=1, le=1000, description="Maximum number of orders to return"),
    service: OrderApplicationService = Depends(get_order_service),
):
    orders = await service.list_orders(
        status=status_filter,
        branch_id=branch_id,
        delivery_id=delivery_id,
        customer_id=customer_id,
        limit=limit,
    )
    return OrderListDTO(orders=orders, total=len(orders))


# =============================================================================
# CHECKOUT
# =============================================================================

@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
)
async def place_order(
    request: PlaceOrderRequest,
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Place an order from the customer's cart.

    **Errors:**
    - 400: empty cart, missing delivery details, transfer receipt not sent,
      or not enough points for prize items
    """
    try:
        return await service.place_order(request)
    except (CheckoutValidationError, InsufficientPointsError) as e:
        logger.warning(f"Checkout rejected for {request.customer_id}: {e}")
        raise _http_error(e)


# =============================================================================
# GET ORDER BY ID
# =============================================================================

@router.get(
    "/{order_id}",
    response_model=OrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Get order by ID",
)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
):
    try:
        return await service.get_order(order_id)
    except OrderNotFoundError as e:
        raise _http_error(e)


# =============================================================================
# LIFECYCLE
# =============================================================================

@router.patch(
    "/{order_id}/status",
    response_model=OrderDTO,
    summary="Change order status",
    description="Only the next status in the lifecycle, or rejected, is accepted",
)
async def update_status(
    order_id: str,
    request: UpdateStatusRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    try:
        return await service.update_status(
            order_id,
            request.status,
            delivery_id=request.delivery_id,
            assigned_by_branch=request.assigned_by_branch,
        )
    except (OrderNotFoundError, InvalidTransitionError) as e:
        logger.warning(f"Status change refused for {order_id}: {e}")
        raise _http_error(e)


@router.post(
    "/{order_id}/approve",
    response_model=OrderDTO,
    summary="Admin approval",
)
async def approve_order(
    order_id: str,
    request: AdminActionRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    try:
        return await service.approve_order(order_id, request.admin_id)
    except (OrderNotFoundError, InvalidTransitionError) as e:
        raise _http_error(e)


@router.post(
    "/{order_id}/authorize-transfer",
    response_model=OrderDTO,
    summary="Authorize bank transfer",
)
async def authorize_transfer(
    order_id: str,
    request: AdminActionRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    try:
        return await service.authorize_transfer(order_id, request.admin_id)
    except (OrderNotFoundError, ValueError) as e:
        raise _http_error(e)


@router.post(
    "/{order_id}/cancel",
    response_model=OrderDTO,
    summary="Customer cancellation",
)
async def cancel_order(
    order_id: str,
    request: CancelOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    Cancel an order.

    **Errors:**
    - 404: unknown order
    - 409: cancellation window passed, or order already finished
    """
    try:
        return await service.cancel_order(order_id, request.customer_id, request.reason)
    except (OrderNotFoundError, CancellationWindowExpiredError, InvalidTransitionError) as e:
        logger.warning(f"Cancellation refused for {order_id}: {e}")
        raise _http_error(e)


@router.post(
    "/{order_id}/delays",
    response_model=OrderDTO,
    summary="Report a delivery delay",
)
async def report_delay(
    order_id: str,
    request: DelayReportRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    try:
        return await service.report_delay(
            order_id, request.delivery_id, request.delay_minutes, request.reason
        )
    except (OrderNotFoundError, OrderClosedError) as e:
        raise _http_error(e)
