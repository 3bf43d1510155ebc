"""Builders for domain objects used across the test suite."""

from datetime import datetime, timezone
from decimal import Decimal

from fry_core.domain.entities.order import Order, OrderItem
from fry_core.domain.enums import OrderStatus
from fry_core.domain.value_objects import Money, OrderNumber


T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Settable clock for time-dependent service rules."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_item(price: str = "100.00", quantity: int = 1, product_id: str = "combo-1", **kwargs) -> OrderItem:
    return OrderItem(
        product_id=product_id,
        product_name=kwargs.pop("product_name", "Family Combo"),
        quantity=quantity,
        unit_price=Money(Decimal(price)),
        **kwargs,
    )


def make_order(
    sequence: int = 1,
    status: OrderStatus = OrderStatus.PENDING,
    created_at: datetime = T0,
    items=None,
    delivery_fee: str = "0",
    **kwargs,
) -> Order:
    return Order(
        id=kwargs.pop("id", f"order-{sequence}"),
        order_number=OrderNumber.from_sequence(sequence),
        customer_id=kwargs.pop("customer_id", "customer-1"),
        branch_id=kwargs.pop("branch_id", "branch-1"),
        items=items if items is not None else [make_item()],
        delivery_fee=Money(Decimal(delivery_fee)),
        status=status,
        created_at=created_at,
        **kwargs,
    )
