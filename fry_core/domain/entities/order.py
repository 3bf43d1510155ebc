"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Dict, Any

from ..enums import DeliveryType, OrderStatus, PaymentMethod
from ..events.base import DomainEvent
from ..events.order_events import (
    DeliveryAssignedEvent,
    OrderApprovedEvent,
    OrderCancelledEvent,
    OrderDelayedEvent,
    OrderPlacedEvent,
    OrderStatusChangedEvent,
    TransferAuthorizedEvent,
)
from ..errors import OrderClosedError
from ..lifecycle import INITIAL_STATUS, ensure_transition, is_terminal
from ..value_objects import Money, OrderNumber


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """
    Line item snapshot taken at checkout.

    unit_price already includes any extras chosen with the product.
    Catalogue changes never reach a stored item.
    """
    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    product_image: str = ""
    selected_drink: Optional[str] = None
    is_prize_redemption: bool = False
    points_used: int = 0

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")
        if self.unit_price.is_negative():
            raise ValueError(f"Unit price cannot be negative: {self.unit_price}")
        if self.is_prize_redemption and not self.unit_price.is_zero():
            raise ValueError("Prize redemption items must have a zero unit price")
        if self.points_used < 0:
            raise ValueError(f"Points used cannot be negative: {self.points_used}")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Monetary invariant holds by construction:
        subtotal = sum(item.line_total)
        total    = subtotal + delivery_fee - discount
    Neither subtotal nor total is stored, so they cannot drift.

    Status only changes through transition_to() and the actions built on
    it, which enforce the lifecycle in fry_core.domain.lifecycle.
    """
    id: str
    order_number: OrderNumber
    customer_id: str
    branch_id: str
    items: List[OrderItem] = field(default_factory=list)
    delivery_fee: Money = field(default_factory=Money.zero)
    discount: Optional[Money] = None
    status: OrderStatus = INITIAL_STATUS
    delivery_type: DeliveryType = DeliveryType.PICKUP
    payment_method: PaymentMethod = PaymentMethod.CASH
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    # Customer / fulfilment details
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    delivery_id: Optional[str] = None
    delivery_address: Optional[str] = None
    delivery_zone: Optional[str] = None
    notes: Optional[str] = None
    coupon_code: Optional[str] = None

    # Back-office flags
    assigned_by_branch: bool = False
    request_approved: bool = False
    transfer_authorized: Optional[bool] = None
    transfer_authorized_by: Optional[str] = None
    transfer_authorized_at: Optional[datetime] = None
    admin_approved: bool = False
    admin_approved_by: Optional[str] = None
    admin_approved_at: Optional[datetime] = None

    # Event collection
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.status = OrderStatus(self.status)
        self.delivery_type = DeliveryType(self.delivery_type)
        self.payment_method = PaymentMethod(self.payment_method)
        if self.discount is None:
            self.discount = Money.zero(self.currency)
        if self.updated_at is None:
            self.updated_at = self.created_at
        self._validate_amounts()

    # =========================================================================
    # MONETARY FIELDS
    # =========================================================================

    @property
    def currency(self) -> str:
        return self.delivery_fee.currency

    @property
    def subtotal(self) -> Money:
        """Sum of all item line totals."""
        total = Money.zero(self.currency)
        for item in self.items:
            total = total + item.line_total
        return total

    @property
    def total(self) -> Money:
        """subtotal + delivery_fee - discount."""
        return self.subtotal + self.delivery_fee - self.discount

    @property
    def total_points_redeemed(self) -> int:
        return sum(item.points_used for item in self.items)

    @property
    def is_prize_order(self) -> bool:
        return any(item.is_prize_redemption for item in self.items)

    def _validate_amounts(self) -> None:
        if self.delivery_fee.is_negative():
            raise ValueError(f"Delivery fee cannot be negative: {self.delivery_fee}")
        if self.discount.is_negative():
            raise ValueError(f"Discount cannot be negative: {self.discount}")
        if self.discount.currency != self.currency:
            raise ValueError(
                f"Discount currency {self.discount.currency} does not match {self.currency}"
            )
        for item in self.items:
            if item.unit_price.currency != self.currency:
                raise ValueError(
                    f"Item {item.product_id} priced in {item.unit_price.currency}, "
                    f"order is in {self.currency}"
                )
        if self.total.is_negative():
            raise ValueError(
                f"Discount {self.discount} exceeds subtotal plus delivery fee"
            )

    # =========================================================================
    # FACTORY
    # =========================================================================

    @classmethod
    def place(
        cls,
        order_id: str,
        order_number: OrderNumber,
        customer_id: str,
        branch_id: str,
        items: List[OrderItem],
        delivery_fee: Money,
        **details: Any,
    ) -> 'Order':
        """
        Create a new pending order at checkout.

        Records OrderPlacedEvent.

        Args:
            order_id: Opaque unique identifier
            order_number: Display code
            customer_id: Customer placing the order
            branch_id: Branch fulfilling the order
            items: Line item snapshots
            delivery_fee: Zone price, zero for pickup
            **details: Remaining optional Order fields

        Returns:
            New Order in pending status
        """
        order = cls(
            id=order_id,
            order_number=order_number,
            customer_id=customer_id,
            branch_id=branch_id,
            items=list(items),
            delivery_fee=delivery_fee,
            status=INITIAL_STATUS,
            **details,
        )
        order._record_event(
            OrderPlacedEvent(
                order_id=order.id,
                order_number=str(order.order_number),
                branch_id=order.branch_id,
                actor_id=order.customer_id,
                customer_id=order.customer_id,
                total=order.total.amount,
                currency=order.currency,
                delivery_type=order.delivery_type.value,
                payment_method=order.payment_method.value,
                points_redeemed=order.total_points_redeemed,
            )
        )
        return order

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def transition_to(
        self,
        new_status: OrderStatus,
        actor_id: Optional[str] = None,
        reason: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> None:
        """
        Move the order to new_status.

        Raises:
            InvalidTransitionError: If the lifecycle forbids the move
        """
        previous_status = self._apply_transition(new_status, at)
        self._record_event(
            OrderStatusChangedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=actor_id,
                previous_status=previous_status.value,
                new_status=self.status.value,
                reason=reason,
            )
        )

    def reject(self, actor_id: Optional[str] = None, reason: Optional[str] = None,
               at: Optional[datetime] = None) -> None:
        """Branch/admin rejection."""
        self.transition_to(OrderStatus.REJECTED, actor_id=actor_id, reason=reason, at=at)

    def cancel(self, customer_id: str, reason: str, at: Optional[datetime] = None) -> None:
        """
        Customer cancellation. Ends in rejected.

        The cancellation window is a service-level rule; the aggregate only
        guards the transition.
        """
        previous_status = self._apply_transition(OrderStatus.REJECTED, at)
        self._record_event(
            OrderCancelledEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=customer_id,
                customer_id=customer_id,
                reason=reason,
                previous_status=previous_status.value,
            )
        )

    def approve(self, admin_id: str, at: Optional[datetime] = None) -> None:
        """Admin approval; moves a pending order to confirmed."""
        at = at or _utcnow()
        self.transition_to(OrderStatus.CONFIRMED, actor_id=admin_id, reason="admin approval", at=at)
        self.admin_approved = True
        self.admin_approved_by = admin_id
        self.admin_approved_at = at
        self._record_event(
            OrderApprovedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=admin_id,
                admin_id=admin_id,
            )
        )

    def authorize_transfer(self, admin_id: str, at: Optional[datetime] = None) -> None:
        """Mark the bank transfer as verified."""
        if self.payment_method != PaymentMethod.TRANSFER:
            raise ValueError(f"Order {self.order_number} is not paid by transfer")
        at = at or _utcnow()
        self.transfer_authorized = True
        self.transfer_authorized_by = admin_id
        self.transfer_authorized_at = at
        self.updated_at = at
        self._record_event(
            TransferAuthorizedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=admin_id,
                admin_id=admin_id,
            )
        )

    def assign_delivery(
        self,
        delivery_id: str,
        assigned_by_branch: Optional[bool] = None,
        at: Optional[datetime] = None,
    ) -> None:
        """Attach a delivery user. Branch assignment also approves the request."""
        self.delivery_id = delivery_id
        if assigned_by_branch is not None:
            self.assigned_by_branch = assigned_by_branch
            if assigned_by_branch:
                self.request_approved = True
        self.updated_at = at or _utcnow()
        self._record_event(
            DeliveryAssignedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=delivery_id,
                delivery_id=delivery_id,
                assigned_by_branch=bool(assigned_by_branch),
            )
        )

    def report_delay(self, delivery_id: str, delay_minutes: int, reason: str) -> None:
        """Delivery user reports a delay; status is unchanged."""
        if delay_minutes <= 0:
            raise ValueError(f"Delay must be positive, got: {delay_minutes}")
        if is_terminal(self.status):
            raise OrderClosedError(self.id, self.status)
        self._record_event(
            OrderDelayedEvent(
                order_id=self.id,
                order_number=str(self.order_number),
                branch_id=self.branch_id,
                actor_id=delivery_id,
                delivery_id=delivery_id,
                delay_minutes=delay_minutes,
                reason=reason,
            )
        )

    def _apply_transition(self, new_status: OrderStatus, at: Optional[datetime]) -> OrderStatus:
        ensure_transition(self.status, new_status)
        previous_status = self.status
        self.status = OrderStatus(new_status)
        self.updated_at = at or _utcnow()
        return previous_status

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            List of domain events (will be published to Event Bus)
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after publishing)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    # =========================================================================
    # SNAPSHOT SUPPORT
    # =========================================================================

    def to_snapshot_dict(self) -> Dict[str, Any]:
        """
        Serialize Order state to dictionary for storage.

        Returns:
            Dictionary containing all Order state (JSON compatible)
        """
        def _iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            'id': self.id,
            'order_number': str(self.order_number),
            'customer_id': self.customer_id,
            'branch_id': self.branch_id,
            'currency': self.currency,
            'items': [
                {
                    'product_id': item.product_id,
                    'product_name': item.product_name,
                    'product_image': item.product_image,
                    'quantity': item.quantity,
                    'unit_price': str(item.unit_price.amount),
                    'selected_drink': item.selected_drink,
                    'is_prize_redemption': item.is_prize_redemption,
                    'points_used': item.points_used,
                }
                for item in self.items
            ],
            'delivery_fee': str(self.delivery_fee.amount),
            'discount': str(self.discount.amount),
            'status': self.status.value,
            'delivery_type': self.delivery_type.value,
            'payment_method': self.payment_method.value,
            'created_at': _iso(self.created_at),
            'updated_at': _iso(self.updated_at),
            'customer_name': self.customer_name,
            'customer_phone': self.customer_phone,
            'delivery_id': self.delivery_id,
            'delivery_address': self.delivery_address,
            'delivery_zone': self.delivery_zone,
            'notes': self.notes,
            'coupon_code': self.coupon_code,
            'assigned_by_branch': self.assigned_by_branch,
            'request_approved': self.request_approved,
            'transfer_authorized': self.transfer_authorized,
            'transfer_authorized_by': self.transfer_authorized_by,
            'transfer_authorized_at': _iso(self.transfer_authorized_at),
            'admin_approved': self.admin_approved,
            'admin_approved_by': self.admin_approved_by,
            'admin_approved_at': _iso(self.admin_approved_at),
        }

    @classmethod
    def from_snapshot_dict(cls, snapshot_data: Dict[str, Any]) -> 'Order':
        """
        Restore Order from snapshot dictionary.

        Args:
            snapshot_data: Dictionary produced by to_snapshot_dict()

        Returns:
            Restored Order instance with no pending events
        """
        def _dt(value: Optional[str]) -> Optional[datetime]:
            return datetime.fromisoformat(value) if value else None

        currency = snapshot_data.get('currency', 'HNL')
        items = [
            OrderItem(
                product_id=item_data['product_id'],
                product_name=item_data['product_name'],
                product_image=item_data.get('product_image', ''),
                quantity=item_data['quantity'],
                unit_price=Money(amount=Decimal(item_data['unit_price']), currency=currency),
                selected_drink=item_data.get('selected_drink'),
                is_prize_redemption=item_data.get('is_prize_redemption', False),
                points_used=item_data.get('points_used', 0),
            )
            for item_data in snapshot_data.get('items', [])
        ]

        return cls(
            id=snapshot_data['id'],
            order_number=OrderNumber(snapshot_data['order_number']),
            customer_id=snapshot_data['customer_id'],
            branch_id=snapshot_data['branch_id'],
            items=items,
            delivery_fee=Money(amount=Decimal(snapshot_data['delivery_fee']), currency=currency),
            discount=Money(amount=Decimal(snapshot_data['discount']), currency=currency),
            status=OrderStatus(snapshot_data['status']),
            delivery_type=DeliveryType(snapshot_data['delivery_type']),
            payment_method=PaymentMethod(snapshot_data['payment_method']),
            created_at=_dt(snapshot_data['created_at']),
            updated_at=_dt(snapshot_data.get('updated_at')),
            customer_name=snapshot_data.get('customer_name'),
            customer_phone=snapshot_data.get('customer_phone'),
            delivery_id=snapshot_data.get('delivery_id'),
            delivery_address=snapshot_data.get('delivery_address'),
            delivery_zone=snapshot_data.get('delivery_zone'),
            notes=snapshot_data.get('notes'),
            coupon_code=snapshot_data.get('coupon_code'),
            assigned_by_branch=snapshot_data.get('assigned_by_branch', False),
            request_approved=snapshot_data.get('request_approved', False),
            transfer_authorized=snapshot_data.get('transfer_authorized'),
            transfer_authorized_by=snapshot_data.get('transfer_authorized_by'),
            transfer_authorized_at=_dt(snapshot_data.get('transfer_authorized_at')),
            admin_approved=snapshot_data.get('admin_approved', False),
            admin_approved_by=snapshot_data.get('admin_approved_by'),
            admin_approved_at=_dt(snapshot_data.get('admin_approved_at')),
        )
