"""Application service for checkout."""

import logging
import uuid
from typing import Optional

from fry_core.application.dtos.order_dto import OrderDTO, PlaceOrderRequest, ProductDTO
from fry_core.application.mappers import order_to_dto
from fry_core.application.services.loyalty_service import LoyaltyService
from fry_core.domain.entities.cart import Cart, CartExtra, ProductSnapshot
from fry_core.domain.entities.order import Order
from fry_core.domain.enums import DeliveryType, PaymentMethod
from fry_core.domain.errors import CheckoutValidationError
from fry_core.domain.event_bus import EventBus
from fry_core.domain.repositories.order_repository import OrderRepository
from fry_core.domain.value_objects import Money, OrderNumber
from fry_core.settings import OrderSettings


logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Turns a submitted cart into a pending order.

    Flow:
    1. Build the cart (prize lines priced in points)
    2. Validate delivery and payment details
    3. Allocate the order number and build the order
    4. Redeem the points for prize lines, then save the order
    5. Publish OrderPlacedEvent
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        event_bus: EventBus,
        loyalty_service: LoyaltyService,
        settings: OrderSettings,
    ) -> None:
        self._orders = order_repository
        self._event_bus = event_bus
        self._loyalty = loyalty_service
        self._settings = settings

    async def place_order(self, request: PlaceOrderRequest) -> OrderDTO:
        """Place an order from a checkout request.

        Raises:
            CheckoutValidationError: Empty cart, missing delivery/payment details,
                or a prize line the points program does not allow
            InsufficientPointsError: Not enough points for the prize lines
        """
        cart = self._build_cart(request)
        self._validate(request, cart)

        currency = self._settings.currency
        delivery_fee = (
            Money(request.delivery_fee, currency)
            if request.delivery_type == DeliveryType.DELIVERY
            else Money.zero(currency)
        )

        sequence = await self._orders.count() + 1
        order = Order.place(
            order_id=str(uuid.uuid4()),
            order_number=OrderNumber.from_sequence(sequence, prefix=self._settings.number_prefix),
            customer_id=request.customer_id,
            branch_id=request.branch_id,
            items=cart.to_order_items(),
            delivery_fee=delivery_fee,
            delivery_type=request.delivery_type,
            payment_method=request.payment_method,
            delivery_zone=request.delivery_zone,
            delivery_address=request.delivery_address,
            customer_name=request.customer_name,
            customer_phone=request.customer_phone,
            notes=request.notes,
            coupon_code=request.coupon_code,
            transfer_authorized=(
                False if request.payment_method == PaymentMethod.TRANSFER else None
            ),
        )

        points_required = cart.points_required()
        if points_required:
            await self._loyalty.redeem_points(request.customer_id, points_required)

        await self._orders.save(order)
        await self._event_bus.publish_all(order.get_domain_events())
        order.clear_domain_events()

        logger.info(
            f"Order placed: {order.order_number} for {order.customer_id} "
            f"({order.total.display()}, {len(order.items)} items)"
        )
        return order_to_dto(order)

    def _build_cart(self, request: PlaceOrderRequest) -> Cart:
        cart = Cart(currency=self._settings.currency)
        for line in request.items:
            if line.is_prize_redemption and not self._loyalty.is_redeemable(line.product.category_id):
                raise CheckoutValidationError(
                    f"Product {line.product.id} cannot be redeemed with points"
                )
            points = (
                self._loyalty.points_required_for(line.product.price)
                if line.is_prize_redemption
                else None
            )
            cart.add_item(
                self._snapshot(line.product, points_required=points, is_prize=line.is_prize_redemption),
                selected_drink=self._snapshot(line.selected_drink) if line.selected_drink else None,
                extras=[
                    CartExtra(product=self._snapshot(extra.product), quantity=extra.quantity)
                    for extra in line.extras
                ],
                notes=line.notes,
                is_prize=line.is_prize_redemption,
                quantity=line.quantity,
            )
        return cart

    def _snapshot(
        self,
        product: ProductDTO,
        points_required: Optional[int] = None,
        is_prize: bool = False,
    ) -> ProductSnapshot:
        return ProductSnapshot(
            id=product.id,
            name=product.name,
            price=Money(product.price, self._settings.currency),
            category_id=product.category_id,
            image=product.image,
            is_prize=is_prize,
            points_required=points_required,
        )

    @staticmethod
    def _validate(request: PlaceOrderRequest, cart: Cart) -> None:
        if cart.is_empty():
            raise CheckoutValidationError("Cart is empty")
        if request.delivery_type == DeliveryType.DELIVERY:
            if not request.delivery_zone:
                raise CheckoutValidationError("Delivery orders require a delivery zone")
            if not (request.delivery_address or "").strip():
                raise CheckoutValidationError("Delivery orders require a delivery address")
        if request.payment_method == PaymentMethod.TRANSFER and not request.receipt_sent:
            raise CheckoutValidationError("Transfer payments require the receipt to be sent")
