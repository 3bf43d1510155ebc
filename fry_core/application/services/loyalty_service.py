"""Application service for loyalty points."""

import logging
from decimal import Decimal, ROUND_HALF_UP, ROUND_FLOOR
from typing import Union

from fry_core.domain.entities.order import Order
from fry_core.domain.entities.points import UserPoints
from fry_core.domain.enums import OrderStatus
from fry_core.domain.errors import InsufficientPointsError
from fry_core.domain.repositories.points_repository import PointsRepository
from fry_core.domain.value_objects import Money
from fry_core.settings import PointsSettings


logger = logging.getLogger(__name__)

Price = Union[Money, Decimal, int, float, str]


class LoyaltyService:
    """
    Earning and spending of loyalty points.

    Rules:
    - Prizes cost round(price x conversion_rate) points, half-up
    - Delivered orders earn floor(total) points (1 currency unit = 1 point)
    - Redeeming N points is worth floor(N / conversion_rate) currency units
    """

    def __init__(self, points_repository: PointsRepository, settings: PointsSettings) -> None:
        self._points = points_repository
        self._settings = settings

    @property
    def conversion_rate(self) -> int:
        return self._settings.conversion_rate

    def points_required_for(self, price: Price) -> int:
        """Points needed to redeem a product of the given price."""
        amount = price.amount if isinstance(price, Money) else Decimal(str(price))
        points = (amount * self.conversion_rate).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(points)

    def is_redeemable(self, category_id: str) -> bool:
        return self._settings.enabled and category_id in self._settings.redeemable_categories

    async def get_points(self, user_id: str) -> UserPoints:
        """Stored balance, or an empty one for new customers."""
        points = await self._points.get(user_id)
        return points if points is not None else UserPoints(user_id=user_id)

    async def can_redeem(self, user_id: str, price: Price) -> bool:
        points = await self.get_points(user_id)
        return points.available_points >= self.points_required_for(price)

    async def points_needed(self, user_id: str, price: Price) -> int:
        """How many more points the customer needs; never negative."""
        points = await self.get_points(user_id)
        return max(0, self.points_required_for(price) - points.available_points)

    async def add_points(self, user_id: str, amount: int) -> UserPoints:
        points = await self.get_points(user_id)
        points.credit(amount)
        await self._points.save(points)
        logger.info(f"Added {amount} points to {user_id} (available: {points.available_points})")
        return points

    async def redeem_points(self, user_id: str, amount: int) -> int:
        """
        Spend points.

        Args:
            user_id: Customer spending the points
            amount: Points to spend

        Returns:
            Currency value of the spent points

        Raises:
            InsufficientPointsError: If the balance is too low
        """
        points = await self.get_points(user_id)
        if amount > points.available_points:
            raise InsufficientPointsError(required=amount, available=points.available_points)

        points.debit(amount)
        await self._points.save(points)
        logger.info(f"Redeemed {amount} points for {user_id} (available: {points.available_points})")
        return amount // self.conversion_rate

    async def earn_from_order(self, order: Order) -> int:
        """Credit points for a delivered order. Returns the points earned."""
        if not self._settings.enabled or order.status != OrderStatus.DELIVERED:
            return 0

        earned = int(order.total.amount.to_integral_value(rounding=ROUND_FLOOR))
        if earned <= 0:
            return 0

        await self.add_points(order.customer_id, earned)
        logger.info(f"Order {order.order_number} earned {earned} points for {order.customer_id}")
        return earned
