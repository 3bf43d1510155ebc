"""Tests for LoyaltyService."""

from decimal import Decimal

import pytest

from fry_core.application.services import LoyaltyService
from fry_core.domain.entities.points import UserPoints
from fry_core.domain.enums import OrderStatus
from fry_core.domain.errors import InsufficientPointsError
from fry_core.settings import PointsSettings

from factories import make_item, make_order


@pytest.mark.parametrize(
    "price, expected",
    [(Decimal("89.00"), 890), (Decimal("12.34"), 123), (Decimal("12.35"), 124), ("0", 0)],
)
def test_points_required_for_rounds_half_up(loyalty_service, price, expected):
    assert loyalty_service.points_required_for(price) == expected


def test_is_redeemable(loyalty_service, points_repository):
    assert loyalty_service.is_redeemable("prizes")
    assert not loyalty_service.is_redeemable("drinks")

    disabled = LoyaltyService(
        points_repository,
        PointsSettings(enabled=False, redeemable_categories=["prizes"]),
    )
    assert not disabled.is_redeemable("prizes")


@pytest.mark.asyncio
async def test_new_customer_has_zero_balance(loyalty_service):
    points = await loyalty_service.get_points("new-customer")

    assert points.available_points == 0
    assert points.total_points == 0


@pytest.mark.asyncio
async def test_add_points_increments_available_and_total(loyalty_service):
    await loyalty_service.add_points("c-1", 150)
    points = await loyalty_service.add_points("c-1", 50)

    assert points.available_points == 200
    assert points.total_points == 200


@pytest.mark.asyncio
async def test_redeem_points_returns_currency_value(loyalty_service, points_repository):
    await points_repository.save(UserPoints(user_id="c-1", available_points=1000, total_points=1500))

    value = await loyalty_service.redeem_points("c-1", 255)

    assert value == 25
    points = await loyalty_service.get_points("c-1")
    assert points.available_points == 745
    assert points.total_points == 1500


@pytest.mark.asyncio
async def test_redeem_more_than_available_raises(loyalty_service):
    await loyalty_service.add_points("c-1", 100)

    with pytest.raises(InsufficientPointsError) as exc_info:
        await loyalty_service.redeem_points("c-1", 101)

    assert exc_info.value.required == 101
    assert exc_info.value.available == 100
    assert (await loyalty_service.get_points("c-1")).available_points == 100


@pytest.mark.asyncio
async def test_can_redeem_and_points_needed(loyalty_service):
    await loyalty_service.add_points("c-1", 500)

    assert await loyalty_service.can_redeem("c-1", Decimal("50.00"))
    assert not await loyalty_service.can_redeem("c-1", Decimal("80.00"))
    assert await loyalty_service.points_needed("c-1", Decimal("80.00")) == 300
    assert await loyalty_service.points_needed("c-1", Decimal("10.00")) == 0


class TestEarnFromOrder:

    @pytest.mark.asyncio
    async def test_delivered_order_earns_floor_of_total(self, loyalty_service):
        order = make_order(status=OrderStatus.DELIVERED, items=[make_item("199.99")], delivery_fee="30.00")

        earned = await loyalty_service.earn_from_order(order)

        assert earned == 229
        assert (await loyalty_service.get_points("customer-1")).available_points == 229

    @pytest.mark.asyncio
    async def test_undelivered_order_earns_nothing(self, loyalty_service):
        order = make_order(status=OrderStatus.DISPATCHED)

        assert await loyalty_service.earn_from_order(order) == 0
        assert (await loyalty_service.get_points("customer-1")).total_points == 0

    @pytest.mark.asyncio
    async def test_disabled_program_earns_nothing(self, points_repository):
        service = LoyaltyService(points_repository, PointsSettings(enabled=False))
        order = make_order(status=OrderStatus.DELIVERED)

        assert await service.earn_from_order(order) == 0
