"""Tests for the shopping cart."""

from decimal import Decimal

import pytest

from fry_core.domain.entities.cart import Cart, CartExtra, ProductSnapshot
from fry_core.domain.value_objects import Money


def product(id="combo", price="100.00", **kwargs):
    return ProductSnapshot(id=id, name=kwargs.pop("name", id.title()), price=Money(Decimal(price)), **kwargs)


@pytest.fixture
def cart():
    return Cart()


def test_new_cart_is_empty(cart):
    assert cart.is_empty()
    assert cart.subtotal() == Money.zero()
    assert cart.item_count == 0


def test_extras_are_added_per_unit(cart):
    fries = CartExtra(product=product("fries", "25.00"), quantity=2)
    cart.add_item(product("combo", "100.00"), extras=[fries], quantity=3)

    # (100 + 2 x 25) x 3
    assert cart.subtotal() == Money(Decimal("450.00"))
    assert cart.item_count == 3


def test_prize_items_cost_points_not_money(cart):
    cart.add_item(product("combo", "100.00"))
    cart.add_item(product("wings", "80.00", points_required=800), is_prize=True)

    assert cart.subtotal() == Money(Decimal("100.00"))
    assert cart.points_required() == 800
    assert [item.product.id for item in cart.prize_items()] == ["wings"]


def test_update_quantity(cart):
    item = cart.add_item(product())

    cart.update_quantity(item.id, 4)

    assert cart.items[0].quantity == 4


@pytest.mark.parametrize("quantity", [0, -1])
def test_update_quantity_below_one_removes_line(cart, quantity):
    item = cart.add_item(product())

    cart.update_quantity(item.id, quantity)

    assert cart.is_empty()


def test_remove_and_clear(cart):
    first = cart.add_item(product("a"))
    cart.add_item(product("b"))

    cart.remove_item(first.id)
    assert [item.product.id for item in cart.items] == ["b"]

    cart.clear()
    assert cart.is_empty()


def test_rejects_other_currency(cart):
    with pytest.raises(ValueError):
        cart.add_item(ProductSnapshot(id="x", name="X", price=Money(Decimal("1"), "USD")))


def test_rejects_non_positive_quantity(cart):
    with pytest.raises(ValueError):
        cart.add_item(product(), quantity=0)


def test_to_order_items_freezes_prices(cart):
    drink = product("cola", "20.00", name="Cola")
    cart.add_item(
        product("combo", "100.00"),
        selected_drink=drink,
        extras=[CartExtra(product=product("sauce", "10.00"))],
        quantity=2,
    )
    cart.add_item(product("wings", "80.00", points_required=800), is_prize=True)

    items = cart.to_order_items()

    assert items[0].unit_price == Money(Decimal("110.00"))
    assert items[0].line_total == Money(Decimal("220.00"))
    assert items[0].selected_drink == "Cola"
    assert items[1].is_prize_redemption
    assert items[1].unit_price.is_zero()
    assert items[1].points_used == 800
