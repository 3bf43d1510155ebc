"""Tests for value objects."""

from decimal import Decimal

import pytest

from fry_core.domain.value_objects import Money, OrderNumber, format_price


class TestFormatPrice:

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("1234.5"), "1,234.50"),
            (0, "0.00"),
            (Decimal("0.005"), "0.01"),
            (1000000, "1,000,000.00"),
            ("89.999", "90.00"),
        ],
    )
    def test_two_decimals_with_thousands_separator(self, amount, expected):
        assert format_price(amount) == expected

    def test_money_display_uses_currency_symbol(self):
        assert Money(Decimal("1234.5")).display() == "L. 1,234.50"
        assert Money(Decimal("3"), "USD").display() == "$ 3.00"
        assert Money(Decimal("3"), "EUR").display() == "EUR 3.00"


class TestMoney:

    def test_converts_to_decimal(self):
        assert Money(10).amount == Decimal("10")

    def test_arithmetic(self):
        a = Money(Decimal("10.50"))
        b = Money(Decimal("4.25"))

        assert a + b == Money(Decimal("14.75"))
        assert a - b == Money(Decimal("6.25"))
        assert b * 4 == Money(Decimal("17.00"))

    def test_currency_mismatch(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "HNL") + Money(Decimal("1"), "USD")

    def test_invalid_currency(self):
        with pytest.raises(ValueError):
            Money(Decimal("1"), "LEMPIRA")


class TestOrderNumber:

    def test_from_sequence(self):
        number = OrderNumber.from_sequence(42)

        assert str(number) == "FRY-000042"
        assert number.prefix == "FRY"
        assert number.sequence == 42

    def test_sequence_can_outgrow_padding(self):
        assert str(OrderNumber.from_sequence(1234567, prefix="ABC")) == "ABC-1234567"

    @pytest.mark.parametrize("value", ["", "FRY-1", "fry-000001", "FRY000001"])
    def test_invalid_format(self, value):
        with pytest.raises(ValueError):
            OrderNumber(value)

    def test_sequence_must_be_positive(self):
        with pytest.raises(ValueError):
            OrderNumber.from_sequence(0)
