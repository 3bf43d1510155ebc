"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "HNL": "L.",
    "USD": "$",
}


def format_price(amount) -> str:
    """
    Format an amount with two decimals and comma thousands separators.

    Examples:
        1234.5   -> "1,234.50"
        0        -> "0.00"
        -1000000 -> "-1,000,000.00"
    """
    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{value:,.2f}"


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    Order amounts (subtotal, delivery fee, discount, total) are never
    negative, but Money itself allows negatives so intermediate
    arithmetic stays closed.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "HNL"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    @classmethod
    def zero(cls, currency: str = "HNL") -> 'Money':
        return cls(amount=Decimal("0.00"), currency=currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def __add__(self, other: 'Money') -> 'Money':
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        """Subtract two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot subtract different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def __mul__(self, quantity: int) -> 'Money':
        """Multiply by an item quantity."""
        return Money(amount=self.amount * quantity, currency=self.currency)

    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self.amount < 0

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == 0

    def display(self) -> str:
        """Human-readable amount, e.g. "L. 1,234.50"."""
        symbol = CURRENCY_SYMBOLS.get(self.currency, self.currency)
        return f"{symbol} {format_price(self.amount)}"
