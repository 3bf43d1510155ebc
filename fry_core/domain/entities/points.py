"""Loyalty points balance."""
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class UserPoints:
    """
    Points held by one customer.

    available_points: spendable balance
    total_points: lifetime points earned (never decreases)
    """
    user_id: str
    available_points: int = 0
    total_points: int = 0
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.available_points < 0 or self.total_points < 0:
            raise ValueError(f"Points cannot be negative for user {self.user_id}")

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot credit negative points: {amount}")
        self.available_points += amount
        self.total_points += amount
        self.last_updated = datetime.now(timezone.utc)

    def debit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot debit negative points: {amount}")
        if amount > self.available_points:
            raise ValueError(
                f"Cannot debit {amount} points, only {self.available_points} available"
            )
        self.available_points -= amount
        self.last_updated = datetime.now(timezone.utc)
