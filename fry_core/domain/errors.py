"""
Domain errors.

Value objects keep raising ValueError for malformed input; these are the
business-rule failures that callers are expected to handle.
"""
from typing import Any


class DomainError(Exception):
    """Base class for all domain errors."""


class InvalidTransitionError(DomainError):
    """Requested status is not reachable from the current one."""

    def __init__(self, current: Any, requested: Any):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid status transition: {_status_value(current)} -> {_status_value(requested)}"
        )


class MalformedTimestampError(DomainError):
    """A creation timestamp could not be parsed into an instant."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Malformed timestamp: {value!r}")


class OrderNotFoundError(DomainError):
    """No order exists with the given id."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order not found: {order_id}")


class CheckoutValidationError(DomainError):
    """The cart or checkout details cannot produce an order."""


class InsufficientPointsError(DomainError):
    """Customer does not hold enough loyalty points."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient points: {required} required, {available} available"
        )


class OrderClosedError(DomainError):
    """Action requires an open order but the order is delivered or rejected."""

    def __init__(self, order_id: str, status: Any):
        self.order_id = order_id
        self.status = status
        super().__init__(f"Order {order_id} is closed ({_status_value(status)})")


class CancellationWindowExpiredError(DomainError):
    """Customer tried to cancel after the allowed window."""

    def __init__(self, order_id: str, window_minutes: int):
        self.order_id = order_id
        self.window_minutes = window_minutes
        super().__init__(
            f"Order {order_id} can only be cancelled within the first {window_minutes} minutes"
        )


def _status_value(status: Any) -> Any:
    return getattr(status, "value", status)
