"""
Order status state machine.

Forward path:
    pending -> confirmed -> preparing -> ready -> dispatched -> delivered

Any non-terminal status may also move to rejected. delivered and rejected
are terminal.
"""
from typing import Optional, Tuple

from .enums import OrderStatus
from .errors import InvalidTransitionError

FORWARD_PATH: Tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.DISPATCHED,
    OrderStatus.DELIVERED,
)

INITIAL_STATUS = OrderStatus.PENDING

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.REJECTED})


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    """Immediate successor on the forward path, or None."""
    status = OrderStatus(status)
    if status not in FORWARD_PATH:
        return None
    index = FORWARD_PATH.index(status)
    if index + 1 >= len(FORWARD_PATH):
        return None
    return FORWARD_PATH[index + 1]


def is_terminal(status: OrderStatus) -> bool:
    return OrderStatus(status) in TERMINAL_STATUSES


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    """
    Check whether current -> requested is allowed.

    Args:
        current: Status the order is in now
        requested: Status the caller wants to write

    Returns:
        True if requested is rejected (from a non-terminal status) or the
        immediate forward successor of current
    """
    current = OrderStatus(current)
    requested = OrderStatus(requested)

    if current in TERMINAL_STATUSES:
        return False
    if requested == OrderStatus.REJECTED:
        return True
    return next_status(current) == requested


def ensure_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """
    Validate a status transition.

    Raises:
        InvalidTransitionError: If requested is not reachable from current
    """
    try:
        allowed = can_transition(current, requested)
    except ValueError:
        allowed = False
    if not allowed:
        raise InvalidTransitionError(current, requested)
