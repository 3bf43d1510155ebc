"""
Order prioritisation for order-list views.

Orders needing attention surface first: ascending status rank, then
oldest first within a rank. Works on any record exposing ``status`` and
``created_at`` (entities, DTOs, API payload objects).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Protocol, Tuple, TypeVar

from .enums import OrderStatus
from .errors import MalformedTimestampError

logger = logging.getLogger(__name__)

STATUS_PRIORITY: Dict[OrderStatus, int] = {
    OrderStatus.PENDING: 1,
    OrderStatus.CONFIRMED: 1,
    OrderStatus.PREPARING: 2,
    OrderStatus.READY: 3,
    OrderStatus.DISPATCHED: 4,
    OrderStatus.DELIVERED: 5,
    OrderStatus.REJECTED: 6,
}

# Rank for statuses missing from the table; keeps unknown values sortable.
UNRANKED_PRIORITY = 999

_LATEST = datetime.max.replace(tzinfo=timezone.utc)


class SortableOrder(Protocol):
    """Minimal shape the sorter needs."""

    status: Any
    created_at: Any


T = TypeVar("T", bound=SortableOrder)


def status_rank(status: Any) -> int:
    """
    Display-priority rank of a status.

    Args:
        status: OrderStatus or its string value

    Returns:
        Rank from STATUS_PRIORITY, or UNRANKED_PRIORITY for anything else
    """
    try:
        return STATUS_PRIORITY[OrderStatus(status)]
    except (ValueError, TypeError, KeyError):
        return UNRANKED_PRIORITY


def parse_timestamp(value: Any) -> datetime:
    """
    Convert a creation timestamp into an aware UTC instant.

    Accepts datetime objects and ISO 8601 strings (trailing "Z" allowed).
    Naive values are taken as UTC.

    Raises:
        MalformedTimestampError: If the value is not a parsable instant
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise MalformedTimestampError(value) from e
    else:
        raise MalformedTimestampError(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        # Offset pushes the instant outside the representable UTC range
        raise MalformedTimestampError(value) from e


def _sort_key(order: SortableOrder) -> Tuple[int, int, datetime]:
    rank = status_rank(getattr(order, "status", None))
    try:
        created_at = parse_timestamp(getattr(order, "created_at", None))
    except MalformedTimestampError as e:
        logger.warning(
            f"Order {getattr(order, 'id', '?')} has a malformed created_at, "
            f"sorting it last within rank {rank}: {e}"
        )
        return (rank, 1, _LATEST)
    return (rank, 0, created_at)


def sort_orders_by_priority_and_time(orders: Iterable[T]) -> List[T]:
    """
    Return a new list of orders in display order.

    Ordering:
        1. ascending status rank (pending/confirmed first, rejected last,
           unknown statuses after every known one)
        2. ascending creation instant within a rank

    The input is never modified. Python's sort is stable, so records with
    equal rank and instant keep their input order. Never raises: records
    with malformed timestamps are logged and placed after the well-formed
    records of the same rank.
    """
    return sorted(list(orders), key=_sort_key)
