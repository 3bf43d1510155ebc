"""Tests for the order status state machine."""

import pytest

from fry_core.domain.enums import OrderStatus
from fry_core.domain.errors import InvalidTransitionError
from fry_core.domain.lifecycle import (
    FORWARD_PATH,
    INITIAL_STATUS,
    can_transition,
    ensure_transition,
    is_terminal,
    next_status,
)


NON_TERMINAL = [s for s in OrderStatus if s not in (OrderStatus.DELIVERED, OrderStatus.REJECTED)]


def test_orders_start_pending():
    assert INITIAL_STATUS == OrderStatus.PENDING


def test_forward_path():
    assert [s.value for s in FORWARD_PATH] == [
        "pending", "confirmed", "preparing", "ready", "dispatched", "delivered",
    ]


@pytest.mark.parametrize("current", NON_TERMINAL)
def test_successor_and_rejected_are_the_only_allowed_moves(current):
    allowed = {s for s in OrderStatus if can_transition(current, s)}

    assert allowed == {next_status(current), OrderStatus.REJECTED}


@pytest.mark.parametrize("terminal", [OrderStatus.DELIVERED, OrderStatus.REJECTED])
def test_terminal_statuses_allow_nothing(terminal):
    assert is_terminal(terminal)
    assert next_status(terminal) is None
    assert not any(can_transition(terminal, s) for s in OrderStatus)


def test_accepts_string_values():
    assert can_transition("pending", "confirmed")
    assert not can_transition("pending", "ready")


def test_ensure_transition_allows_successor():
    ensure_transition(OrderStatus.READY, OrderStatus.DISPATCHED)


@pytest.mark.parametrize(
    "current, requested",
    [
        (OrderStatus.PENDING, OrderStatus.DELIVERED),
        (OrderStatus.PREPARING, OrderStatus.CONFIRMED),
        (OrderStatus.READY, OrderStatus.READY),
        (OrderStatus.DELIVERED, OrderStatus.REJECTED),
        (OrderStatus.REJECTED, OrderStatus.PENDING),
    ],
)
def test_ensure_transition_rejects_invalid_moves(current, requested):
    with pytest.raises(InvalidTransitionError) as exc_info:
        ensure_transition(current, requested)

    assert exc_info.value.current == current
    assert exc_info.value.requested == requested
    assert f"{current.value} -> {requested.value}" in str(exc_info.value)


def test_ensure_transition_rejects_unknown_status():
    with pytest.raises(InvalidTransitionError):
        ensure_transition(OrderStatus.PENDING, "teleported")
