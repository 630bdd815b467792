"""Tests for the fulfillment status table."""
import pytest

from nursery.domain.fulfillment import NEXT_STATUS, FulfillmentStatus, is_terminal, next_status


def test_sequence_moves_one_step_at_a_time():
    assert next_status("processing") == FulfillmentStatus.SHIPPED
    assert next_status("shipped") == FulfillmentStatus.DELIVERED


def test_delivered_is_terminal():
    assert next_status("delivered") == FulfillmentStatus.DELIVERED
    assert is_terminal("delivered")
    assert not is_terminal("processing")


def test_no_transition_moves_backward():
    order = list(FulfillmentStatus)
    for current, target in NEXT_STATUS.items():
        assert order.index(target) - order.index(current) in (0, 1)


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        next_status("lost")
