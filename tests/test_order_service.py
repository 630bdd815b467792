"""Tests for order queries and the fulfillment status driver."""
import pytest

from nursery.data.models.user import UserModel
from nursery.domain.errors import ConcurrentUpdate, OrderNotFound
from nursery.domain.schemas import CartItemIn
from nursery.services.checkout_service import CheckoutService
from nursery.services.order_service import OrderService


@pytest.fixture
def place(db, locks, customer, make_product, card, schedule):
    checkout = CheckoutService(db, locks)
    fern = make_product("Fern", stock=20)

    def _place(qty=1):
        return checkout.place_order(
            customer.id, [CartItemIn(product_id=fern.id, quantity=qty)], card, schedule
        )["order_id"]

    return _place


def test_three_advances_reach_delivered_and_fourth_is_noop(db, place):
    order_id = place()
    svc = OrderService(db)

    seen = [svc.advance_fulfillment(order_id).fulfillment_status for _ in range(3)]
    assert seen == ["shipped", "delivered", "delivered"]

    assert svc.advance_fulfillment(order_id).fulfillment_status == "delivered"


def test_advance_does_not_touch_payment_or_totals(db, place):
    order_id = place(qty=2)
    svc = OrderService(db)
    before = svc.repo.get_by_order_id(order_id)
    total, payment_status = before.total, before.payment_status

    after = svc.advance_fulfillment(order_id)

    assert after.fulfillment_status == "shipped"
    assert after.total == total
    assert after.payment_status == payment_status


def test_advance_unknown_order(db):
    with pytest.raises(OrderNotFound):
        OrderService(db).advance_fulfillment("ORD-1-NOPE00000")


def test_lost_status_race_is_reported(db, place, monkeypatch):
    order_id = place()
    svc = OrderService(db)
    monkeypatch.setattr(svc.repo, "update_status", lambda pk, old, new: 0)

    with pytest.raises(ConcurrentUpdate):
        svc.advance_fulfillment(order_id)

    assert svc.repo.get_by_order_id(order_id).fulfillment_status == "processing"


def test_customer_sees_only_own_orders(db, place, customer, admin):
    other = UserModel(name="Ravi", email="ravi@example.com")
    db.add(other)
    db.commit()

    first, second = place(), place()
    svc = OrderService(db)

    assert {o.order_id for o in svc.list_orders(customer)} == {first, second}
    assert svc.list_orders(other) == []
    assert svc.list_orders(other, customer_id=customer.id) == []
    assert len(svc.list_orders(admin)) == 2

    with pytest.raises(PermissionError):
        svc.get_order(first, other)
    assert svc.get_order(first, admin).order_id == first


def test_admin_filters_by_status(db, place, admin):
    shipped, _ = place(), place()
    svc = OrderService(db)
    svc.advance_fulfillment(shipped)

    assert [o.order_id for o in svc.list_orders(admin, status="shipped")] == [shipped]
    assert len(svc.list_orders(admin, status="processing")) == 1
