"""Tests for admin chart series and category revenue."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from nursery.data.models.order import OrderModel
from nursery.data.models.user import UserModel
from nursery.domain.schemas import CartItemIn, UpiPaymentIn
from nursery.services.analytics_service import AnalyticsService
from nursery.services.checkout_service import CheckoutService

NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def place(db, locks, card, schedule):
    def _place(customer, product, quantity=1, payment=None, created_at=None):
        result = CheckoutService(db, locks).place_order(
            customer.id,
            [CartItemIn(product_id=product.id, quantity=quantity)],
            payment or card,
            schedule,
        )
        order = db.query(OrderModel).filter_by(order_id=result["order_id"]).one()
        if created_at is not None:
            order.created_at = created_at
        db.commit()
        return order

    return _place


def test_daily_series_is_zero_filled(db, customer, make_product, place):
    fern = make_product("Fern", price="100.00", stock=10)
    place(customer, fern, 2, created_at=NOW)
    place(customer, fern, 2, created_at=NOW - timedelta(days=2))
    place(customer, fern, 2, created_at=NOW - timedelta(days=30))

    series = AnalyticsService(db).series("daily", "revenue", now=NOW)

    assert series["labels"] == [(NOW - timedelta(days=i)).strftime("%Y-%m-%d") for i in range(6, -1, -1)]
    assert series["values"] == [Decimal("0.00")] * 4 + [Decimal("286.00"), Decimal("0.00"), Decimal("286.00")]


def test_monthly_series_crosses_year_boundary(db, customer, make_product, place):
    fern = make_product("Fern", price="100.00", stock=10)
    place(customer, fern, created_at=datetime(2026, 5, 3, tzinfo=timezone.utc))
    place(customer, fern, created_at=datetime(2026, 10, 1, tzinfo=timezone.utc))
    place(customer, fern, created_at=datetime(2026, 10, 2, tzinfo=timezone.utc))

    series = AnalyticsService(db).series("monthly", "orders", now=datetime(2027, 2, 10, tzinfo=timezone.utc))

    assert series["labels"] == ["Sep 2026", "Oct 2026", "Nov 2026", "Dec 2026", "Jan 2027", "Feb 2027"]
    assert series["values"] == [0, 2, 0, 0, 0, 0]


def test_yearly_customers_counts_distinct_buyers(db, customer, make_product, place):
    other = UserModel(name="Ravi", email="ravi@example.com")
    db.add(other)
    db.commit()
    fern = make_product("Fern", stock=10)
    place(customer, fern, created_at=NOW)
    place(customer, fern, created_at=NOW - timedelta(days=1))
    place(other, fern, created_at=NOW)
    place(other, fern, created_at=datetime(2025, 3, 1, tzinfo=timezone.utc))

    series = AnalyticsService(db).series("yearly", "customers", now=NOW)

    assert series["labels"] == ["2024", "2025", "2026"]
    assert series["values"] == [0, 1, 2]


def test_unknown_timeframe_or_metric(db):
    service = AnalyticsService(db)
    with pytest.raises(ValueError):
        service.series("weekly", "revenue", now=NOW)
    with pytest.raises(ValueError):
        service.series("daily", "profit", now=NOW)


def test_category_revenue_uses_order_snapshots(db, customer, make_product, place):
    fern = make_product("Fern", price="100.00", stock=10, category="indoor")
    palm = make_product("Palm", price="40.00", stock=10, category="outdoor")
    place(customer, fern, 2)
    place(customer, palm, 1, payment=UpiPaymentIn(method="upi", upi_id="asha@okbank", upi_app="gpay"))
    place(customer, fern, 1)

    fern.price = Decimal("999.00")
    db.commit()

    categories = AnalyticsService(db).category_revenue()

    assert categories == [
        {"category": "indoor", "revenue": Decimal("300.00"), "orders": 2},
        {"category": "outdoor", "revenue": Decimal("40.00"), "orders": 1},
    ]
