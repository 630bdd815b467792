# nursery/services/analytics_service.py
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from sqlalchemy.orm import Session

from nursery.domain.pricing import money
from nursery.repos.consultation_repo import ConsultationRepo
from nursery.repos.order_repo import OrderRepo
from nursery.repos.product_repo import ProductRepo
from nursery.repos.user_repo import UserRepo

RECENT_ORDERS = 5

#ile okresow wstecz pokazuje wykres (lacznie z biezacym)
SERIES_LENGTH = {"daily": 7, "monthly": 6, "yearly": 3}


def _as_utc(value: datetime) -> datetime:
    # sqlite oddaje naiwne daty, zapisujemy zawsze UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _buckets(timeframe: str, now: datetime) -> Tuple[datetime, List[Tuple[str, str]]]:
    """Poczatek okna i lista (klucz, etykieta) od najstarszego okresu."""
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    count = SERIES_LENGTH[timeframe]

    if timeframe == "daily":
        days = [today - timedelta(days=i) for i in range(count - 1, -1, -1)]
        return days[0], [(d.strftime("%Y-%m-%d"), d.strftime("%Y-%m-%d")) for d in days]

    if timeframe == "monthly":
        months = []
        for i in range(count - 1, -1, -1):
            year, month = divmod(today.year * 12 + today.month - 1 - i, 12)
            months.append(today.replace(year=year, month=month + 1, day=1))
        return months[0], [(m.strftime("%Y-%m"), m.strftime("%b %Y")) for m in months]

    years = [today.replace(year=today.year - i, month=1, day=1) for i in range(count - 1, -1, -1)]
    return years[0], [(str(y.year), str(y.year)) for y in years]


def _bucket_key(timeframe: str, created_at: datetime) -> str:
    if timeframe == "daily":
        return created_at.strftime("%Y-%m-%d")
    if timeframe == "monthly":
        return created_at.strftime("%Y-%m")
    return str(created_at.year)


class AnalyticsService:
    """Tylko odczyt - liczniki, przychod i serie do wykresow panelu admina."""

    def __init__(self, db: Session):
        self.orders = OrderRepo(db)
        self.products = ProductRepo(db)
        self.users = UserRepo(db)
        self.consultations = ConsultationRepo(db)

    def dashboard(self) -> Dict[str, Any]:
        return {
            "stats": {
                "total_customers": self.users.count_customers(),
                "total_products": self.products.count_products(),
                "total_orders": self.orders.count_orders(),
                "completed_orders": self.orders.count_orders(payment_status="completed"),
                "total_revenue": money(self.orders.sum_revenue()),
                "pending_consultations": self.consultations.count_consultations(status="pending"),
            },
            "recent_orders": self.orders.list_orders(limit=RECENT_ORDERS),
        }

    def revenue_breakdown(self, now: datetime | None = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        periods = [
            ("Today", today),
            ("This Month", today.replace(day=1)),
            ("This Year", today.replace(month=1, day=1)),
        ]
        return {
            "breakdown": [
                {
                    "period": label,
                    "revenue": money(self.orders.sum_revenue(since=start)),
                    "orders": self.orders.count_orders(payment_status="completed", since=start),
                }
                for label, start in periods
            ]
        }

    def series(self, timeframe: str = "daily", metric: str = "revenue", now: datetime | None = None) -> Dict[str, Any]:
        """
        Seria do wykresu: ostatnie 7 dni / 6 miesiecy / 3 lata, okresy bez zamowien = 0.

        revenue   - suma total zamowien oplaconych (completed)
        orders    - liczba wszystkich zamowien
        customers - liczba roznych klientow, ktorzy zamowili w okresie
        """
        if timeframe not in SERIES_LENGTH:
            raise ValueError(f"Unknown timeframe: {timeframe}")
        if metric not in ("revenue", "orders", "customers"):
            raise ValueError(f"Unknown metric: {metric}")

        now = now or datetime.now(timezone.utc)
        start, buckets = _buckets(timeframe, now)

        payment_status = "completed" if metric == "revenue" else None
        revenue = defaultdict(Decimal)
        orders = defaultdict(int)
        customers = defaultdict(set)
        for created_at, total, customer_id in self.orders.order_facts_since(start, payment_status):
            key = _bucket_key(timeframe, _as_utc(created_at))
            revenue[key] += total
            orders[key] += 1
            customers[key].add(customer_id)

        if metric == "revenue":
            values = [money(revenue[key]) for key, _ in buckets]
        elif metric == "orders":
            values = [Decimal(orders[key]) for key, _ in buckets]
        else:
            values = [Decimal(len(customers[key])) for key, _ in buckets]

        return {"labels": [label for _, label in buckets], "values": values}

    def category_revenue(self) -> List[Dict[str, Any]]:
        return [
            {"category": category, "revenue": money(revenue), "orders": orders}
            for category, revenue, orders in self.orders.revenue_by_category()
        ]

    def analytics(self, timeframe: str = "daily", metric: str = "revenue", now: datetime | None = None) -> Dict[str, Any]:
        now = now or datetime.now(timezone.utc)
        return {
            "timeframe": timeframe,
            "metric": metric,
            "chart": self.series(timeframe, metric, now=now),
            "breakdown": self.revenue_breakdown(now=now)["breakdown"],
            "categories": self.category_revenue(),
        }
