"""Pytest fixtures: SQLite in-memory store, in-memory checkout locks, eager Celery."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from nursery.api.deps import get_lock_service
from nursery.data.database import Base, SessionLocal, engine
from nursery.data.models.product import ProductModel
from nursery.data.models.user import UserModel
from nursery.domain.schemas import CardPaymentIn, ScheduleIn
from nursery.main import app


class InMemoryLocks:
    """Same contract as LockService, without Redis."""

    def __init__(self):
        self.held = {}

    def acquire_checkout_lock(self, customer_id: int, token: str, ttl: int) -> bool:
        if customer_id in self.held:
            return False
        self.held[customer_id] = token
        return True

    def release_checkout_lock(self, customer_id: int, token: str) -> bool:
        if self.held.get(customer_id) != token:
            return False
        del self.held[customer_id]
        return True


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def locks() -> InMemoryLocks:
    return InMemoryLocks()


@pytest.fixture
def customer(db) -> UserModel:
    user = UserModel(name="Asha Rao", email="asha@example.com", phone="9876543210")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def admin(db) -> UserModel:
    user = UserModel(name="Admin", email="admin", user_type="admin")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def make_product(db):
    def _make(name="Fern", price="100.00", stock=3, category="indoor", status="active"):
        product = ProductModel(
            name=name,
            description=f"{name} plant",
            category=category,
            image=f"/img/{name.lower()}.jpg",
            price=Decimal(price),
            stock=stock,
            status=status,
        )
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def stock_of(db):
    def _stock(product_id: int) -> int:
        db.expire_all()
        return db.get(ProductModel, product_id).stock

    return _stock


@pytest.fixture
def card() -> CardPaymentIn:
    return CardPaymentIn(
        method="credit_card",
        card_number="4111 1111 1111 1111",
        expiry_date="12/29",
        cvv="123",
        card_holder_name="Asha Rao",
    )


@pytest.fixture
def schedule() -> ScheduleIn:
    return ScheduleIn(
        fulfillment_type="delivery",
        preferred_date=date(2026, 10, 24),
        preferred_time="10:00-12:00",
    )


@pytest.fixture
def client(locks):
    app.dependency_overrides[get_lock_service] = lambda: locks
    yield TestClient(app)
    app.dependency_overrides.clear()


def _order_payload(items, payment=None, offers=None, schedule=None):
    """JSON body for POST /orders/."""
    return {
        "items": [{"product_id": pid, "quantity": qty} for pid, qty in items],
        "payment": payment
        or {
            "method": "credit_card",
            "card_number": "4111 1111 1111 1111",
            "expiry_date": "12/29",
            "cvv": "123",
            "card_holder_name": "Asha Rao",
        },
        "schedule": schedule
        or {
            "fulfillment_type": "pickup",
            "preferred_date": "2026-10-24",
            "preferred_time": "10:00-12:00",
        },
        "offers": offers or {},
    }


@pytest.fixture
def order_payload():
    return _order_payload


@pytest.fixture
def make_locks():
    #osobny lock na watek/sesje w testach wspolbieznych
    return InMemoryLocks
