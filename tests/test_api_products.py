"""Integration tests for the catalog endpoints."""
from decimal import Decimal

import pytest

from nursery.domain.errors import ValidationError
from nursery.repos.product_repo import ProductRepo


def _headers(user):
    return {"X-User-Id": str(user.id)}


NEW_PLANT = {
    "name": "Snake Plant",
    "description": "Hardy low-light plant",
    "category": "indoor",
    "image": "/img/snake.jpg",
    "price": "349.00",
    "stock": 12,
}


def test_admin_creates_product(client, admin):
    response = client.post("/products/", json=NEW_PLANT, headers=_headers(admin))

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Snake Plant"
    assert Decimal(body["price"]) == Decimal("349.00")
    assert body["status"] == "active"


def test_customer_cannot_manage_catalog(client, customer, make_product):
    fern = make_product("Fern", stock=3)

    assert client.post("/products/", json=NEW_PLANT, headers=_headers(customer)).status_code == 403
    assert client.put(f"/products/{fern.id}/stock", json={"stock": 9}, headers=_headers(customer)).status_code == 403
    assert client.delete(f"/products/{fern.id}").status_code == 401


def test_listing_filters_and_pages(client, make_product):
    make_product("Fern", category="indoor")
    make_product("Palm", category="indoor")
    make_product("Rose", category="outdoor")

    indoor = client.get("/products/", params={"category": "indoor"}).json()
    assert indoor["total"] == 2
    assert {p["name"] for p in indoor["products"]} == {"Fern", "Palm"}

    everything = client.get("/products/", params={"category": "all", "limit": 2, "page": 2}).json()
    assert everything["total"] == 3
    assert everything["total_pages"] == 2
    assert everything["current_page"] == 2
    assert len(everything["products"]) == 1

    found = client.get("/products/", params={"search": "ROSE"}).json()
    assert [p["name"] for p in found["products"]] == ["Rose"]


def test_get_product(client, make_product):
    fern = make_product("Fern", stock=3)

    assert client.get(f"/products/{fern.id}").json()["stock"] == 3
    assert client.get("/products/31337").status_code == 404


def test_admin_restock(client, admin, make_product, stock_of):
    fern = make_product("Fern", stock=0)

    response = client.put(f"/products/{fern.id}/stock", json={"stock": 25}, headers=_headers(admin))

    assert response.status_code == 200
    assert response.json()["stock"] == 25
    assert stock_of(fern.id) == 25


def test_restock_rejects_negative_stock(client, admin, make_product, stock_of):
    fern = make_product("Fern", stock=4)

    response = client.put(f"/products/{fern.id}/stock", json={"stock": -1}, headers=_headers(admin))

    assert response.status_code == 422
    assert stock_of(fern.id) == 4


def test_restock_unknown_product(client, admin):
    assert client.put("/products/31337/stock", json={"stock": 1}, headers=_headers(admin)).status_code == 404


def test_toggle_status_blocks_checkout(client, admin, customer, make_product, order_payload):
    fern = make_product("Fern", stock=4)

    toggled = client.put(f"/products/{fern.id}/status", headers=_headers(admin))
    assert toggled.json()["status"] == "inactive"

    response = client.post("/orders/", json=order_payload([(fern.id, 1)]), headers=_headers(customer))
    assert response.status_code == 400

    assert client.put(f"/products/{fern.id}/status", headers=_headers(admin)).json()["status"] == "active"


def test_update_product_fields(client, admin, make_product):
    fern = make_product("Fern", price="100.00", stock=4)

    response = client.put(
        f"/products/{fern.id}", json={"price": "120.00", "is_popular": True}, headers=_headers(admin)
    )

    body = response.json()
    assert Decimal(body["price"]) == Decimal("120.00")
    assert body["is_popular"] is True
    assert body["stock"] == 4
    assert body["name"] == "Fern"


def test_delete_product(client, admin, make_product):
    fern = make_product("Fern", stock=4)

    assert client.delete(f"/products/{fern.id}", headers=_headers(admin)).status_code == 200
    assert client.get(f"/products/{fern.id}").status_code == 404
    assert client.delete(f"/products/{fern.id}", headers=_headers(admin)).status_code == 404


def test_repo_refuses_negative_stock(db, make_product, stock_of):
    fern = make_product("Fern", stock=3)

    with pytest.raises(ValidationError):
        ProductRepo(db).set_stock(fern.id, -1)

    assert stock_of(fern.id) == 3
