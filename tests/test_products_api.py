# tests/test_products_api.py

from datetime import datetime, timezone

import pytest

from orders_api.config import settings
from orders_api.models.product import Product as ProductModel
from orders_api.services.product import DELETED, NOT_CREATED, NOT_DELETED, NOT_FOUND, NOT_UPDATED
from orders_api.utils.database import AsyncSessionLocal


@pytest.fixture
def product_data(order_id):
    return {
        "name": "Produto Teste",
        "description": "Descrição do produto teste",
        "price": 99.99,
        "quantity": 10,
        "orderId": order_id,
    }


@pytest.fixture
def product(client, product_data):
    response = client.post("/products", json=product_data)
    assert response.status_code == 201
    return response.json()


def test_create_product_returns_full_row(client, product_data):
    response = client.post("/products", json=product_data)

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Produto Teste"
    assert body["description"] == "Descrição do produto teste"
    assert body["price"] == 99.99
    assert body["quantity"] == 10
    assert body["orderId"] == product_data["orderId"]
    assert "created" in body


def test_create_product_for_missing_order(client, product_data):
    product_data["orderId"] = 999

    response = client.post("/products", json=product_data)

    assert response.status_code == 400
    assert response.json()["detail"] == NOT_CREATED


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "abc"),
        ("name", "x" * 41),
        ("description", "abcd"),
        ("description", "x" * 201),
        ("price", "cheap"),
        ("quantity", None),
    ],
)
def test_create_product_validation(client, product_data, field, value):
    product_data[field] = value
    assert client.post("/products", json=product_data).status_code == 422


def test_create_product_requires_order_id(client, product_data):
    del product_data["orderId"]
    assert client.post("/products", json=product_data).status_code == 422


def test_get_product(client, product):
    response = client.get(f"/products/{product['id']}")

    assert response.status_code == 200
    assert response.json() == product


def test_get_missing_product(client):
    response = client.get("/products/999")

    assert response.status_code == 404
    assert response.json()["detail"] == NOT_FOUND


def test_get_product_without_name_is_not_found(client, order_id):
    async def insert_nameless():
        async with AsyncSessionLocal() as session:
            row = ProductModel(name="", description="sem nome", price=1, quantity=1, order_id=order_id)
            session.add(row)
            await session.commit()
            return row.id

    product_id = client.portal.call(insert_nameless)

    assert client.get(f"/products/{product_id}").status_code == 404
    assert any(p["id"] == product_id for p in client.get("/products").json())


def test_update_only_price(client, product):
    response = client.patch(f"/products/{product['id']}", json={"price": 129.99})

    assert response.status_code == 200
    assert response.json() == {**product, "price": 129.99}


def test_update_zero_values_are_kept(client, product):
    response = client.patch(f"/products/{product['id']}", json={"price": 0, "quantity": 0})

    assert response.status_code == 200
    assert response.json()["price"] == 0
    assert response.json()["quantity"] == 0


def test_update_empty_body_changes_nothing(client, product):
    response = client.patch(f"/products/{product['id']}", json={})

    assert response.status_code == 200
    assert response.json() == product


def test_update_cannot_move_product_to_other_order(client, product):
    other_order = client.post("/orders", json={}).json()["id"]

    response = client.patch(f"/products/{product['id']}", json={"orderId": other_order, "name": "Outro nome"})

    assert response.json()["orderId"] == product["orderId"]
    assert response.json()["name"] == "Outro nome"


def test_update_validates_lengths(client, product):
    assert client.patch(f"/products/{product['id']}", json={"name": "abc"}).status_code == 422


def test_update_missing_product(client):
    assert client.patch("/products/999", json={"price": 1}).status_code == 404


def test_update_missing_product_masked(client, monkeypatch):
    monkeypatch.setattr(settings, "MASK_NOT_FOUND_ON_WRITE", True)

    response = client.patch("/products/999", json={"price": 1})

    assert response.status_code == 400
    assert response.json()["detail"] == NOT_UPDATED


def test_delete_product(client, product):
    response = client.delete(f"/products/{product['id']}")

    assert response.status_code == 200
    assert response.text == DELETED
    assert client.get(f"/products/{product['id']}").status_code == 404


def test_delete_missing_product(client):
    assert client.delete("/products/999").status_code == 404


def test_delete_missing_product_masked(client, monkeypatch):
    monkeypatch.setattr(settings, "MASK_NOT_FOUND_ON_WRITE", True)

    response = client.delete("/products/999")

    assert response.status_code == 400
    assert response.json()["detail"] == NOT_DELETED


def test_delete_order_removes_its_products(client, product):
    assert client.delete(f"/orders/{product['orderId']}").status_code == 200
    assert client.get(f"/products/{product['id']}").status_code == 404


def test_list_products_pagination(client, product_data):
    ids = [client.post("/products", json=product_data).json()["id"] for _ in range(12)]
    newest_first = list(reversed(ids))

    assert [p["id"] for p in client.get("/products").json()] == newest_first[:10]
    assert [p["id"] for p in client.get("/products", params={"limit": 5, "offset": 0}).json()] == newest_first[:5]
    assert [p["id"] for p in client.get("/products", params={"limit": 20, "offset": 5}).json()] == newest_first[5:]


def test_list_products_empty(client):
    assert client.get("/products").json() == []


def test_list_products_zero_limit_is_empty_page(client, product):
    response = client.get("/products", params={"limit": 0})

    assert response.status_code == 200
    assert response.json() == []


def test_list_products_sorted_by_created_not_id(client, order_id):
    days = [2, 3, 1]

    async def insert_dated():
        async with AsyncSessionLocal() as session:
            rows = [
                ProductModel(
                    name=f"Produto {day}",
                    description="Produto com data fixa",
                    price=10,
                    quantity=1,
                    order_id=order_id,
                    created=datetime(2025, 1, day, tzinfo=timezone.utc),
                )
                for day in days
            ]
            for row in rows:
                session.add(row)
                await session.flush()
            await session.commit()
            return [row.id for row in rows]

    first, second, third = client.portal.call(insert_dated)

    assert [p["id"] for p in client.get("/products").json()] == [second, first, third]
    assert [p["id"] for p in client.get("/products", params={"limit": 2, "offset": 1}).json()] == [first, third]
