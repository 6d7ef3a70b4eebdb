from datetime import datetime, timedelta, timezone

import pytest

from vibecart.crud.cartService import CartService
from vibecart.crud.checkOutService import CheckOutService

CUSTOMER = {"name": "Jane Doe", "email": "jane@example.com", "address": "1 Main Street"}


def fill_cart(client, headers, products):
    client.post("/api/cart", json={"productId": products["Wireless Bluetooth Headphones"]["_id"]}, headers=headers)
    client.post(
        "/api/cart",
        json={"productId": products["Stainless Steel Water Bottle"]["_id"], "quantity": 3},
        headers=headers,
    )


def test_checkout_returns_receipt_and_empties_cart(client, session_headers, products):
    fill_cart(client, session_headers, products)

    response = client.post("/api/checkout", json=CUSTOMER, headers=session_headers)

    assert response.status_code == 200
    receipt = response.json()
    assert receipt["orderId"].startswith("ORD-")
    assert receipt["customer"] == CUSTOMER
    assert sorted(receipt["items"], key=lambda line: line["product"]) == [
        {"product": "Stainless Steel Water Bottle", "quantity": 3, "price": 24.99, "subtotal": 74.97},
        {"product": "Wireless Bluetooth Headphones", "quantity": 1, "price": 79.99, "subtotal": 79.99},
    ]
    assert receipt["total"] == 154.96
    assert receipt["grandTotal"] == round(154.96 * 1.08, 2)
    assert receipt["tax"] == pytest.approx(receipt["grandTotal"] - receipt["total"])
    assert datetime.fromisoformat(receipt["timestamp"].replace("Z", "+00:00"))

    cart = client.get("/api/cart", headers=session_headers).json()
    assert cart["items"] == []
    assert cart["total"] == 0


def test_checkout_leaves_other_sessions_alone(client, products):
    alice = {"session-id": "alice"}
    bob = {"session-id": "bob"}
    fill_cart(client, alice, products)
    fill_cart(client, bob, products)

    assert client.post("/api/checkout", json=CUSTOMER, headers=alice).status_code == 200

    assert len(client.get("/api/cart", headers=bob).json()["items"]) == 2


def test_checkout_empty_cart_returns_zero_receipt(client, session_headers):
    response = client.post("/api/checkout", json=CUSTOMER, headers=session_headers)

    assert response.status_code == 200
    receipt = response.json()
    assert receipt["orderId"].startswith("ORD-")
    assert receipt["items"] == []
    assert receipt["total"] == 0
    assert receipt["tax"] == 0
    assert receipt["grandTotal"] == 0


def test_checkout_requires_valid_customer(client, session_headers, products):
    fill_cart(client, session_headers, products)

    bad_email = client.post("/api/checkout", json={"name": "Jane", "email": "nope"}, headers=session_headers)
    missing_name = client.post("/api/checkout", json={"email": "jane@example.com"}, headers=session_headers)

    assert bad_email.status_code == 422
    assert missing_name.status_code == 422
    assert len(client.get("/api/cart", headers=session_headers).json()["items"]) == 2


def test_order_ids_differ_across_timestamps():
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    first = CheckOutService.generate_order_id(now)
    second = CheckOutService.generate_order_id(now + timedelta(milliseconds=1))

    assert first == f"ORD-{int(now.timestamp() * 1000)}"
    assert first != second


@pytest.mark.parametrize(
    "total, expected",
    [
        (0, (0, 0, 0)),
        (154.96, (154.96, 12.4, 167.36)),
        (19.99, (19.99, 1.6, 21.59)),
    ],
)
def test_price_summary(total, expected):
    assert CartService.price_summary(total) == pytest.approx(expected)
