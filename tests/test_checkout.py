"""Tests for the checkout flow."""

from decimal import Decimal

import pytest

from storefront.models import CartItem, Order


@pytest.fixture
def shipping_address(client, headers, address_payload):
    response = client.post("/api/v1/addresses/", json=address_payload(is_default=True), headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def filled_cart(client, headers, catalog):
    products = catalog["products"]
    for sku, quantity in (("WBH-001", 1), ("MNC-008", 2)):
        response = client.post(
            "/api/v1/cart/items", json={"product_id": products[sku].id, "quantity": quantity}, headers=headers
        )
        assert response.status_code == 201
    return products


class TestCheckoutSummary:
    def test_summary_totals_and_default_address(self, client, headers, filled_cart, shipping_address):
        response = client.get("/api/v1/checkout/", headers=headers)

        assert response.status_code == 200
        data = response.json()
        # 199.99 + 2 * 49.99 = 299.97, 세금 8%
        assert Decimal(data["subtotal"]) == Decimal("299.97")
        assert Decimal(data["tax_amount"]) == Decimal("24.00")
        assert Decimal(data["shipping_amount"]) == Decimal("0.00")
        assert Decimal(data["total_amount"]) == Decimal("323.97")
        assert data["selected_address_id"] == shipping_address["id"]
        assert len(data["items"]) == 2

    def test_empty_cart(self, client, headers, catalog):
        response = client.get("/api/v1/checkout/", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Cart is empty"


class TestPlaceOrder:
    def test_cash_on_delivery(self, client, headers, db, user, filled_cart, shipping_address):
        response = client.post(
            "/api/v1/checkout/", json={"address_id": shipping_address["id"], "payment_method": "cod"}, headers=headers
        )

        assert response.status_code == 201
        order = response.json()
        assert order["order_number"].startswith("ORD-")
        assert order["status"] == "confirmed"
        assert order["payment_status"] == "pending"
        assert order["payment_method"] == "cod"
        assert Decimal(order["total_amount"]) == Decimal("323.97")
        assert {item["product_sku"] for item in order["items"]} == {"WBH-001", "MNC-008"}
        assert order["shipping_address"]["city"] == "Springfield"

        # 주문 후 장바구니 비움
        db.expire_all()
        assert db.query(CartItem).filter(CartItem.user_id == user.id).count() == 0
        assert client.get("/api/v1/cart/", headers=headers).json()["items"] == []

    def test_card_payment_marks_paid(self, client, headers, filled_cart, shipping_address):
        response = client.post("/api/v1/checkout/", json={
            "address_id": shipping_address["id"],
            "payment_method": "card",
            "card_number": "4242424242424242",
            "expiry_date": "12/30",
            "cvv": "123",
            "card_name": "Alice Kim",
        }, headers=headers)

        assert response.status_code == 201
        assert response.json()["payment_status"] == "paid"

    def test_card_requires_all_details(self, client, headers, filled_cart, shipping_address):
        response = client.post("/api/v1/checkout/", json={
            "address_id": shipping_address["id"],
            "payment_method": "card",
            "card_number": "4242424242424242",
        }, headers=headers)

        assert response.status_code == 422
        assert "Please fill in all card details" in response.text

    def test_address_snapshot_survives_edits(self, client, headers, filled_cart, shipping_address):
        order = client.post(
            "/api/v1/checkout/", json={"address_id": shipping_address["id"]}, headers=headers
        ).json()

        client.put(
            f"/api/v1/addresses/{shipping_address['id']}",
            json={"city": "Shelbyville", "address_line_1": "742 Evergreen Terrace"},
            headers=headers,
        )
        client.delete(f"/api/v1/addresses/{shipping_address['id']}", headers=headers)

        stored = client.get(f"/api/v1/orders/{order['id']}", headers=headers).json()
        assert stored["shipping_address"]["city"] == "Springfield"
        assert stored["shipping_address"]["address_line_1"] == "1 Main St"

    def test_item_snapshot_survives_price_change(self, client, headers, db, filled_cart, shipping_address):
        order = client.post(
            "/api/v1/checkout/", json={"address_id": shipping_address["id"]}, headers=headers
        ).json()

        product = filled_cart["WBH-001"]
        product.price = Decimal("9.99")
        product.name = "Renamed Headphones"
        db.commit()

        stored = client.get(f"/api/v1/orders/{order['id']}", headers=headers).json()
        item = next(item for item in stored["items"] if item["product_sku"] == "WBH-001")
        assert item["product_name"] == "Wireless Headphones"
        assert Decimal(item["unit_price"]) == Decimal("199.99")

    def test_other_users_address_rejected(self, client, headers, other_headers, filled_cart, address_payload):
        foreign = client.post("/api/v1/addresses/", json=address_payload(), headers=other_headers).json()

        response = client.post("/api/v1/checkout/", json={"address_id": foreign["id"]}, headers=headers)

        assert response.status_code == 404
        # 실패한 주문은 장바구니를 건드리지 않음
        assert len(client.get("/api/v1/cart/", headers=headers).json()["items"]) == 2

    def test_empty_cart_rejected(self, client, headers, catalog, shipping_address):
        response = client.post("/api/v1/checkout/", json={"address_id": shipping_address["id"]}, headers=headers)
        assert response.status_code == 400

    def test_inactive_product_rejected(self, client, headers, db, filled_cart, shipping_address):
        filled_cart["MNC-008"].is_active = False
        db.commit()

        response = client.post("/api/v1/checkout/", json={"address_id": shipping_address["id"]}, headers=headers)

        assert response.status_code == 400
        assert db.query(Order).count() == 0

    def test_billing_address_snapshot(self, client, headers, filled_cart, shipping_address, address_payload):
        billing = client.post(
            "/api/v1/addresses/", json=address_payload(name="Billing", city="Chicago", type="work"), headers=headers
        ).json()

        response = client.post("/api/v1/checkout/", json={
            "address_id": shipping_address["id"],
            "billing_address_id": billing["id"],
        }, headers=headers)

        assert response.status_code == 201
        assert response.json()["billing_address"]["city"] == "Chicago"

    def test_sequential_orders_get_increasing_numbers(self, client, headers, catalog, shipping_address):
        numbers = []
        for _ in range(2):
            client.post(
                "/api/v1/cart/items", json={"product_id": catalog["products"]["WPC-010"].id}, headers=headers
            )
            numbers.append(client.post(
                "/api/v1/checkout/", json={"address_id": shipping_address["id"]}, headers=headers
            ).json()["order_number"])

        assert numbers[0][:13] == numbers[1][:13]
        assert int(numbers[1][-4:]) == int(numbers[0][-4:]) + 1
