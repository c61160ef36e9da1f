"""Tests for cart and wishlist endpoints."""

from decimal import Decimal


class TestCart:
    def test_add_merges_quantities(self, client, headers, catalog):
        product = catalog["products"]["WPC-010"]

        client.post("/api/v1/cart/items", json={"product_id": product.id, "quantity": 1}, headers=headers)
        response = client.post("/api/v1/cart/items", json={"product_id": product.id, "quantity": 2}, headers=headers)

        assert response.status_code == 201
        assert response.json()["quantity"] == 3

        cart = client.get("/api/v1/cart/", headers=headers).json()
        assert len(cart["items"]) == 1
        assert cart["item_count"] == 3
        assert Decimal(cart["subtotal"]) == Decimal("104.97")
        assert cart["items"][0]["product"]["primary_image_url"] == "https://img.example.com/WPC-010.jpg"

    def test_update_quantity(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        client.post("/api/v1/cart/items", json={"product_id": product.id}, headers=headers)

        cart = client.put(f"/api/v1/cart/items/{product.id}", json={"quantity": 4}, headers=headers).json()

        assert cart["items"][0]["quantity"] == 4
        assert Decimal(cart["subtotal"]) == Decimal("799.96")

    def test_zero_quantity_removes_item(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        client.post("/api/v1/cart/items", json={"product_id": product.id}, headers=headers)

        cart = client.put(f"/api/v1/cart/items/{product.id}", json={"quantity": 0}, headers=headers).json()

        assert cart["items"] == []
        assert cart["item_count"] == 0

    def test_update_missing_item(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        response = client.put(f"/api/v1/cart/items/{product.id}", json={"quantity": 2}, headers=headers)
        assert response.status_code == 404

    def test_remove_and_clear(self, client, headers, catalog):
        products = catalog["products"]
        for sku in ("WBH-001", "WPC-010", "MNC-008"):
            client.post("/api/v1/cart/items", json={"product_id": products[sku].id}, headers=headers)

        assert client.delete(f"/api/v1/cart/items/{products['WBH-001'].id}", headers=headers).status_code == 200
        assert client.delete(f"/api/v1/cart/items/{products['WBH-001'].id}", headers=headers).status_code == 404

        response = client.delete("/api/v1/cart/", headers=headers)
        assert response.json()["message"] == "Removed 2 item(s) from cart"
        assert client.get("/api/v1/cart/", headers=headers).json()["items"] == []

    def test_inactive_or_unknown_product(self, client, headers, catalog):
        inactive = catalog["products"]["RTG-999"]

        assert client.post("/api/v1/cart/items", json={"product_id": inactive.id}, headers=headers).status_code == 404
        assert client.post("/api/v1/cart/items", json={"product_id": "nope"}, headers=headers).status_code == 404

    def test_quantity_must_be_positive(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        response = client.post("/api/v1/cart/items", json={"product_id": product.id, "quantity": 0}, headers=headers)
        assert response.status_code == 422

    def test_carts_are_per_user(self, client, headers, other_headers, catalog):
        client.post("/api/v1/cart/items", json={"product_id": catalog["products"]["WBH-001"].id}, headers=headers)

        assert client.get("/api/v1/cart/", headers=other_headers).json()["items"] == []

    def test_profile_required(self, client, catalog):
        response = client.get("/api/v1/cart/", headers={"X-User-Id": "ghost"})
        assert response.status_code == 404


class TestWishlist:
    def test_toggle(self, client, headers, catalog):
        product = catalog["products"]["MNC-008"]

        assert client.post(f"/api/v1/wishlist/{product.id}/toggle", headers=headers).json()["in_wishlist"] is True
        assert client.get(f"/api/v1/wishlist/{product.id}", headers=headers).json()["in_wishlist"] is True
        assert client.post(f"/api/v1/wishlist/{product.id}/toggle", headers=headers).json()["in_wishlist"] is False
        assert client.get(f"/api/v1/wishlist/{product.id}", headers=headers).json()["in_wishlist"] is False

    def test_list_and_remove(self, client, headers, catalog):
        products = catalog["products"]
        client.post(f"/api/v1/wishlist/{products['MNC-008'].id}/toggle", headers=headers)
        client.post(f"/api/v1/wishlist/{products['WBH-001'].id}/toggle", headers=headers)

        wishlist = client.get("/api/v1/wishlist/", headers=headers).json()
        assert {item["product"]["sku"] for item in wishlist} == {"MNC-008", "WBH-001"}

        assert client.delete(f"/api/v1/wishlist/{products['MNC-008'].id}", headers=headers).status_code == 200
        assert client.delete(f"/api/v1/wishlist/{products['MNC-008'].id}", headers=headers).status_code == 404
        assert len(client.get("/api/v1/wishlist/", headers=headers).json()) == 1

    def test_move_to_cart(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        client.post(f"/api/v1/wishlist/{product.id}/toggle", headers=headers)

        response = client.post(f"/api/v1/wishlist/{product.id}/move-to-cart", headers=headers)

        assert response.status_code == 200
        assert response.json()["quantity"] == 1
        assert client.get("/api/v1/wishlist/", headers=headers).json() == []
        assert client.get("/api/v1/cart/", headers=headers).json()["item_count"] == 1

    def test_move_missing_item(self, client, headers, catalog):
        product = catalog["products"]["WBH-001"]
        response = client.post(f"/api/v1/wishlist/{product.id}/move-to-cart", headers=headers)
        assert response.status_code == 404

    def test_toggle_unknown_product(self, client, headers, catalog):
        assert client.post("/api/v1/wishlist/nope/toggle", headers=headers).status_code == 404
