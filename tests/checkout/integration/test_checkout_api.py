"""Integration tests for the Checkout API endpoints via TestClient."""

import pytest
from checkout.api.routes import basket_router, order_router, review_router, wallet_router
from checkout.basket.basket import Basket
from checkout.catalogue.creation import AddProduct
from checkout.order.order import Order
from checkout.wallet.ledger import OpenWallet
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain

ADA_HEADERS = {"X-Customer-Id": "cust-001", "X-Customer-Email": "ada@example.com"}
BOB_HEADERS = {"X-Customer-Id": "cust-002", "X-Customer-Email": "bob@example.com"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(basket_router)
    app.include_router(order_router)
    app.include_router(wallet_router)
    app.include_router(review_router)
    return TestClient(app)


def _product(price=10.0, name="Widget"):
    return current_domain.process(AddProduct(name=name, price=price), asynchronous=False)


def _create_basket(client, customer_id="cust-001"):
    response = client.post("/baskets", json={"customer_id": customer_id})
    assert response.status_code == 201
    return response.json()["basket_id"]


def _add_item(client, basket_id, product_id, quantity=1):
    response = client.post(f"/baskets/{basket_id}/items", json={"product_id": product_id, "quantity": quantity})
    assert response.status_code == 200
    return response


class TestBasketEndpoints:
    def test_create_and_fill_basket(self, client):
        basket_id = _create_basket(client)
        _add_item(client, basket_id, "prod-001", 2)

        basket = current_domain.repository_for(Basket).get(basket_id)
        assert basket.items[0].quantity == 2

    def test_update_and_remove_item(self, client):
        basket_id = _create_basket(client)
        _add_item(client, basket_id, "prod-001")
        item_id = str(current_domain.repository_for(Basket).get(basket_id).items[0].id)

        response = client.put(f"/baskets/{basket_id}/items/{item_id}", json={"new_quantity": 3})
        assert response.status_code == 200
        response = client.delete(f"/baskets/{basket_id}/items/{item_id}")
        assert response.status_code == 200

        assert len(current_domain.repository_for(Basket).get(basket_id).items) == 0

    def test_unknown_item_is_unprocessable(self, client):
        basket_id = _create_basket(client)
        response = client.delete(f"/baskets/{basket_id}/items/no-such-item")
        assert response.status_code == 422

    def test_apply_coupon(self, client):
        basket_id = _create_basket(client)
        response = client.put(f"/baskets/{basket_id}/coupon", json={"coupon_code": "ABC"})

        assert response.status_code == 200
        assert current_domain.repository_for(Basket).get(basket_id).coupon == "ABC"

    def test_unknown_basket(self, client):
        response = client.post("/baskets/no-such-basket/items", json={"product_id": "p", "quantity": 1})
        assert response.status_code == 404


class TestCheckoutEndpoint:
    def test_checkout_places_order(self, client):
        basket_id = _create_basket(client)
        _add_item(client, basket_id, _product(price=10.0), 2)

        response = client.post(f"/baskets/{basket_id}/checkout", json={"payment_method": "card"}, headers=ADA_HEADERS)

        assert response.status_code == 201
        data = response.json()
        assert data["total_price"] == 20.0
        assert data["bonus"] == 2
        order = current_domain.repository_for(Order).get(data["order_id"])
        assert str(order.customer_id) == "cust-001"

    def test_checkout_unknown_basket(self, client):
        response = client.post("/baskets/no-such-basket/checkout", json={}, headers=ADA_HEADERS)
        assert response.status_code == 404

    def test_checkout_with_insufficient_funds(self, client):
        current_domain.process(OpenWallet(customer_id="cust-001", balance=1.0), asynchronous=False)
        basket_id = _create_basket(client)
        _add_item(client, basket_id, _product(price=10.0))

        response = client.post(
            f"/baskets/{basket_id}/checkout",
            json={"payment_method": "wallet"},
            headers=ADA_HEADERS,
        )

        assert response.status_code == 402
        assert response.json()["detail"] == {"balance": ["Insufficient wallet balance."]}

    def test_anonymous_checkout(self, client):
        basket_id = _create_basket(client, customer_id=None)
        _add_item(client, basket_id, _product(price=7.5))

        response = client.post(f"/baskets/{basket_id}/checkout", json={"payment_method": "wallet"})

        assert response.status_code == 201
        assert response.json()["total_price"] == 7.5


class TestOrderEndpoints:
    def test_get_order_and_receipt(self, client):
        basket_id = _create_basket(client)
        _add_item(client, basket_id, _product(price=10.0, name="Bolt"), 2)
        order_id = client.post(f"/baskets/{basket_id}/checkout", json={}, headers=ADA_HEADERS).json()["order_id"]

        response = client.get(f"/orders/{order_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "*d*@*x*mpl*.c*m"
        assert data["products"][0]["name"] == "Bolt"

        response = client.get(f"/orders/{order_id}/receipt")
        assert response.status_code == 200
        assert response.text.strip() == "2x Bolt ea. 10 = 20¤"
        assert f"order_{order_id}.txt" in response.headers["content-disposition"]

    def test_unknown_order(self, client):
        assert client.get("/orders/no-such-order").status_code == 404
        assert client.get("/orders/no-such-order/receipt").status_code == 404


class TestWalletEndpoint:
    def test_balance(self, client):
        current_domain.process(OpenWallet(customer_id="cust-001", balance=12.5), asynchronous=False)

        response = client.get("/wallets/me", headers=ADA_HEADERS)
        assert response.status_code == 200
        assert response.json() == {"customer_id": "cust-001", "balance": 12.5}

    def test_requires_identity(self, client):
        assert client.get("/wallets/me").status_code == 401

    def test_no_wallet(self, client):
        assert client.get("/wallets/me", headers=BOB_HEADERS).status_code == 404


class TestReviewEndpoints:
    def test_post_like_and_list(self, client):
        response = client.post("/products/prod-001/reviews", json={"message": "Great"}, headers=ADA_HEADERS)
        assert response.status_code == 201
        review_id = response.json()["review_id"]

        assert client.post(f"/reviews/{review_id}/likes", headers=BOB_HEADERS).status_code == 200

        reviews = client.get("/products/prod-001/reviews", headers=BOB_HEADERS).json()
        assert reviews[0]["liked"] is True
        assert reviews[0]["likes_count"] == 1

        reviews = client.get("/products/prod-001/reviews", headers=ADA_HEADERS).json()
        assert reviews[0]["liked"] is False

    def test_edit_review(self, client):
        review_id = client.post(
            "/products/prod-001/reviews", json={"message": "Great"}, headers=ADA_HEADERS
        ).json()["review_id"]

        response = client.patch(f"/reviews/{review_id}", json={"message": "Meh"})

        assert response.status_code == 200
        assert response.json() == {"modified": 1, "original_author": "ada@example.com"}

    def test_edit_unknown_review(self, client):
        assert client.patch("/reviews/no-such-review", json={"message": "Meh"}).status_code == 404
