"""Application tests for basket commands and the basket source."""

import pytest
from checkout.basket.basket import Basket
from checkout.basket.items import AddToBasket, RemoveFromBasket, UpdateBasketQuantity
from checkout.basket.loading import load_basket
from checkout.basket.management import ApplyCouponToBasket, CreateBasket
from checkout.placement.errors import BasketNotFound
from protean import current_domain


class TestBasketCommands:
    def test_create_basket_persists(self):
        basket_id = current_domain.process(CreateBasket(customer_id="cust-001"), asynchronous=False)

        basket = current_domain.repository_for(Basket).get(basket_id)
        assert str(basket.customer_id) == "cust-001"

    def test_add_update_and_remove_items(self, basket_with):
        basket_id = basket_with(("prod-001", 1), ("prod-002", 2))
        basket = current_domain.repository_for(Basket).get(basket_id)
        first, second = basket.ordered_items()

        current_domain.process(
            UpdateBasketQuantity(basket_id=basket_id, item_id=str(first.id), new_quantity=5),
            asynchronous=False,
        )
        current_domain.process(RemoveFromBasket(basket_id=basket_id, item_id=str(second.id)), asynchronous=False)

        basket = current_domain.repository_for(Basket).get(basket_id)
        assert len(basket.items) == 1
        assert basket.items[0].quantity == 5

    def test_adding_same_product_twice_merges(self, basket_with):
        basket_id = basket_with(("prod-001", 1))
        current_domain.process(AddToBasket(basket_id=basket_id, product_id="prod-001", quantity=2), asynchronous=False)

        basket = current_domain.repository_for(Basket).get(basket_id)
        assert len(basket.items) == 1
        assert basket.items[0].quantity == 3

    def test_apply_coupon_replaces_previous(self, basket_with):
        basket_id = basket_with(coupon="FIRST")
        current_domain.process(ApplyCouponToBasket(basket_id=basket_id, coupon_code="SECOND"), asynchronous=False)

        assert current_domain.repository_for(Basket).get(basket_id).coupon == "SECOND"


class TestLoadBasket:
    def test_lines_join_products_in_basket_order(self, add_product, basket_with):
        bolt = add_product(name="Bolt", price=2.0, premium_price=1.5)
        anchor = add_product(name="Anchor", price=30.0)
        basket_id = basket_with((bolt, 4), (anchor, 1), coupon="CODE")

        snapshot = load_basket(basket_id)

        assert snapshot.basket_id == basket_id
        assert snapshot.coupon == "CODE"
        assert [(line.name, line.quantity) for line in snapshot.lines] == [("Bolt", 4), ("Anchor", 1)]
        assert snapshot.lines[0].premium_price == 1.5
        assert snapshot.lines[1].premium_price == 30.0

    def test_items_without_product_are_skipped(self, add_product, basket_with):
        bolt = add_product(name="Bolt")
        basket_id = basket_with((bolt, 1), ("no-such-product", 3))

        snapshot = load_basket(basket_id)
        assert [line.product_id for line in snapshot.lines] == [bolt]

    def test_missing_basket(self):
        with pytest.raises(BasketNotFound) as exc:
            load_basket("no-such-basket")
        assert exc.value.basket_id == "no-such-basket"
