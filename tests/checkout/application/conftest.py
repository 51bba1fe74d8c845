import pytest
from checkout.basket.items import AddToBasket
from checkout.basket.management import ApplyCouponToBasket, CreateBasket
from checkout.catalogue.creation import AddDeliveryMethod, AddProduct
from checkout.inventory.ledger import RestockProduct
from checkout.wallet.ledger import OpenWallet
from protean import current_domain


@pytest.fixture()
def add_product():
    def _add_product(name="Widget", price=10.0, premium_price=None, stock=None):
        product_id = current_domain.process(
            AddProduct(name=name, price=price, premium_price=premium_price),
            asynchronous=False,
        )
        if stock is not None:
            current_domain.process(RestockProduct(product_id=product_id, quantity=stock), asynchronous=False)
        return product_id

    return _add_product


@pytest.fixture()
def add_delivery_method():
    def _add_delivery_method(name="Courier", price=3.0, premium_price=1.0, eta=2):
        return current_domain.process(
            AddDeliveryMethod(name=name, price=price, premium_price=premium_price, eta=eta),
            asynchronous=False,
        )

    return _add_delivery_method


@pytest.fixture()
def open_wallet():
    def _open_wallet(customer_id="cust-001", balance=0.0):
        return current_domain.process(OpenWallet(customer_id=customer_id, balance=balance), asynchronous=False)

    return _open_wallet


@pytest.fixture()
def basket_with():
    """Create a basket holding ``(product_id, quantity)`` pairs, in that order."""

    def _basket_with(*items, customer_id="cust-001", coupon=None):
        basket_id = current_domain.process(CreateBasket(customer_id=customer_id), asynchronous=False)
        for product_id, quantity in items:
            current_domain.process(
                AddToBasket(basket_id=basket_id, product_id=product_id, quantity=quantity),
                asynchronous=False,
            )
        if coupon:
            current_domain.process(ApplyCouponToBasket(basket_id=basket_id, coupon_code=coupon), asynchronous=False)
        return basket_id

    return _basket_with
