"""Shared BDD fixtures and step definitions for the Checkout domain."""

import pytest
from checkout.basket.basket import Basket
from checkout.wallet.events import WalletCharged, WalletCredited
from checkout.wallet.wallet import Wallet
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "WalletCharged": WalletCharged,
    "WalletCredited": WalletCredited,
}


@pytest.fixture()
def error():
    """Container for the exception a When step captured."""
    return {"exc": None}


@given(parsers.cfparse("a wallet holding {balance:f}"), target_fixture="wallet")
def _(balance):
    return Wallet.open(customer_id="cust-001", balance=balance)


@given("an empty basket", target_fixture="basket")
def _():
    return Basket.create(customer_id="cust-001")


@then(parsers.cfparse("a {event_name} event is raised"))
def _(wallet, event_name):
    assert any(isinstance(e, _EVENT_CLASSES[event_name]) for e in wallet._events)
