"""BDD tests for wallet charges and reward credits."""

from checkout.placement.errors import InsufficientFunds
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/wallet.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("{amount:f} is charged to the wallet"))
def charge_wallet(wallet, amount, error):
    try:
        wallet.debit(amount)
    except InsufficientFunds as exc:
        error["exc"] = exc


@when(parsers.cfparse("{points:f} reward points are credited"))
def credit_reward(wallet, points):
    wallet.credit(points)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the wallet balance is {balance:f}"))
def wallet_balance(wallet, balance):
    assert wallet.balance == balance


@then("the charge is refused for insufficient funds")
def charge_refused(error):
    assert isinstance(error["exc"], InsufficientFunds)
