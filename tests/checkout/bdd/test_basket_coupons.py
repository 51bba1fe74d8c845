"""BDD tests for basket coupon management."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/basket_coupons.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('a coupon "{code}" is applied to the basket'))
def apply_coupon_to_basket(basket, code, error):
    try:
        basket.apply_coupon(code)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the basket coupon is "{code}"'))
def basket_coupon_is(basket, code):
    assert basket.coupon == code


@then("the coupon is rejected")
def coupon_rejected(error):
    assert isinstance(error["exc"], ValidationError)


@then("the basket has no coupon")
def basket_has_no_coupon(basket):
    assert basket.coupon is None
