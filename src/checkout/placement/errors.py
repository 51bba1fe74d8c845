"""Errors surfaced by the order placement workflow.

Every error names the placement step that failed first. ``BasketNotFound``
and ``InsufficientFunds`` end the attempt; ``InvalidCouponToken`` and
``DeliveryLookupFailed`` are raised by collaborators and absorbed by the
workflow (zero discount, default delivery tier). Persistence errors are not
wrapped: they reach the caller unchanged.
"""

from enum import Enum


class PlacementStep(Enum):
    START = "Start"
    LOAD_BASKET = "Load_Basket"
    APPLY_INVENTORY = "Apply_Inventory"
    APPLY_DISCOUNT = "Apply_Discount"
    PRICE = "Price"
    RESOLVE_DELIVERY = "Resolve_Delivery"
    CHARGE_WALLET = "Charge_Wallet"
    CREDIT_POINTS = "Credit_Points"
    PERSIST = "Persist"
    DONE = "Done"


class PlacementError(Exception):
    step = PlacementStep.START
    field = "_placement"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.messages = {self.field: [message]}


class BasketNotFound(PlacementError):
    step = PlacementStep.LOAD_BASKET
    field = "basket_id"

    def __init__(self, basket_id) -> None:
        super().__init__(f"Basket with id={basket_id} does not exist.")
        self.basket_id = basket_id


class InsufficientFunds(PlacementError):
    step = PlacementStep.CHARGE_WALLET
    field = "balance"

    def __init__(self, customer_id, balance: float, amount: float) -> None:
        super().__init__("Insufficient wallet balance.")
        self.customer_id = customer_id
        self.balance = balance
        self.amount = amount


class InvalidCouponToken(PlacementError):
    step = PlacementStep.APPLY_DISCOUNT
    field = "coupon_token"


class DeliveryLookupFailed(PlacementError):
    step = PlacementStep.RESOLVE_DELIVERY
    field = "delivery_method_id"

    def __init__(self, delivery_method_id) -> None:
        super().__init__(f"Delivery method with id={delivery_method_id} does not exist.")
        self.delivery_method_id = delivery_method_id
