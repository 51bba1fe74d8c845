"""Basket management — creation and coupon commands."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from checkout.basket.basket import Basket
from checkout.domain import checkout


@checkout.command(part_of="Basket")
class CreateBasket:
    """Create a new basket, optionally owned by a customer."""

    customer_id = Identifier()


@checkout.command(part_of="Basket")
class ApplyCouponToBasket:
    """Store a coupon code on a basket; it is decoded only at checkout."""

    basket_id = Identifier(required=True)
    coupon_code = String(required=True, max_length=100)


@checkout.command_handler(part_of=Basket)
class ManageBasketHandler:
    @handle(CreateBasket)
    def create_basket(self, command):
        basket = Basket.create(customer_id=command.customer_id)
        current_domain.repository_for(Basket).add(basket)
        return str(basket.id)

    @handle(ApplyCouponToBasket)
    def apply_coupon(self, command):
        repo = current_domain.repository_for(Basket)
        basket = repo.get(command.basket_id)
        basket.apply_coupon(coupon_code=command.coupon_code)
        repo.add(basket)
