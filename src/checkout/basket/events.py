"""Domain events for the Basket aggregate."""

from protean.fields import Identifier, Integer, String

from checkout.domain import checkout


@checkout.event(part_of="Basket")
class BasketItemAdded:
    """A product was added to the basket (or its quantity increased)."""

    __version__ = 1

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@checkout.event(part_of="Basket")
class BasketQuantityUpdated:
    __version__ = 1

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@checkout.event(part_of="Basket")
class BasketItemRemoved:
    __version__ = 1

    basket_id = Identifier(required=True)
    item_id = Identifier(required=True)


@checkout.event(part_of="Basket")
class BasketCouponApplied:
    """A coupon code was stored on the basket, replacing any earlier one."""

    __version__ = 1

    basket_id = Identifier(required=True)
    coupon_code = String(required=True)
