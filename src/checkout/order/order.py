"""Order aggregate — the immutable record of a placed order.

Lives in the document store (``documents`` provider). Created exactly once
per successful placement and never changed by checkout afterwards; delivery
tracking updates ``delivered`` elsewhere.
"""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String

from checkout.domain import checkout
from checkout.order.events import OrderPlaced


@checkout.entity(part_of="Order", provider="documents")
class OrderedProduct:
    """A priced line captured at placement time, in basket order."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True)
    total = Float(required=True)
    bonus = Integer(default=0)
    position = Integer(default=0)


@checkout.aggregate(provider="documents")
class Order:
    order_id = String(identifier=True, required=True, max_length=64)
    customer_id = Identifier()
    email = String(max_length=254)  # redacted
    promotional_amount = Float(default=0.0)
    payment_id = String(max_length=50)
    address_id = Identifier()
    delivered = Boolean(default=False)
    total_price = Float(required=True)
    products = HasMany(OrderedProduct)
    bonus = Integer(default=0)
    delivery_price = Float(default=0.0)
    eta = Integer(default=5)  # days
    placed_at = DateTime()

    @classmethod
    def place(
        cls,
        order_id,
        lines,
        total_price,
        promotional_amount=0.0,
        bonus=0,
        delivery_price=0.0,
        eta=5,
        customer_id=None,
        email=None,
        payment_id=None,
        address_id=None,
        basket_id=None,
    ):
        """Build the order record from priced lines.

        Args:
            lines: List of dicts with product_id, name, quantity, price,
                total and bonus, in basket order.
        """
        now = datetime.now(UTC)
        order = cls(
            order_id=order_id,
            customer_id=customer_id,
            email=email,
            promotional_amount=promotional_amount,
            payment_id=payment_id,
            address_id=address_id,
            delivered=False,
            total_price=total_price,
            bonus=bonus,
            delivery_price=delivery_price,
            eta=eta,
            placed_at=now,
        )
        for position, line in enumerate(lines):
            order.add_products(OrderedProduct(position=position, **line))

        order.raise_(
            OrderPlaced(
                order_id=order_id,
                customer_id=customer_id,
                basket_id=basket_id,
                total_price=total_price,
                promotional_amount=promotional_amount,
                bonus=bonus,
                payment_id=payment_id,
                placed_at=now,
            )
        )
        return order

    def ordered_products(self):
        return sorted(self.products, key=lambda p: p.position or 0)
