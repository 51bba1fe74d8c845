"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from checkout.domain import checkout


@checkout.event(part_of="Order")
class OrderPlaced:
    """A basket was checked out and its order record written."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier()
    basket_id = Identifier()
    total_price = Float(required=True)
    promotional_amount = Float()
    bonus = Integer()
    payment_id = String()
    placed_at = DateTime(required=True)
