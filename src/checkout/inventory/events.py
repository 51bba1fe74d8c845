"""Domain events for the StockLevel aggregate."""

from protean.fields import DateTime, Identifier, Integer

from checkout.domain import checkout


@checkout.event(part_of="StockLevel")
class StockDecremented:
    """Stock for a product was reduced by an order placement.

    ``new_quantity`` may be negative: the ledger records oversold stock
    rather than rejecting the order.
    """

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    decremented_at = DateTime(required=True)


@checkout.event(part_of="StockLevel")
class StockReplenished:
    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    replenished_at = DateTime(required=True)
