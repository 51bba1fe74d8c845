"""Product aggregate (CQRS) — what a basket line refers to.

A product carries two unit prices: the standard price and the premium price
charged to premium-tier customers. Available quantity is tracked separately
by the stock ledger (``inventory.stock.StockLevel``) so that catalogue edits
and stock movements never contend for the same record.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, String, Text

from checkout.domain import checkout


@checkout.aggregate
class Product:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    premium_price = Float(required=True, min_value=0.0)
    created_at = DateTime()

    @classmethod
    def create(cls, name, price, premium_price=None, description=None):
        """Premium price defaults to the standard price when not given."""
        return cls(
            name=name,
            description=description,
            price=price,
            premium_price=price if premium_price is None else premium_price,
            created_at=datetime.now(UTC),
        )
