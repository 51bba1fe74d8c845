"""StockLevel aggregate (CQRS) — available quantity for one product.

Identified by the product it counts. A pass-through ledger, not a
reservation system: decrements are recorded even when they take the
quantity below zero.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from checkout.domain import checkout
from checkout.inventory.events import StockDecremented, StockReplenished


@checkout.aggregate
class StockLevel:
    product_id = Identifier(identifier=True, required=True)
    quantity = Integer(default=0)
    updated_at = DateTime()

    def decrement(self, quantity):
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        previous = self.quantity or 0
        now = datetime.now(UTC)
        self.quantity = previous - quantity
        self.updated_at = now

        self.raise_(
            StockDecremented(
                product_id=str(self.product_id),
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=self.quantity,
                decremented_at=now,
            )
        )

    def replenish(self, quantity):
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        now = datetime.now(UTC)
        self.quantity = (self.quantity or 0) + quantity
        self.updated_at = now

        self.raise_(
            StockReplenished(
                product_id=str(self.product_id),
                quantity=quantity,
                new_quantity=self.quantity,
                replenished_at=now,
            )
        )
