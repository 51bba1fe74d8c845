"""Basket aggregate (CQRS) — a customer's selection of products prior to checkout.

The basket is the read-only input to order placement: placing an order never
mutates it. Items keep the position they were added at so that priced lines
and receipts come out in basket order.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from checkout.basket.events import (
    BasketCouponApplied,
    BasketItemAdded,
    BasketItemRemoved,
    BasketQuantityUpdated,
)
from checkout.domain import checkout


@checkout.entity(part_of="Basket")
class BasketItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    position = Integer(default=0)
    added_at = DateTime()


@checkout.aggregate
class Basket:
    customer_id = Identifier()  # Nullable for anonymous baskets
    items = HasMany(BasketItem)
    coupon = String(max_length=100)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def ordered_items(self):
        """Items in the order they were added to the basket."""
        return sorted(self.items, key=lambda item: item.position or 0)

    def add_item(self, product_id, quantity):
        """Add a product to the basket (or increase its quantity if already present)."""
        existing = next((i for i in self.items if str(i.product_id) == str(product_id)), None)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            next_position = max((i.position or 0 for i in self.items), default=-1) + 1
            item = BasketItem(
                product_id=product_id,
                quantity=quantity,
                position=next_position,
                added_at=now,
            )
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = now

        self.raise_(
            BasketItemAdded(
                basket_id=str(self.id),
                item_id=item_id,
                product_id=str(product_id),
                quantity=quantity,
            )
        )

    def update_item_quantity(self, item_id, new_quantity):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in basket"]})

        previous_quantity = item.quantity
        item.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            BasketQuantityUpdated(
                basket_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )

    def remove_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in basket"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(BasketItemRemoved(basket_id=str(self.id), item_id=str(item_id)))

    def apply_coupon(self, coupon_code):
        """Store a coupon code on the basket. A basket holds at most one coupon."""
        if not coupon_code or not coupon_code.strip():
            raise ValidationError({"coupon_code": ["Coupon code cannot be blank"]})

        self.coupon = coupon_code.strip()
        self.updated_at = datetime.now(UTC)

        self.raise_(BasketCouponApplied(basket_id=str(self.id), coupon_code=self.coupon))
