"""Basket source for order placement.

Joins a basket's items with the products they reference and returns an
immutable snapshot. Items whose product can no longer be resolved carry no
line and are skipped.
"""

from dataclasses import dataclass

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from checkout.basket.basket import Basket
from checkout.catalogue.product import Product
from checkout.placement.errors import BasketNotFound

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BasketLine:
    product_id: str
    name: str
    quantity: int
    price: float
    premium_price: float


@dataclass(frozen=True)
class BasketSnapshot:
    basket_id: str
    customer_id: str | None
    coupon: str | None
    lines: tuple[BasketLine, ...]


def load_basket(basket_id) -> BasketSnapshot:
    """Load a basket with its lines joined to products.

    Raises BasketNotFound when the basket does not exist.
    """
    try:
        basket = current_domain.repository_for(Basket).get(basket_id)
    except ObjectNotFoundError as exc:
        raise BasketNotFound(basket_id) from exc

    products = current_domain.repository_for(Product)
    lines = []
    for item in basket.ordered_items():
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            logger.debug(
                "Skipping basket item without product",
                basket_id=str(basket.id),
                product_id=str(item.product_id),
            )
            continue

        lines.append(
            BasketLine(
                product_id=str(product.id),
                name=product.name,
                quantity=item.quantity,
                price=product.price,
                premium_price=product.premium_price,
            )
        )

    return BasketSnapshot(
        basket_id=str(basket.id),
        customer_id=str(basket.customer_id) if basket.customer_id else None,
        coupon=basket.coupon or None,
        lines=tuple(lines),
    )
