"""Delivery methods and the delivery option a placement is priced with."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from checkout.config import settings
from checkout.domain import checkout
from checkout.placement.errors import DeliveryLookupFailed


@checkout.aggregate
class DeliveryMethod:
    name = String(required=True, max_length=100)
    price = Float(required=True, min_value=0.0)
    premium_price = Float(required=True, min_value=0.0)
    eta = Integer(required=True, min_value=0)  # days


@dataclass(frozen=True)
class DeliveryOption:
    price: float
    premium_price: float
    eta: int
    delivery_method_id: str | None = None

    def cost_for(self, premium: bool) -> float:
        return self.premium_price if premium else self.price


def default_delivery() -> DeliveryOption:
    """Free delivery with the configured default ETA."""
    return DeliveryOption(price=0.0, premium_price=0.0, eta=settings.default_delivery_eta)


def lookup_delivery(delivery_method_id) -> DeliveryOption:
    """Return the option for a delivery method id.

    Raises DeliveryLookupFailed when the id does not resolve.
    """
    try:
        method = current_domain.repository_for(DeliveryMethod).get(delivery_method_id)
    except ObjectNotFoundError as exc:
        raise DeliveryLookupFailed(delivery_method_id) from exc

    return DeliveryOption(
        price=method.price,
        premium_price=method.premium_price,
        eta=method.eta,
        delivery_method_id=str(method.id),
    )
