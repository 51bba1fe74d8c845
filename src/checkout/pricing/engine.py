"""Pricing engine — turns basket lines, a discount and a delivery tier into a priced order.

Pure functions, no I/O. Amounts are floats, as stored on orders.

Rounding, which decides reward totals and discount amounts:

* Line bonus is ``round(unit_price / 10) * quantity`` with ties rounded away
  from zero (2.5 -> 3, 0.5 -> 1), applied to the exact binary value of the
  price so 0.49999999999999994 still rounds to 0.
* The discount amount is rounded to cents (ties away from zero) *before* it
  is subtracted. The grand total is then computed from the rounded amount and
  may carry a fractional-cent float residue; totals are not re-rounded.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from checkout.basket.loading import BasketLine
from checkout.catalogue.delivery import DeliveryOption

_ONE = Decimal("1")
_CENT = Decimal("0.01")


def round_half_away(value: float) -> int:
    return int(Decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP))


def round2(value: float) -> float:
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PricedLine:
    quantity: int
    product_id: str
    name: str
    price: float
    total: float
    bonus: int


@dataclass(frozen=True)
class LinePricing:
    """Priced lines with the discount applied, before delivery."""

    lines: tuple[PricedLine, ...]
    subtotal: float
    discount_pct: int
    discount_amount: float
    total_points: int

    @property
    def discounted_total(self) -> float:
        return self.subtotal - self.discount_amount


@dataclass(frozen=True)
class PricedBasket:
    lines: tuple[PricedLine, ...]
    subtotal: float
    discount_pct: int
    discount_amount: float
    delivery_amount: float
    total_price: float
    total_points: int

    @property
    def discount_text(self) -> str:
        return f"{self.discount_amount:.2f}"


def price_line(line: BasketLine, premium: bool) -> PricedLine:
    unit_price = line.premium_price if premium else line.price
    return PricedLine(
        quantity=line.quantity,
        product_id=line.product_id,
        name=line.name,
        price=unit_price,
        total=unit_price * line.quantity,
        bonus=round_half_away(unit_price / 10) * line.quantity,
    )


def price_lines(lines: Iterable[BasketLine], discount_pct: int, premium: bool = False) -> LinePricing:
    if not 0 <= discount_pct <= 100:
        raise ValueError(f"Discount must be between 0 and 100 percent, got {discount_pct}")

    priced = tuple(price_line(line, premium) for line in lines)
    subtotal = 0.0
    total_points = 0
    for line in priced:
        subtotal += line.total
        total_points += line.bonus

    discount_amount = round2(subtotal * (discount_pct / 100)) if discount_pct > 0 else 0.0

    return LinePricing(
        lines=priced,
        subtotal=subtotal,
        discount_pct=discount_pct,
        discount_amount=discount_amount,
        total_points=total_points,
    )


def with_delivery(pricing: LinePricing, delivery: DeliveryOption, premium: bool = False) -> PricedBasket:
    delivery_amount = delivery.cost_for(premium)
    return PricedBasket(
        lines=pricing.lines,
        subtotal=pricing.subtotal,
        discount_pct=pricing.discount_pct,
        discount_amount=pricing.discount_amount,
        delivery_amount=delivery_amount,
        total_price=pricing.discounted_total + delivery_amount,
        total_points=pricing.total_points,
    )


def price(
    lines: Iterable[BasketLine],
    discount_pct: int,
    delivery: DeliveryOption,
    premium: bool = False,
) -> PricedBasket:
    """Price a basket end to end."""
    return with_delivery(price_lines(lines, discount_pct, premium), delivery, premium)
