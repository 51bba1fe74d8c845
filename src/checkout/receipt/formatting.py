"""Receipt line wording shared by every renderer."""

from checkout.catalogue.localization import Localizer, PassthroughLocalizer
from checkout.pricing.engine import PricedBasket, PricedLine

CURRENCY_SIGN = "¤"


def format_amount(value: float) -> str:
    """Whole amounts print without decimals (20, not 20.0)."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_line(line: PricedLine, localizer: Localizer | None = None) -> str:
    each = (localizer or PassthroughLocalizer()).localize("ea.")
    return f"{line.quantity}x {line.name} {each} {format_amount(line.price)} = {format_amount(line.total)}{CURRENCY_SIGN}"


def format_discount(priced: PricedBasket) -> str | None:
    if priced.discount_pct <= 0:
        return None
    return f"{priced.discount_pct}% discount from coupon: -{priced.discount_text}{CURRENCY_SIGN}"
