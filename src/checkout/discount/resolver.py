"""Discount resolution for a basket at checkout.

Exactly one source applies, in this order:

1. The coupon stored on the basket, decoded through the coupon decoder.
   A coupon that decodes to a discount wins outright.
2. A campaign token supplied with the order request: Base64 of
   ``CODE-TIMESTAMP``. It is honoured only when CODE is a known campaign and
   TIMESTAMP equals the campaign's validity timestamp exactly.
3. Otherwise no discount.

Two audit signals are logged (never affecting the result): a stored coupon
granting 80% or more, and an accepted campaign whose validity timestamp lies
in the past at evaluation time.
"""

import base64
import binascii
import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime

import structlog

from checkout.basket.loading import BasketSnapshot
from checkout.discount.campaigns import CAMPAIGNS, Campaign, find_campaign
from checkout.discount.coupons import CouponDecoder, MonthlyCouponCodec
from checkout.placement.errors import InvalidCouponToken

logger = structlog.get_logger(__name__)

FORGED_COUPON_THRESHOLD = 80

# ASCII digits only: int() would also take "_" separators, padding and non-ASCII digits
_TIMESTAMP = re.compile(r"[0-9]+")


def decode_campaign_token(token: str) -> tuple[str, int]:
    """Split a campaign token into its code and timestamp.

    Raises InvalidCouponToken when the token is not Base64 text of the form
    ``CODE-TIMESTAMP`` with an integer timestamp.
    """
    try:
        plain = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise InvalidCouponToken("Campaign token is not valid Base64 text") from exc

    parts = plain.split("-")
    if len(parts) < 2 or not parts[0]:
        raise InvalidCouponToken("Campaign token must be CODE-TIMESTAMP")
    if not _TIMESTAMP.fullmatch(parts[1]):
        raise InvalidCouponToken("Campaign token timestamp is not an integer")
    return parts[0], int(parts[1])


class DiscountResolver:
    def __init__(
        self,
        coupons: CouponDecoder | None = None,
        campaigns: Mapping[str, Campaign] = CAMPAIGNS,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._coupons = coupons or MonthlyCouponCodec()
        self._campaigns = campaigns
        self._clock = clock or (lambda: datetime.now(UTC))

    def resolve(self, basket: BasketSnapshot, coupon_token: str | None = None) -> int:
        """Return the discount percentage (0-100) applicable to the basket."""
        discount = self._coupons.decode(basket.coupon) if basket.coupon else None
        if discount:
            if discount >= FORGED_COUPON_THRESHOLD:
                logger.warning(
                    "Discount audit",
                    signal="forged_coupon",
                    basket_id=basket.basket_id,
                    discount=discount,
                )
            return discount

        if coupon_token:
            campaign = self._accepted_campaign(coupon_token)
            if campaign is not None:
                if campaign.valid_on < int(self._clock().timestamp() * 1000):
                    logger.warning(
                        "Discount audit",
                        signal="campaign_clock_skew",
                        basket_id=basket.basket_id,
                        campaign=campaign.code,
                    )
                return campaign.discount

        return 0

    def _accepted_campaign(self, coupon_token: str) -> Campaign | None:
        try:
            code, timestamp = decode_campaign_token(coupon_token)
        except InvalidCouponToken as exc:
            logger.info("Ignoring campaign token", reason=str(exc))
            return None

        campaign = find_campaign(code, self._campaigns)
        if campaign is None or timestamp != campaign.valid_on:
            return None
        return campaign
