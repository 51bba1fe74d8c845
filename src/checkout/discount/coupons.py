"""Coupon decoder port and the default monthly coupon codec.

A monthly coupon is the Base85 encoding of ``MMMYY-NN``: the upper-case
month abbreviation and two-digit year it is valid in, and the discount
percentage. It only decodes during the month it names.
"""

import base64
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime

_MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
_COUPON_FORMAT = re.compile(r"(?P<validity>[A-Z]{3}[0-9]{2})-(?P<discount>[0-9]{2})")


class CouponDecoder(ABC):
    @abstractmethod
    def decode(self, code: str) -> int | None:
        """Return the discount percentage a coupon grants, or None."""
        ...


def to_mmmyy(when: datetime) -> str:
    return f"{_MONTHS[when.month - 1]}{when:%y}"


class MonthlyCouponCodec(CouponDecoder):
    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def generate(self, discount: int, when: datetime | None = None) -> str:
        if not 0 < discount < 100:
            raise ValueError(f"Coupon discount must be between 1 and 99, got {discount}")
        plain = f"{to_mmmyy(when or self._clock())}-{discount:02d}"
        return base64.b85encode(plain.encode("ascii")).decode("ascii")

    def decode(self, code: str) -> int | None:
        if not code:
            return None
        try:
            plain = base64.b85decode(code.encode("ascii")).decode("ascii")
        except (ValueError, UnicodeError):
            return None

        match = _COUPON_FORMAT.fullmatch(plain)
        if match is None or match["validity"] != to_mmmyy(self._clock()):
            return None
        return int(match["discount"])


def generate_coupon(discount: int, when: datetime | None = None) -> str:
    """Issue a monthly coupon for ``discount`` percent, valid in the month of ``when``."""
    return MonthlyCouponCodec().generate(discount, when)
