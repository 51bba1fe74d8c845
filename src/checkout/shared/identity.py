"""Identity provider port.

Authentication happens upstream (gateway / session layer). Checkout only
needs to know *who* is placing the order, their email and whether they are
a premium customer, so it reads that from a provider that sits behind this
narrow interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

PREMIUM_TIER = "premium"


@dataclass(frozen=True)
class Shopper:
    """An authenticated customer as seen by the checkout workflow."""

    customer_id: str
    email: str = ""
    premium: bool = False


class IdentityProvider(ABC):
    @abstractmethod
    def current_user(self, request) -> Shopper | None:
        """Return the authenticated shopper for a request, or None if anonymous."""
        ...


class HeaderIdentityProvider(IdentityProvider):
    """Reads identity headers stamped by the upstream authentication layer.

    The headers are trusted as-is: they must never be forwarded from clients.
    """

    def __init__(
        self,
        id_header: str = "X-Customer-Id",
        email_header: str = "X-Customer-Email",
        tier_header: str = "X-Customer-Tier",
    ) -> None:
        self.id_header = id_header
        self.email_header = email_header
        self.tier_header = tier_header

    def current_user(self, request) -> Shopper | None:
        customer_id = request.headers.get(self.id_header)
        if not customer_id:
            return None
        return Shopper(
            customer_id=customer_id,
            email=request.headers.get(self.email_header, ""),
            premium=request.headers.get(self.tier_header, "").lower() == PREMIUM_TIER,
        )
