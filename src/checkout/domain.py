"""Checkout bounded context — Baskets, Stock, Wallets and Order Placement.

Handles basket management (CQRS), the per-product stock ledger, stored-value
wallets, and the placement workflow that turns a basket into an immutable
order record. Orders and product reviews live in a separate document store
(the ``documents`` provider); everything else uses the ``default`` provider.
"""

import structlog
from protean.domain import Domain

checkout = Domain(name="checkout")

logger = structlog.get_logger(__name__)
