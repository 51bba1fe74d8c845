"""Checkout — converts shopping baskets into placed orders.

    from checkout.domain import checkout
    from checkout.placement.placement import OrderPlacement
"""

__version__ = "0.1.0"
