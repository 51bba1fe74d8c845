"""Checkout API routers."""

from checkout.api.routes import basket_router, order_router, review_router, wallet_router

__all__ = ["basket_router", "order_router", "review_router", "wallet_router"]
