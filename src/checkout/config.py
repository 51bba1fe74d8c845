"""Workflow settings for order placement, read from ``CHECKOUT_*`` env vars.

Store and broker wiring lives in ``domain.toml``; these are the knobs the
placement workflow itself consults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckoutSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHECKOUT_")

    # Payment method id that routes the charge to the stored-value wallet
    wallet_payment_method: str = "wallet"

    # Delivery tier used when no (or an unknown) delivery method is chosen
    default_delivery_eta: int = 5

    # Order id = hash(email)[:prefix_width] + "-" + suffix_length random hex chars
    order_id_prefix_width: int = 4
    order_id_suffix_length: int = 16

    # Review store latency seam
    review_delay_cap: float = 2.0
    slow_review_query: float = 1.5


settings = CheckoutSettings()
