"""Domain events for the Wallet aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from checkout.domain import checkout


@checkout.event(part_of="Wallet")
class WalletCharged:
    """An order was paid from the wallet."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    new_balance = Float(required=True)
    charged_at = DateTime(required=True)


@checkout.event(part_of="Wallet")
class WalletCredited:
    """Reward points or a top-up were credited to the wallet."""

    __version__ = 1

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    reason = String(required=True)
    new_balance = Float(required=True)
    credited_at = DateTime(required=True)
