"""Wallet aggregate (CQRS) — a customer's stored-value balance.

Identified by the owning customer. Balance only moves through ``debit`` and
``credit``; a debit is checked against the balance before anything changes.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier

from checkout.domain import checkout
from checkout.placement.errors import InsufficientFunds
from checkout.wallet.events import WalletCharged, WalletCredited


class CreditReason(Enum):
    REWARD = "Reward"
    TOP_UP = "Top_Up"


@checkout.aggregate
class Wallet:
    customer_id = Identifier(identifier=True, required=True)
    balance = Float(default=0.0)
    updated_at = DateTime()

    @invariant.post
    def balance_must_not_be_negative(self):
        if self.balance is not None and self.balance < 0:
            raise ValidationError({"balance": ["Wallet balance cannot be negative"]})

    @classmethod
    def open(cls, customer_id, balance=0.0):
        return cls(customer_id=customer_id, balance=balance, updated_at=datetime.now(UTC))

    def debit(self, amount):
        if amount < 0:
            raise ValidationError({"amount": ["Amount cannot be negative"]})
        if self.balance < amount:
            raise InsufficientFunds(self.customer_id, self.balance, amount)

        now = datetime.now(UTC)
        self.balance = self.balance - amount
        self.updated_at = now

        self.raise_(
            WalletCharged(
                customer_id=str(self.customer_id),
                amount=amount,
                new_balance=self.balance,
                charged_at=now,
            )
        )

    def credit(self, amount, reason=CreditReason.REWARD.value):
        if amount < 0:
            raise ValidationError({"amount": ["Amount cannot be negative"]})

        now = datetime.now(UTC)
        self.balance = self.balance + amount
        self.updated_at = now

        self.raise_(
            WalletCredited(
                customer_id=str(self.customer_id),
                amount=amount,
                reason=reason,
                new_balance=self.balance,
                credited_at=now,
            )
        )
