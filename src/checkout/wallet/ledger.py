"""Wallet ledger — wallet commands, handler and the ledger used at checkout.

``charge`` and ``reward`` are each one atomic adjustment of the stored
balance: the per-customer lock is held across the whole unit of work that
loads, checks, adjusts and saves the wallet. Two orders for the same
customer therefore cannot both read the same starting balance.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.placement.errors import InsufficientFunds
from checkout.shared.locks import KeyedLock
from checkout.wallet.wallet import CreditReason, Wallet

logger = structlog.get_logger(__name__)

_customer_locks = KeyedLock()


@checkout.command(part_of="Wallet")
class OpenWallet:
    customer_id = Identifier(required=True)
    balance = Float(default=0.0, min_value=0.0)


@checkout.command(part_of="Wallet")
class ChargeWallet:
    customer_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)


@checkout.command(part_of="Wallet")
class CreditWallet:
    customer_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    reason = String(choices=CreditReason, default=CreditReason.REWARD.value)


@checkout.command(part_of="Wallet")
class TopUpWallet:
    customer_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)


@checkout.command_handler(part_of=Wallet)
class WalletLedgerHandler:
    @handle(OpenWallet)
    def open_wallet(self, command):
        wallet = Wallet.open(customer_id=command.customer_id, balance=command.balance or 0.0)
        current_domain.repository_for(Wallet).add(wallet)
        return str(wallet.customer_id)

    @handle(ChargeWallet)
    def charge_wallet(self, command):
        repo = current_domain.repository_for(Wallet)
        try:
            wallet = repo.get(command.customer_id)
        except ObjectNotFoundError as exc:
            raise InsufficientFunds(command.customer_id, 0.0, command.amount) from exc

        wallet.debit(command.amount)
        repo.add(wallet)
        return wallet.balance

    @handle(CreditWallet)
    def credit_wallet(self, command):
        repo = current_domain.repository_for(Wallet)
        try:
            wallet = repo.get(command.customer_id)
        except ObjectNotFoundError:
            logger.info("No wallet to credit", customer_id=str(command.customer_id))
            return None

        wallet.credit(command.amount, reason=command.reason)
        repo.add(wallet)
        return wallet.balance

    @handle(TopUpWallet)
    def top_up_wallet(self, command):
        repo = current_domain.repository_for(Wallet)
        wallet = repo.get(command.customer_id)
        wallet.credit(command.amount, reason=CreditReason.TOP_UP.value)
        repo.add(wallet)
        return wallet.balance


class WalletLedger:
    def __init__(self, locks: KeyedLock | None = None) -> None:
        self._locks = locks or _customer_locks

    def charge(self, customer_id, amount: float) -> float:
        """Debit ``amount`` and return the new balance.

        Raises InsufficientFunds, leaving the balance untouched, when the
        wallet is missing or holds less than ``amount``.
        """
        with self._locks.hold(customer_id):
            balance = current_domain.process(
                ChargeWallet(customer_id=customer_id, amount=amount),
                asynchronous=False,
            )
        logger.info("Wallet charged", customer_id=str(customer_id), amount=amount)
        return balance

    def reward(self, customer_id, points: int) -> float | None:
        """Credit reward points. A customer without a wallet earns nothing."""
        return self.credit(customer_id, points, CreditReason.REWARD)

    def top_up(self, customer_id, amount: float) -> float:
        """Add funds to an existing wallet. Raises ObjectNotFoundError if there is none."""
        with self._locks.hold(customer_id):
            return current_domain.process(TopUpWallet(customer_id=customer_id, amount=amount), asynchronous=False)

    def credit(self, customer_id, amount: float, reason: CreditReason) -> float | None:
        with self._locks.hold(customer_id):
            return current_domain.process(
                CreditWallet(customer_id=customer_id, amount=amount, reason=reason.value),
                asynchronous=False,
            )

    def balance_of(self, customer_id) -> float | None:
        try:
            return current_domain.repository_for(Wallet).get(customer_id).balance
        except ObjectNotFoundError:
            return None
