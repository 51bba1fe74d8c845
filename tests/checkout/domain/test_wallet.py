"""Tests for the Wallet aggregate."""

import pytest
from checkout.placement.errors import InsufficientFunds, PlacementStep
from checkout.wallet.events import WalletCharged, WalletCredited
from checkout.wallet.wallet import CreditReason, Wallet
from protean.exceptions import ValidationError


class TestWalletDebit:
    def test_debit_reduces_balance(self):
        wallet = Wallet.open(customer_id="cust-001", balance=50.0)
        wallet.debit(20.0)

        assert wallet.balance == 30.0
        event = wallet._events[0]
        assert isinstance(event, WalletCharged)
        assert event.new_balance == 30.0

    def test_debit_entire_balance(self):
        wallet = Wallet.open(customer_id="cust-001", balance=23.0)
        wallet.debit(23.0)
        assert wallet.balance == 0.0

    def test_insufficient_balance_leaves_wallet_untouched(self):
        wallet = Wallet.open(customer_id="cust-001", balance=10.0)

        with pytest.raises(InsufficientFunds) as exc:
            wallet.debit(10.01)

        assert wallet.balance == 10.0
        assert wallet._events == []
        assert exc.value.step == PlacementStep.CHARGE_WALLET
        assert exc.value.messages == {"balance": ["Insufficient wallet balance."]}

    def test_negative_amount_is_rejected(self):
        wallet = Wallet.open(customer_id="cust-001", balance=10.0)
        with pytest.raises(ValidationError):
            wallet.debit(-1.0)


class TestWalletCredit:
    def test_reward_credit(self):
        wallet = Wallet.open(customer_id="cust-001", balance=5.0)
        wallet.credit(3)

        assert wallet.balance == 8.0
        event = wallet._events[0]
        assert isinstance(event, WalletCredited)
        assert event.reason == CreditReason.REWARD.value

    def test_top_up_credit(self):
        wallet = Wallet.open(customer_id="cust-001")
        wallet.credit(100.0, reason=CreditReason.TOP_UP.value)

        assert wallet.balance == 100.0
        assert wallet._events[0].reason == CreditReason.TOP_UP.value

    def test_zero_credit_is_allowed(self):
        wallet = Wallet.open(customer_id="cust-001", balance=5.0)
        wallet.credit(0)
        assert wallet.balance == 5.0


class TestWalletInvariant:
    def test_cannot_open_with_negative_balance(self):
        with pytest.raises(ValidationError):
            Wallet.open(customer_id="cust-001", balance=-1.0)
