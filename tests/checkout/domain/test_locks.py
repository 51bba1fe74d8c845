"""Tests for the per-key lock used by the stock and wallet ledgers."""

import threading

import pytest
from checkout.shared.locks import KeyedLock


class TestKeyedLock:
    def test_key_is_released_after_use(self):
        locks = KeyedLock()
        for key in range(100):
            with locks.hold(f"prod-{key}"):
                assert len(locks) == 1

        assert len(locks) == 0

    def test_key_is_released_when_the_body_raises(self):
        locks = KeyedLock()
        with pytest.raises(RuntimeError):
            with locks.hold("prod-001"):
                raise RuntimeError("boom")

        assert len(locks) == 0

    def test_same_key_is_mutually_exclusive(self):
        locks = KeyedLock()
        inside = []
        overlaps = []

        def worker():
            for _ in range(200):
                with locks.hold("cust-001"):
                    inside.append(1)
                    if len(inside) > 1:
                        overlaps.append(True)
                    inside.pop()

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert overlaps == []
        assert len(locks) == 0

    def test_different_keys_do_not_block_each_other(self):
        locks = KeyedLock()
        entered = threading.Event()

        def hold_other():
            with locks.hold("prod-002"):
                entered.set()

        with locks.hold("prod-001"):
            thread = threading.Thread(target=hold_other)
            thread.start()
            assert entered.wait(timeout=2)
            thread.join()
