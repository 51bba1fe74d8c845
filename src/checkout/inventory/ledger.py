"""Inventory ledger — stock commands, handler and the ledger used at checkout.

Each decrement is its own unit of work: it commits independently of the
rest of the placement. The ledger holds a per-product lock across that unit
of work, so concurrent placements touching the same product serialize their
read-modify-write instead of losing a decrement.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.inventory.stock import StockLevel
from checkout.shared.locks import KeyedLock

logger = structlog.get_logger(__name__)

_product_locks = KeyedLock()


@checkout.command(part_of="StockLevel")
class DecrementStock:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@checkout.command(part_of="StockLevel")
class RestockProduct:
    """Add stock for a product, opening its stock record if needed."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@checkout.command_handler(part_of=StockLevel)
class StockLedgerHandler:
    @handle(DecrementStock)
    def decrement_stock(self, command):
        repo = current_domain.repository_for(StockLevel)
        try:
            stock = repo.get(command.product_id)
        except ObjectNotFoundError:
            logger.debug("No stock record for product", product_id=str(command.product_id))
            return None

        stock.decrement(command.quantity)
        repo.add(stock)
        return stock.quantity

    @handle(RestockProduct)
    def restock_product(self, command):
        repo = current_domain.repository_for(StockLevel)
        try:
            stock = repo.get(command.product_id)
        except ObjectNotFoundError:
            stock = StockLevel(product_id=command.product_id, quantity=0)

        stock.replenish(command.quantity)
        repo.add(stock)
        return stock.quantity


class InventoryLedger:
    def __init__(self, locks: KeyedLock | None = None) -> None:
        self._locks = locks or _product_locks

    def decrement(self, product_id, quantity: int) -> int | None:
        """Reduce available stock and return the new quantity.

        Returns None (and changes nothing) when the product has no stock record.
        """
        with self._locks.hold(product_id):
            new_quantity = current_domain.process(
                DecrementStock(product_id=product_id, quantity=quantity),
                asynchronous=False,
            )

        if new_quantity is not None:
            logger.info(
                "Stock decremented",
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=new_quantity,
            )
        return new_quantity

    def available(self, product_id) -> int | None:
        try:
            return current_domain.repository_for(StockLevel).get(product_id).quantity
        except ObjectNotFoundError:
            return None
