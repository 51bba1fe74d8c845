"""Receipt rendering.

Provides the ReceiptRenderer port, the default TextReceiptRenderer and the
archiving wrapper that stores receipts in the document store.
"""

from checkout.receipt.archive import ArchivingReceiptRenderer, find_receipt
from checkout.receipt.port import Receipt, ReceiptRenderer
from checkout.receipt.text_renderer import TextReceiptRenderer

__all__ = ("ArchivingReceiptRenderer", "Receipt", "ReceiptRenderer", "TextReceiptRenderer", "find_receipt")
