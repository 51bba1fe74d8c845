"""Receipt renderer port (abstract interface).

A renderer receives the formatted receipt lines of one order, in basket
order, and an optional trailing discount line, and produces a document
artifact. Layout and storage of the artifact belong to the adapter.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Receipt:
    order_id: str
    filename: str
    content: bytes
    media_type: str


class ReceiptRenderer(ABC):
    @abstractmethod
    def render(self, order_id: str, lines: Sequence[str], discount_line: str | None = None) -> Receipt:
        """Produce the receipt document for an order."""
        ...
