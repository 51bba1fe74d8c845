"""Receipt archive — rendered receipts kept in the document store.

``ArchivingReceiptRenderer`` wraps another renderer and records every
receipt it produces as a ``ReceiptDocument`` on the ``documents`` provider,
beside the order it belongs to. The API reads receipts back from there, so
nothing accumulates in process memory.
"""

import base64
from datetime import UTC, datetime

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, String, Text
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.receipt.port import Receipt, ReceiptRenderer
from checkout.receipt.text_renderer import TextReceiptRenderer


@checkout.aggregate(provider="documents")
class ReceiptDocument:
    order_id = String(identifier=True, required=True, max_length=64)
    filename = String(required=True, max_length=255)
    media_type = String(required=True, max_length=100)
    content = Text(required=True)  # Base64 of the rendered bytes
    rendered_at = DateTime()

    def to_receipt(self) -> Receipt:
        return Receipt(
            order_id=self.order_id,
            filename=self.filename,
            content=base64.b64decode(self.content),
            media_type=self.media_type,
        )


@checkout.command(part_of="ReceiptDocument")
class ArchiveReceipt:
    order_id = String(required=True, max_length=64)
    filename = String(required=True, max_length=255)
    media_type = String(required=True, max_length=100)
    content = Text(required=True)


@checkout.command_handler(part_of=ReceiptDocument)
class ArchiveReceiptHandler:
    @handle(ArchiveReceipt)
    def archive_receipt(self, command):
        document = ReceiptDocument(
            order_id=command.order_id,
            filename=command.filename,
            media_type=command.media_type,
            content=command.content,
            rendered_at=datetime.now(UTC),
        )
        current_domain.repository_for(ReceiptDocument).add(document)
        return document.order_id


class ArchivingReceiptRenderer(ReceiptRenderer):
    def __init__(self, renderer: ReceiptRenderer | None = None) -> None:
        self.renderer = renderer or TextReceiptRenderer()

    def render(self, order_id, lines, discount_line=None) -> Receipt:
        receipt = self.renderer.render(order_id, lines, discount_line)
        current_domain.process(
            ArchiveReceipt(
                order_id=receipt.order_id,
                filename=receipt.filename,
                media_type=receipt.media_type,
                content=base64.b64encode(receipt.content).decode("ascii"),
            ),
            asynchronous=False,
        )
        return receipt


def find_receipt(order_id) -> Receipt | None:
    try:
        return current_domain.repository_for(ReceiptDocument).get(order_id).to_receipt()
    except ObjectNotFoundError:
        return None
