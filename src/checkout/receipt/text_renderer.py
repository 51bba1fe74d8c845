"""Plain-text receipt renderer: one paragraph per line, discount last."""

from collections.abc import Sequence

from checkout.receipt.port import Receipt, ReceiptRenderer


class TextReceiptRenderer(ReceiptRenderer):
    def render(self, order_id: str, lines: Sequence[str], discount_line: str | None = None) -> Receipt:
        body = list(lines)
        if discount_line:
            body.append(discount_line)

        return Receipt(
            order_id=order_id,
            filename=f"order_{order_id}.txt",
            content=("\n\n".join(body) + "\n").encode("utf-8"),
            media_type="text/plain; charset=utf-8",
        )
