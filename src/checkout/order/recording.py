"""Order recording — command and handler that write the placed order.

Also home to the order identifier and email redaction rules used when the
record is written.
"""

import hashlib
import json
import re
import secrets

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from checkout.config import settings
from checkout.domain import checkout
from checkout.order.order import Order

_VOWELS = re.compile(r"[aeiou]", re.IGNORECASE)


def generate_order_id(email: str | None) -> str:
    """Short hash prefix of the email plus a random suffix.

    The prefix only groups orders by customer; uniqueness comes from the
    random suffix.
    """
    prefix = hashlib.md5((email or "").encode("utf-8")).hexdigest()[: settings.order_id_prefix_width]  # noqa: S324
    suffix = secrets.token_hex((settings.order_id_suffix_length + 1) // 2)[: settings.order_id_suffix_length]
    return f"{prefix}-{suffix}"


def redact_email(email: str | None) -> str | None:
    if not email:
        return None
    return _VOWELS.sub("*", email)


@checkout.command(part_of="Order")
class RecordOrder:
    order_id = String(required=True, max_length=64)
    basket_id = Identifier()
    customer_id = Identifier()
    email = String(max_length=254)
    lines = Text(required=True)  # JSON: list of priced line dicts
    promotional_amount = Float(default=0.0)
    payment_id = String(max_length=50)
    address_id = Identifier()
    total_price = Float(required=True)
    bonus = Integer(default=0)
    delivery_price = Float(default=0.0)
    eta = Integer(default=5)


@checkout.command_handler(part_of=Order)
class RecordOrderHandler:
    @handle(RecordOrder)
    def record_order(self, command):
        lines = json.loads(command.lines) if isinstance(command.lines, str) else command.lines

        order = Order.place(
            order_id=command.order_id,
            lines=lines,
            total_price=command.total_price,
            promotional_amount=command.promotional_amount or 0.0,
            bonus=command.bonus or 0,
            delivery_price=command.delivery_price or 0.0,
            eta=command.eta,
            customer_id=command.customer_id,
            email=redact_email(command.email),
            payment_id=command.payment_id,
            address_id=command.address_id,
            basket_id=command.basket_id,
        )
        current_domain.repository_for(Order).add(order)
        return order.order_id
