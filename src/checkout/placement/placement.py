"""Order placement — converts a basket into a placed order.

One attempt walks these steps, stopping at the first failure:

    LOAD_BASKET → APPLY_INVENTORY → APPLY_DISCOUNT → PRICE → RESOLVE_DELIVERY
    → CHARGE_WALLET (wallet payment with a customer) → CREDIT_POINTS (customer)
    → PERSIST → DONE

Stock decrements, the wallet charge, the reward credit and the order record
are separate commits across two stores; there is no compensation. If the
wallet charge fails with InsufficientFunds the stock decrements stay
committed, but no reward is credited and no order is written.
"""

import json
from dataclasses import asdict, dataclass, replace

import structlog
from protean.utils.globals import current_domain

from checkout.basket.loading import BasketSnapshot, load_basket
from checkout.catalogue.delivery import DeliveryOption, default_delivery, lookup_delivery
from checkout.catalogue.localization import Localizer, PassthroughLocalizer
from checkout.config import settings
from checkout.discount.resolver import DiscountResolver
from checkout.inventory.ledger import InventoryLedger
from checkout.order.order import Order
from checkout.order.recording import RecordOrder, generate_order_id
from checkout.placement.errors import DeliveryLookupFailed, PlacementError, PlacementStep
from checkout.pricing.engine import PricedBasket, price_lines, with_delivery
from checkout.receipt import ArchivingReceiptRenderer, ReceiptRenderer
from checkout.receipt.formatting import format_discount, format_line
from checkout.shared.identity import Shopper
from checkout.wallet.ledger import WalletLedger

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderDetails:
    payment_method: str | None = None
    delivery_method_id: str | None = None
    address_id: str | None = None
    coupon_token: str | None = None


@dataclass
class _Progress:
    step: PlacementStep = PlacementStep.START


class OrderPlacement:
    def __init__(
        self,
        resolver: DiscountResolver | None = None,
        inventory: InventoryLedger | None = None,
        wallet: WalletLedger | None = None,
        localizer: Localizer | None = None,
        renderer: ReceiptRenderer | None = None,
    ) -> None:
        self.resolver = resolver or DiscountResolver()
        self.inventory = inventory or InventoryLedger()
        self.wallet = wallet or WalletLedger()
        self.localizer = localizer or PassthroughLocalizer()
        self.renderer = renderer or ArchivingReceiptRenderer()

    def place(self, basket_id, customer: Shopper | None = None, details: OrderDetails | None = None) -> Order:
        """Place an order for a basket and return the persisted order.

        Raises BasketNotFound or InsufficientFunds; store errors propagate
        unchanged. Every failure is logged with the step it happened in.
        """
        details = details or OrderDetails()
        progress = _Progress()
        try:
            return self._place(basket_id, customer, details, progress)
        except Exception as exc:
            step = exc.step if isinstance(exc, PlacementError) else progress.step
            logger.warning(
                "Order placement failed",
                basket_id=str(basket_id),
                step=step.value,
                error=str(exc),
            )
            raise

    def _place(self, basket_id, customer: Shopper | None, details: OrderDetails, progress: _Progress) -> Order:
        progress.step = PlacementStep.LOAD_BASKET
        basket = load_basket(basket_id)
        email = customer.email if customer else ""
        premium = bool(customer and customer.premium)
        order_id = generate_order_id(email)

        progress.step = PlacementStep.APPLY_INVENTORY
        for line in basket.lines:
            self.inventory.decrement(line.product_id, line.quantity)

        progress.step = PlacementStep.APPLY_DISCOUNT
        discount_pct = self.resolver.resolve(basket, details.coupon_token)

        progress.step = PlacementStep.PRICE
        lines = [replace(line, name=self.localizer.localize(line.name)) for line in basket.lines]
        pricing = price_lines(lines, discount_pct, premium)

        progress.step = PlacementStep.RESOLVE_DELIVERY
        delivery = self._delivery_for(details.delivery_method_id)
        priced = with_delivery(pricing, delivery, premium)

        if customer and details.payment_method == settings.wallet_payment_method:
            progress.step = PlacementStep.CHARGE_WALLET
            self.wallet.charge(customer.customer_id, priced.total_price)
        if customer:
            progress.step = PlacementStep.CREDIT_POINTS
            self.wallet.reward(customer.customer_id, priced.total_points)

        progress.step = PlacementStep.PERSIST
        order = self._persist(order_id, basket, customer, details, priced, delivery)
        self.renderer.render(
            order_id,
            [format_line(line, self.localizer) for line in priced.lines],
            format_discount(priced),
        )
        progress.step = PlacementStep.DONE
        logger.info(
            "Order placed",
            order_id=order_id,
            basket_id=basket.basket_id,
            total_price=priced.total_price,
            bonus=priced.total_points,
        )
        return order

    def _delivery_for(self, delivery_method_id) -> DeliveryOption:
        if not delivery_method_id:
            return default_delivery()
        try:
            return lookup_delivery(delivery_method_id)
        except DeliveryLookupFailed as exc:
            logger.warning("Falling back to default delivery", delivery_method_id=str(exc.delivery_method_id))
            return default_delivery()

    def _persist(
        self,
        order_id: str,
        basket: BasketSnapshot,
        customer: Shopper | None,
        details: OrderDetails,
        priced: PricedBasket,
        delivery: DeliveryOption,
    ) -> Order:
        current_domain.process(
            RecordOrder(
                order_id=order_id,
                basket_id=basket.basket_id,
                customer_id=customer.customer_id if customer else None,
                email=customer.email if customer else None,
                lines=json.dumps([asdict(line) for line in priced.lines]),
                promotional_amount=priced.discount_amount,
                payment_id=details.payment_method,
                address_id=details.address_id,
                total_price=priced.total_price,
                bonus=priced.total_points,
                delivery_price=priced.delivery_amount,
                eta=delivery.eta,
            ),
            asynchronous=False,
        )
        return current_domain.repository_for(Order).get(order_id)


def place_order(basket_id, customer: Shopper | None = None, **details) -> Order:
    """Place an order with default collaborators."""
    return OrderPlacement().place(basket_id, customer, OrderDetails(**details))
