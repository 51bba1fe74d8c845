"""FastAPI routes for the Checkout domain — baskets, orders, wallets and reviews."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response
from protean.utils.globals import current_domain

from checkout.api.errors import domain_errors
from checkout.api.schemas import (
    AddToBasketRequest,
    ApplyCouponRequest,
    BasketIdResponse,
    CheckoutRequest,
    CreateBasketRequest,
    EditReviewRequest,
    EditReviewResponse,
    OrderedProductSchema,
    OrderResponse,
    PlacedOrderResponse,
    PostReviewRequest,
    ReviewIdResponse,
    ReviewSchema,
    StatusResponse,
    UpdateBasketQuantityRequest,
    WalletResponse,
)
from checkout.basket.items import AddToBasket, RemoveFromBasket, UpdateBasketQuantity
from checkout.basket.management import ApplyCouponToBasket, CreateBasket
from checkout.order.order import Order
from checkout.placement.placement import OrderDetails, OrderPlacement
from checkout.receipt import find_receipt
from checkout.reviews.editing import EditReviewMessage
from checkout.reviews.listing import reviews_for_product
from checkout.reviews.submission import LikeReview, PostReview
from checkout.shared.identity import HeaderIdentityProvider, Shopper
from checkout.wallet.ledger import WalletLedger

identity_provider = HeaderIdentityProvider()
placement = OrderPlacement()


def current_shopper(request: Request) -> Shopper | None:
    return identity_provider.current_user(request)


def require_shopper(shopper: Shopper | None = Depends(current_shopper)) -> Shopper:
    if shopper is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return shopper


# ---------------------------------------------------------------------------
# Basket Router
# ---------------------------------------------------------------------------
basket_router = APIRouter(prefix="/baskets", tags=["baskets"])


@basket_router.post("", status_code=201, response_model=BasketIdResponse)
async def create_basket(body: CreateBasketRequest) -> BasketIdResponse:
    result = current_domain.process(CreateBasket(customer_id=body.customer_id), asynchronous=False)
    return BasketIdResponse(basket_id=result)


@basket_router.post("/{basket_id}/items", response_model=StatusResponse)
async def add_basket_item(basket_id: str, body: AddToBasketRequest) -> StatusResponse:
    with domain_errors():
        current_domain.process(
            AddToBasket(basket_id=basket_id, product_id=body.product_id, quantity=body.quantity),
            asynchronous=False,
        )
    return StatusResponse()


@basket_router.put("/{basket_id}/items/{item_id}", response_model=StatusResponse)
async def update_basket_item_quantity(
    basket_id: str, item_id: str, body: UpdateBasketQuantityRequest
) -> StatusResponse:
    with domain_errors():
        current_domain.process(
            UpdateBasketQuantity(basket_id=basket_id, item_id=item_id, new_quantity=body.new_quantity),
            asynchronous=False,
        )
    return StatusResponse()


@basket_router.delete("/{basket_id}/items/{item_id}", response_model=StatusResponse)
async def remove_basket_item(basket_id: str, item_id: str) -> StatusResponse:
    with domain_errors():
        current_domain.process(RemoveFromBasket(basket_id=basket_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


@basket_router.put("/{basket_id}/coupon", response_model=StatusResponse)
async def apply_basket_coupon(basket_id: str, body: ApplyCouponRequest) -> StatusResponse:
    with domain_errors():
        current_domain.process(
            ApplyCouponToBasket(basket_id=basket_id, coupon_code=body.coupon_code),
            asynchronous=False,
        )
    return StatusResponse()


@basket_router.post("/{basket_id}/checkout", status_code=201, response_model=PlacedOrderResponse)
async def checkout_basket(
    basket_id: str,
    body: CheckoutRequest,
    shopper: Shopper | None = Depends(current_shopper),
) -> PlacedOrderResponse:
    """Place an order for the basket.

    Anonymous checkouts are accepted: they are never charged to a wallet
    and earn no reward points.
    """
    with domain_errors():
        order = placement.place(basket_id, shopper, OrderDetails(**body.model_dump()))
    return PlacedOrderResponse(order_id=order.order_id, total_price=order.total_price, bonus=order.bonus)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    with domain_errors():
        order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(
        order_id=order.order_id,
        customer_id=str(order.customer_id) if order.customer_id else None,
        email=order.email,
        total_price=order.total_price,
        promotional_amount=order.promotional_amount,
        delivery_price=order.delivery_price,
        bonus=order.bonus,
        eta=order.eta,
        delivered=order.delivered,
        products=[
            OrderedProductSchema(
                product_id=str(product.product_id),
                name=product.name,
                quantity=product.quantity,
                price=product.price,
                total=product.total,
                bonus=product.bonus,
            )
            for product in order.ordered_products()
        ],
    )


@order_router.get("/{order_id}/receipt")
async def get_order_receipt(order_id: str) -> Response:
    receipt = find_receipt(order_id)
    if receipt is None:
        raise HTTPException(status_code=404, detail=f"No receipt for order {order_id}")
    return Response(
        content=receipt.content,
        media_type=receipt.media_type,
        headers={"Content-Disposition": f'attachment; filename="{receipt.filename}"'},
    )


# ---------------------------------------------------------------------------
# Wallet Router
# ---------------------------------------------------------------------------
wallet_router = APIRouter(prefix="/wallets", tags=["wallets"])


@wallet_router.get("/me", response_model=WalletResponse)
async def get_my_wallet(shopper: Shopper = Depends(require_shopper)) -> WalletResponse:
    balance = WalletLedger().balance_of(shopper.customer_id)
    if balance is None:
        raise HTTPException(status_code=404, detail=f"No wallet for customer {shopper.customer_id}")
    return WalletResponse(customer_id=shopper.customer_id, balance=balance)


# ---------------------------------------------------------------------------
# Review Router
# ---------------------------------------------------------------------------
review_router = APIRouter(tags=["reviews"])


@review_router.get("/products/{product_id}/reviews", response_model=list[ReviewSchema])
async def list_product_reviews(
    product_id: str,
    shopper: Shopper | None = Depends(current_shopper),
) -> list[ReviewSchema]:
    viewer_email = shopper.email if shopper else None
    return [ReviewSchema(**review) for review in reviews_for_product(product_id, viewer_email)]


@review_router.post("/products/{product_id}/reviews", status_code=201, response_model=ReviewIdResponse)
async def post_review(
    product_id: str,
    body: PostReviewRequest,
    shopper: Shopper = Depends(require_shopper),
) -> ReviewIdResponse:
    with domain_errors():
        review_id = current_domain.process(
            PostReview(product_id=product_id, author=shopper.email, message=body.message),
            asynchronous=False,
        )
    return ReviewIdResponse(review_id=review_id)


@review_router.post("/reviews/{review_id}/likes", response_model=StatusResponse)
async def like_review(review_id: str, shopper: Shopper = Depends(require_shopper)) -> StatusResponse:
    with domain_errors():
        current_domain.process(LikeReview(review_id=review_id, email=shopper.email), asynchronous=False)
    return StatusResponse()


@review_router.patch("/reviews/{review_id}", response_model=EditReviewResponse)
async def edit_review(review_id: str, body: EditReviewRequest) -> EditReviewResponse:
    with domain_errors():
        result = current_domain.process(
            EditReviewMessage(review_id=review_id, message=body.message),
            asynchronous=False,
        )
    return EditReviewResponse(**result)
