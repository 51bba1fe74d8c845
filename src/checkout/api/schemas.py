"""Pydantic request/response schemas for the Checkout API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Basket Request Schemas
# ---------------------------------------------------------------------------
class CreateBasketRequest(BaseModel):
    customer_id: str | None = None


class AddToBasketRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "quantity": 2,
                }
            ]
        }
    }


class UpdateBasketQuantityRequest(BaseModel):
    new_quantity: int = Field(ge=1)


class ApplyCouponRequest(BaseModel):
    coupon_code: str = Field(min_length=1, max_length=100)


class CheckoutRequest(BaseModel):
    payment_method: str | None = None
    delivery_method_id: str | None = None
    address_id: str | None = None
    coupon_token: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "payment_method": "wallet",
                    "delivery_method_id": None,
                    "address_id": "addr-001",
                    "coupon_token": None,
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Review Request Schemas
# ---------------------------------------------------------------------------
class PostReviewRequest(BaseModel):
    message: str = Field(min_length=1)


class EditReviewRequest(BaseModel):
    message: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class BasketIdResponse(BaseModel):
    basket_id: str


class PlacedOrderResponse(BaseModel):
    order_id: str
    total_price: float
    bonus: int


class OrderedProductSchema(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: float
    total: float
    bonus: int


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str | None = None
    email: str | None = None
    total_price: float
    promotional_amount: float
    delivery_price: float
    bonus: int
    eta: int
    delivered: bool
    products: list[OrderedProductSchema]


class WalletResponse(BaseModel):
    customer_id: str
    balance: float


class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewSchema(BaseModel):
    id: str
    product_id: str
    author: str
    message: str
    likes_count: int
    liked: bool


class EditReviewResponse(BaseModel):
    modified: int
    original_author: str


class StatusResponse(BaseModel):
    status: str = "ok"
