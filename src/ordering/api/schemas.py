"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(BaseModel):
    session_id: str | None = None


class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)
    observation: str | None = Field(None, max_length=500)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "7d8e2a4c-1f3b-4e6a-9c5d-2b1a0f9e8d7c",
                    "quantity": 2,
                    "observation": "sem cebola",
                }
            ]
        }
    }


class SetQuantityRequest(BaseModel):
    """Zero or a negative quantity removes the line."""

    quantity: int


class CheckoutRequest(BaseModel):
    customer_id: str
    payment_method: Literal["pix", "card"]
    card_number: str | None = Field(None, max_length=30)
    card_holder: str | None = Field(None, max_length=255)
    card_expiry: str | None = Field(None, max_length=7)
    card_cvv: str | None = Field(None, max_length=4)
    fulfillment_type: Literal["delivery", "pickup"] = "delivery"
    delivery_address: str | None = None
    total: float | None = None


# ---------------------------------------------------------------------------
# Order / Delivery Request Schemas
# ---------------------------------------------------------------------------
class UpdateStatusRequest(BaseModel):
    status: str


class AssignCourierRequest(BaseModel):
    order_id: str
    courier_name: str
    courier_phone: str
    estimated_time: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartIdResponse(BaseModel):
    cart_id: str


class LineIdResponse(BaseModel):
    line_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class AssignmentIdResponse(BaseModel):
    assignment_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class LineResponse(BaseModel):
    id: str
    product_id: str
    name: str
    price: float
    original_price: float | None = None
    quantity: int
    observation: str | None = None
    line_total: float


class CartResponse(BaseModel):
    id: str
    lines: list[LineResponse]
    total_items: int
    total_price: float


class CustomerInfoResponse(BaseModel):
    name: str
    phone: str
    address: str | None = None


class OrderResponse(BaseModel):
    id: str
    reference: str
    status: str
    customer: CustomerInfoResponse
    lines: list[LineResponse]
    payment_method: str
    fulfillment_type: str
    delivery_address: str | None = None
    subtotal: float
    delivery_fee: float
    total: float
    created_at: datetime
    updated_at: datetime


class AssignmentResponse(BaseModel):
    id: str
    order_id: str
    courier_name: str
    courier_phone: str
    estimated_time: str | None = None
    status: str
    assigned_at: datetime
