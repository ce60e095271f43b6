"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel

from ordering.order.order import OrderStatus


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class OrderLineRequest(BaseModel):
    food_id: str
    quantity: int


class OrderLineSchema(BaseModel):
    id: str
    food_id: str
    food_name: str
    quantity: int
    unit_price: float


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"items": [{"food_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 2}]}]
        }
    }

    items: list[OrderLineRequest]


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": OrderStatus.OUT_FOR_DELIVERY.value}]}}

    # Free-form on purpose: unknown labels surface as InvalidStatus, not a 422
    status: str


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class OrderResponse(BaseModel):
    id: str
    customer_id: str
    status: str
    items: list[OrderLineSchema]
    total_price: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
