"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from the
ledger's internal dataclasses.
"""

from pydantic import BaseModel


class CartItemSchema(BaseModel):
    id: int
    quantity: int


class PlaceOrderRequest(BaseModel):
    username: str
    items: list[CartItemSchema]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "ada",
                    "items": [{"id": 1, "quantity": 2}, {"id": 4, "quantity": 1}],
                }
            ]
        }
    }


class PlacedOrderResponse(BaseModel):
    id: str
    eta: str


class OrderLineSchema(BaseModel):
    id: int
    title: str
    desc: str | None = None
    price: float
    quantity: int
    total: float


class OrderResponse(BaseModel):
    id: str
    username: str
    items: list[OrderLineSchema]
    total: float
    eta: str
    created_at: str
