"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Menu Schemas ---


class AddMenuItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 7,
                    "title": "Cortado",
                    "desc": "Espresso cut with an equal amount of warm milk.",
                    "price": 39.0,
                }
            ]
        }
    }

    id: int = Field(..., ge=0)
    title: str = Field(..., min_length=1, max_length=255)
    desc: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)


class UpdateMenuItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"title": "Cortado", "desc": "Double shot, cut with warm milk.", "price": 42.0}]
        }
    }

    title: str = Field(..., min_length=1, max_length=255)
    desc: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)


class MenuItemResponse(BaseModel):
    id: int
    title: str
    desc: str | None = None
    price: float
    modifiedAt: str | None = None


# --- Offer Schemas ---


class CreateOfferRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"products": [1, 5], "price": 59.0}]}}

    products: list[int] = Field(..., min_length=1)
    price: float = Field(..., gt=0)


class OfferProductSchema(BaseModel):
    id: int
    title: str | None = None
    price: float | None = None


class OfferResponse(BaseModel):
    id: str
    products: list[OfferProductSchema]
    price: float


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
