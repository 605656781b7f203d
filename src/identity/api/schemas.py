"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class RegisterAccountRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "ada",
                    "password": "correct-horse-battery-staple",
                    "email": "ada@example.com",
                    "role": "customer",
                }
            ]
        }
    }

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=254)
    role: Literal["customer", "admin"]


class AccountIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"account_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    account_id: str
    status: str = "Registered account successfully"
