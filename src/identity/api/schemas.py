"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Maria Silva",
                    "phone": "21999990000",
                    "address": "Rua das Flores, 123 - Centro",
                    "password": "segredo",
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    phone: str = Field(..., max_length=20)
    address: str | None = Field(None, max_length=500)
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    phone: str = Field(..., max_length=20)
    password: str


# --- Response Schemas ---


class CustomerIdResponse(BaseModel):
    customer_id: str


class CustomerResponse(BaseModel):
    id: str
    name: str
    phone: str
    address: str | None = None
