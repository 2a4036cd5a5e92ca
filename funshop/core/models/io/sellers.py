"""Seller onboarding and dashboard I/O models."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

IBAN_PATTERN = re.compile(r"^[A-Z]{2}\d{2}[A-Z0-9]{10,30}$")


class SellerCreate(BaseModel):
    shop_name: str = Field(min_length=1, max_length=255)
    vat_number: str = Field(min_length=5, max_length=32)
    contact_email: EmailStr
    iban: str
    description: str = Field(min_length=1, max_length=5000)

    @field_validator("vat_number")
    @classmethod
    def normalize_vat(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("iban")
    @classmethod
    def check_iban(cls, value: str) -> str:
        value = re.sub(r"\s", "", value).upper()
        if not IBAN_PATTERN.match(value):
            raise ValueError("iban is not a valid IBAN")
        return value


class SellerRead(BaseModel):
    id: int
    user_id: int
    shop_name: str
    vat_number: str
    contact_email: str
    description: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SellerStats(BaseModel):
    total_revenue: float
    products_sold: int
    products_listed: int
    reviews_received: int
    average_rating: float | None = None
