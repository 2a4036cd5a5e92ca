"""
Payment card I/O models.

Card numbers and CVVs are accepted on input only; responses carry the last
four digits.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

CARD_NUMBER_PATTERN = re.compile(r"^\d{12,19}$")
CVV_PATTERN = re.compile(r"^\d{3,4}$")
EXPIRY_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/(\d{2}|\d{4})$")


def normalize_card_number(value: str) -> str:
    """Drop spaces and dashes from a card number."""
    return re.sub(r"[\s-]", "", value)


class PaymentMethodCreate(BaseModel):
    holder_name: str = Field(min_length=1, max_length=255)
    card_number: str
    expiry_date: str = Field(description="MM/YY or MM/YYYY")
    cvv: str

    @field_validator("card_number")
    @classmethod
    def check_card_number(cls, value: str) -> str:
        value = normalize_card_number(value)
        if not CARD_NUMBER_PATTERN.match(value):
            raise ValueError("card_number must contain 12 to 19 digits")
        return value

    @field_validator("expiry_date")
    @classmethod
    def check_expiry(cls, value: str) -> str:
        value = value.strip()
        if not EXPIRY_PATTERN.match(value):
            raise ValueError("expiry_date must be MM/YY or MM/YYYY")
        return value

    @field_validator("cvv")
    @classmethod
    def check_cvv(cls, value: str) -> str:
        value = value.strip()
        if not CVV_PATTERN.match(value):
            raise ValueError("cvv must contain 3 or 4 digits")
        return value


class PaymentMethodRead(BaseModel):
    id: int
    holder_name: str
    card_last4: str
    expiry_date: str

    model_config = ConfigDict(from_attributes=True)
