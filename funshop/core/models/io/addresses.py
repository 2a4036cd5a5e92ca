"""Address I/O models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AddressCreate(BaseModel):
    street: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=128)
    postal_code: str = Field(min_length=1, max_length=16)


class AddressRead(BaseModel):
    id: int
    street: str
    city: str
    postal_code: str

    model_config = ConfigDict(from_attributes=True)
