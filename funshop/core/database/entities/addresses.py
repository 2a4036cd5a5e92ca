"""Shipping address entity model."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base, foreign_key_column


class AddressBase(Base):
    street: str = Field(max_length=255)
    city: str = Field(max_length=128)
    postal_code: str = Field(max_length=16)


class Address(AddressBase, table=True):
    """Saved shipping address of a user.

    Table: addresses
    """

    __tablename__ = "addresses"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id"))
