"""Seller profile entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class SellerBase(Base):
    shop_name: str = Field(max_length=255)
    vat_number: str = Field(max_length=32, unique=True)
    contact_email: str = Field(max_length=255)
    iban: str = Field(max_length=34)
    description: str


class Seller(SellerBase, table=True):
    """Business details supplied during seller onboarding.

    Table: sellers
    """

    __tablename__ = "sellers"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id", unique=True))
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
