"""Product review entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class Review(Base, table=True):
    """Review left by a user on a product; sellers collect the reviews of their products.

    Table: reviews
    """

    __tablename__ = "reviews"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    content: str
    rating: int = Field(ge=1, le=5)
    product_id: int = Field(sa_column=foreign_key_column("products.id"))
    user_id: int = Field(sa_column=foreign_key_column("users.id"))
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
