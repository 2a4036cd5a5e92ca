"""
Observed (watched) product entity model.

A row records the effective price of a product at the moment the user last
looked at it. ``notification_read`` drops to False when the product's price
changes or the product is sold, and goes back to True when the user opens the
watch list.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class ObservedProduct(Base, table=True):
    """Watch-list entry.

    Table: observed_products
    """

    __tablename__ = "observed_products"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_observed_products_user_product"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id"))
    product_id: int = Field(sa_column=foreign_key_column("products.id"))
    observed_price: Optional[float] = Field(default=None)
    notification_read: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
