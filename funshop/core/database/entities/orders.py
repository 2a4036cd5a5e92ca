"""
Order history entity model.

Checkout writes one order row per purchased product. Guest orders have no
user; rows outlive deleted users and products so revenue stays accurate.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from funshop.core.models.domain.enums import OrderStatus

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class Order(Base, table=True):
    """Persistent order line.

    Table: orders
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    ordered_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    total: float = Field(description="Amount paid for the product")
    status: str = Field(default=OrderStatus.confirmed.value, max_length=16)
    user_id: Optional[int] = Field(
        default=None, sa_column=foreign_key_column("users.id", ondelete="SET NULL", nullable=True)
    )
    product_id: Optional[int] = Field(
        default=None, sa_column=foreign_key_column("products.id", ondelete="SET NULL", nullable=True)
    )
