"""
Persistent cart entity model.

Authenticated users keep their cart in this table; guests keep theirs in the
session cookie until they log in.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, foreign_key_column


class CartItem(Base, table=True):
    """One product in a user's cart.

    Table: cart_items
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id"))
    product_id: int = Field(sa_column=foreign_key_column("products.id"))
    quantity: int = Field(default=1, ge=1)
