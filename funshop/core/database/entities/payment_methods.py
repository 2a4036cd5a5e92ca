"""
Saved payment card entity model.

Only the holder, the last four digits and the expiry date are persisted. The
full card number and the CVV are validated at checkout and then discarded.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base, foreign_key_column


class PaymentMethod(Base, table=True):
    """Masked payment card of a user.

    Table: payment_methods
    """

    __tablename__ = "payment_methods"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id"))
    holder_name: str = Field(max_length=255)
    card_last4: str = Field(max_length=4)
    expiry_date: str = Field(max_length=7, description="MM/YY or MM/YYYY")
