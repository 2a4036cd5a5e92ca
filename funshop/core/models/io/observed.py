"""Watch-list I/O models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .products import ProductRead


class ObservedProductRead(BaseModel):
    """A watched product with its notification state.

    ``price_changed`` is True when the notification is unread and the
    product's effective price differs from the price observed last time.
    """

    product: ProductRead
    observed_price: Optional[float] = None
    current_price: Optional[float] = None
    notification_read: bool
    price_changed: bool
