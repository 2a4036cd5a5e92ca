"""
Cart I/O models.

A cart view lists every line of the cart; sold items stay visible so the
buyer sees what is no longer available, but the totals only count available
items.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class CartItemView(BaseModel):
    product_id: int
    name: str
    image_path: Optional[str] = None
    seller_id: int
    price: Optional[float] = None
    status: str
    is_available: bool


class CartView(BaseModel):
    items: List[CartItemView]
    total_qty: int
    total_price: float
