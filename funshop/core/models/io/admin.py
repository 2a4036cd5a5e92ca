"""Admin dashboard I/O models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .products import ProductRead
from .users import UserRead


class ShopStats(BaseModel):
    user_count: int
    available_product_count: int
    total_sales: float


class AdminDashboard(BaseModel):
    users: List[UserRead]
    products: List[ProductRead]
    stats: ShopStats
