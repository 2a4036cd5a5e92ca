"""Order history I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OrderRead(BaseModel):
    id: int
    ordered_at: datetime
    total: float
    status: str
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    product_image: Optional[str] = None
