"""Review I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewCreate(BaseModel):
    product_id: int
    content: str = Field(min_length=1, max_length=5000)
    rating: int = Field(ge=1, le=5)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("content must not be blank")
        return value


class ReviewRead(BaseModel):
    id: int
    content: str
    rating: int
    product_id: int
    user_id: int
    created_at: datetime
    author_username: Optional[str] = None
    product_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SellerReviews(BaseModel):
    """Reviews received by a seller on their products."""

    seller_id: int
    seller_username: str
    average_rating: Optional[float] = None
    reviews: List[ReviewRead]
