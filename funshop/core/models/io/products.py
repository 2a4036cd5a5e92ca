"""
Product I/O models for API requests and responses.

Prices are plain floats rounded to two decimals. ``effective_price`` is the
price a buyer pays and is None for auction-only listings.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from funshop.core.models.domain.enums import SellingType

from .reviews import ReviewRead


class CategoryRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    name: str
    description: Optional[str] = None
    condition: Optional[str] = None
    category: Optional[str] = None
    image_path: Optional[str] = None
    price: Optional[float] = None
    discounted_price: Optional[float] = None
    auction_price: Optional[float] = None
    effective_price: Optional[float] = None
    status: str
    created_at: datetime
    user_id: int
    seller_username: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ProductDetail(BaseModel):
    product: ProductRead
    reviews: List[ReviewRead]
    is_observed: bool = False


class ProductCreate(BaseModel):
    """Schema for listing a new product.

    ``sell_now`` listings need ``price``; ``auction`` listings need
    ``auction_price``. The price of the other mode is dropped.
    """

    selling_type: SellingType = Field(description="sell_now or auction")
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=5000)
    category: Optional[str] = Field(default=None, max_length=128)
    condition: Optional[str] = Field(default=None, max_length=64)
    image_path: Optional[str] = Field(default=None, max_length=512)
    price: Optional[float] = Field(default=None, gt=0)
    auction_price: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def check_price_for_selling_type(self) -> "ProductCreate":
        if self.selling_type == SellingType.sell_now:
            if self.price is None:
                raise ValueError("price is required for sell_now listings")
            self.auction_price = None
        else:
            if self.auction_price is None:
                raise ValueError("auction_price is required for auction listings")
            self.price = None
        return self


class ProductUpdate(BaseModel):
    """Schema for editing a product; omitted fields stay unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=5000)
    category: Optional[str] = Field(default=None, max_length=128)
    condition: Optional[str] = Field(default=None, max_length=64)
    image_path: Optional[str] = Field(default=None, max_length=512)
    price: Optional[float] = Field(default=None, gt=0)
    discounted_price: Optional[float] = Field(default=None, gt=0)
    auction_price: Optional[float] = Field(default=None, gt=0)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        # Omitted fields skip validation; only an explicit null reaches here.
        if value is None or not value.strip():
            raise ValueError("name cannot be null or blank")
        return value.strip()
