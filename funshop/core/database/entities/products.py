"""
Product catalogue entity models.

Each product row is a single second-hand item: it is either available or
sold, and it is sold at most once.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from funshop.core.models.domain.enums import ProductStatus

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class Category(Base, table=True):
    """Product category offered in the listing form.

    Table: categories
    """

    __tablename__ = "categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True)


class ProductBase(Base):
    """Base fields for a listed product."""

    name: str = Field(max_length=255, index=True, description="Product title")
    description: Optional[str] = Field(default=None, description="Product description")
    condition: Optional[str] = Field(default=None, max_length=64, description="Item condition, e.g. 'new' or 'used'")
    category: Optional[str] = Field(default=None, max_length=128, description="Category keyword")
    image_path: Optional[str] = Field(default=None, max_length=512, description="Image path or URL")
    price: Optional[float] = Field(default=None, description="Fixed selling price")
    discounted_price: Optional[float] = Field(default=None, description="Reduced price, takes precedence when set")
    auction_price: Optional[float] = Field(default=None, description="Auction starting price")


class Product(ProductBase, table=True):
    """Persistent product listing.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    status: str = Field(default=ProductStatus.available.value, max_length=16, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    user_id: int = Field(sa_column=foreign_key_column("users.id"))

    @property
    def effective_price(self) -> Optional[float]:
        """Price a buyer pays: the discounted price when set, else the list price."""
        if self.discounted_price is not None:
            return self.discounted_price
        return self.price

    @property
    def is_available(self) -> bool:
        return self.status == ProductStatus.available.value

    @property
    def is_purchasable(self) -> bool:
        return self.is_available and self.effective_price is not None

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name}, status={self.status})"
