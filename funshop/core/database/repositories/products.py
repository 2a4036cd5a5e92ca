"""
Product repository interface and implementation.

This module provides data access operations for product listings and the
category list offered by the listing form.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from funshop.core.models.domain.enums import ProductStatus

from ..entities.products import Category, Product
from ..entities.users import User
from .base import AsyncBaseRepository, QueryBuilder

# Columns an owner or an administrator may edit
EDITABLE_FIELDS = (
    "name",
    "description",
    "condition",
    "category",
    "image_path",
    "price",
    "discounted_price",
    "auction_price",
)


class ProductRepository(AsyncBaseRepository[Product]):
    """Repository for product listing data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    def _with_seller(self):
        return select(Product, User.username).join(User, User.id == Product.user_id)

    async def list_all(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Tuple[Product, str]]:
        """List every product, newest first, with the seller's username.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of (product, seller username) pairs
        """
        stmt = self._with_seller().order_by(Product.created_at.desc(), Product.id.desc())  # type: ignore[union-attr]
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def get_with_seller(self, product_id: int) -> Optional[Tuple[Product, str]]:
        result = await self.session.execute(self._with_seller().where(Product.id == product_id))
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_by_user(self, user_id: int) -> List[Product]:
        stmt = (
            select(Product)
            .where(Product.user_id == user_id)
            .order_by(Product.created_at.desc(), Product.id.desc())  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_ids(self, product_ids: List[int]) -> List[Product]:
        """Get the products with the given IDs, keeping the order of ``product_ids``."""
        if not product_ids:
            return []
        stmt = select(Product).where(Product.id.in_(product_ids))  # type: ignore[union-attr]
        result = await self.session.execute(stmt)
        by_id = {product.id: product for product in result.scalars().all()}
        return [by_id[pid] for pid in product_ids if pid in by_id]

    async def update(
        self,
        product_id: int,
        data: Dict[str, Any],
        user_id: Optional[int] = None,
        commit: bool = True,
    ) -> Optional[Product]:
        """Apply an edit to a product.

        Args:
            product_id: Product ID
            data: New values keyed by column name; other keys are ignored
            user_id: Owner the product must belong to, or None for an administrator edit
            commit: Commit right away instead of only flushing

        Returns:
            Updated product, or None when missing or not owned by ``user_id``
        """
        product = await self.get_by_id(product_id)
        if product is None or (user_id is not None and product.user_id != user_id):
            return None
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(product, key, value)
        self.session.add(product)
        await self._finish(commit)
        return product

    async def delete(self, product_id: int, user_id: Optional[int] = None, commit: bool = True) -> bool:
        """Delete a product, scoped to its owner unless ``user_id`` is None.

        Returns:
            True if deleted, False if not found or not owned
        """
        stmt = delete(Product).where(Product.id == product_id)
        if user_id is not None:
            stmt = stmt.where(Product.user_id == user_id)
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount > 0

    async def mark_sold(self, product_id: int, commit: bool = True) -> bool:
        """Switch a product from available to sold.

        Returns:
            True if the product was available and is now sold, False otherwise
        """
        stmt = (
            update(Product)
            .where((Product.id == product_id) & (Product.status == ProductStatus.available.value))
            .values(status=ProductStatus.sold.value)
        )
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount == 1

    async def count_available(self) -> int:
        stmt = select(func.count()).select_from(Product).where(Product.status == ProductStatus.available.value)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class CategoryRepository(AsyncBaseRepository[Category]):
    """Repository for product categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def list_all(self) -> List[Category]:
        result = await self.session.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Category))
        return int(result.scalar_one())
