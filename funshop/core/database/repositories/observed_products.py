"""
Observed product repository interface and implementation.

This module provides data access operations for watch lists and the
price-change notification flags attached to them.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.observed_products import ObservedProduct
from ..entities.products import Product
from ..entities.users import User
from .base import AsyncBaseRepository


class ObservedProductRepository(AsyncBaseRepository[ObservedProduct]):
    """Repository for watch-list data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ObservedProduct)

    async def is_observed(self, user_id: int, product_id: int) -> bool:
        stmt = select(ObservedProduct.id).where(
            (ObservedProduct.user_id == user_id) & (ObservedProduct.product_id == product_id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, user_id: int, product_id: int, price: Optional[float], commit: bool = True) -> int:
        """Start watching a product unless already watched.

        Args:
            user_id: Watcher
            product_id: Watched product
            price: Effective price at the time of watching
            commit: Commit right away instead of only flushing

        Returns:
            Number of rows inserted (0 or 1)
        """
        if await self.is_observed(user_id, product_id):
            return 0
        self.session.add(
            ObservedProduct(user_id=user_id, product_id=product_id, observed_price=price, notification_read=True)
        )
        await self._finish(commit)
        return 1

    async def remove(self, user_id: int, product_id: int, commit: bool = True) -> int:
        stmt = delete(ObservedProduct).where(
            (ObservedProduct.user_id == user_id) & (ObservedProduct.product_id == product_id)
        )
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount

    async def list_for_user(self, user_id: int) -> List[Tuple[ObservedProduct, Product, str]]:
        """List a watch list with the product and its seller's username.

        Returns:
            List of (observed row, product, seller username), most recently watched first
        """
        stmt = (
            select(ObservedProduct, Product, User.username)
            .join(Product, Product.id == ObservedProduct.product_id)
            .join(User, User.id == Product.user_id)
            .where(ObservedProduct.user_id == user_id)
            .order_by(ObservedProduct.created_at.desc(), ObservedProduct.id.desc())  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def flag_change(self, product_id: int, commit: bool = True) -> int:
        """Mark the notification of every watcher of a product as unread.

        Returns:
            Number of watchers flagged
        """
        stmt = (
            update(ObservedProduct)
            .where(ObservedProduct.product_id == product_id)
            .values(notification_read=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount

    async def mark_read(self, user_id: int, commit: bool = True) -> int:
        """Acknowledge the unread notifications of a user.

        Each unread row is marked read and its observed price is reset to the
        product's current effective price.

        Returns:
            Number of rows acknowledged
        """
        stmt = (
            select(ObservedProduct, Product)
            .join(Product, Product.id == ObservedProduct.product_id)
            .where((ObservedProduct.user_id == user_id) & (ObservedProduct.notification_read == False))  # noqa: E712
        )
        result = await self.session.execute(stmt)
        rows = result.all()
        for observed, product in rows:
            observed.notification_read = True
            observed.observed_price = product.effective_price
            self.session.add(observed)
        await self._finish(commit)
        return len(rows)
