"""
Cart repository interface and implementation.

This module provides data access operations for the persistent carts of
authenticated users. A product appears at most once in a cart.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.cart_items import CartItem
from ..entities.products import Product
from .base import AsyncBaseRepository


class CartRepository(AsyncBaseRepository[CartItem]):
    """Repository for cart data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CartItem)

    async def list_for_user(self, user_id: int) -> List[Tuple[CartItem, Product]]:
        """List the cart of a user with the product of each line.

        Args:
            user_id: Cart owner

        Returns:
            List of (cart item, product) pairs in insertion order
        """
        stmt = (
            select(CartItem, Product)
            .join(Product, Product.id == CartItem.product_id)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.id)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def contains(self, user_id: int, product_id: int) -> bool:
        stmt = select(CartItem.id).where((CartItem.user_id == user_id) & (CartItem.product_id == product_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, user_id: int, product_id: int, commit: bool = True) -> int:
        """Add a product to a cart unless it is already there.

        Returns:
            Number of rows inserted (0 or 1)
        """
        if await self.contains(user_id, product_id):
            return 0
        self.session.add(CartItem(user_id=user_id, product_id=product_id, quantity=1))
        await self._finish(commit)
        return 1

    async def remove(self, user_id: int, product_id: int, commit: bool = True) -> int:
        stmt = delete(CartItem).where((CartItem.user_id == user_id) & (CartItem.product_id == product_id))
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount

    async def clear(self, user_id: int, commit: bool = True) -> int:
        result = await self.session.execute(delete(CartItem).where(CartItem.user_id == user_id))
        await self._finish(commit)
        return result.rowcount

    async def merge(self, user_id: int, product_ids: Iterable[int], commit: bool = True) -> int:
        """Copy products into a user's cart, skipping the ones already present.

        Args:
            user_id: Cart owner
            product_ids: Products to copy, typically the guest session cart
            commit: Commit right away instead of only flushing

        Returns:
            Number of rows inserted
        """
        added = 0
        for product_id in dict.fromkeys(product_ids):
            added += await self.add(user_id, product_id, commit=False)
        await self._finish(commit)
        return added
