"""
Order repository interface and implementation.

This module provides data access operations for the order history and the
sales figures shown on the admin and seller dashboards.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.orders import Order
from ..entities.products import Product
from .base import AsyncBaseRepository


class OrderRepository(AsyncBaseRepository[Order]):
    """Repository for order data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    async def list_for_user(self, user_id: int) -> List[Tuple[Order, Optional[str], Optional[str]]]:
        """List the orders of a user, newest first.

        Args:
            user_id: Buyer ID

        Returns:
            List of (order, product name, product image path); the product
            columns are None when the product has been deleted
        """
        stmt = (
            select(Order, Product.name, Product.image_path)
            .outerjoin(Product, Product.id == Order.product_id)
            .where(Order.user_id == user_id)
            .order_by(Order.ordered_at.desc(), Order.id.desc())  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def list_by_ids(
        self, order_ids: List[int]
    ) -> List[Tuple[Order, Optional[str], Optional[str], Optional[int]]]:
        """Load orders in placement order with their product name, image path and seller ID.

        The product columns are None when the product has been deleted.
        """
        if not order_ids:
            return []
        stmt = (
            select(Order, Product.name, Product.image_path, Product.user_id)
            .outerjoin(Product, Product.id == Order.product_id)
            .where(Order.id.in_(order_ids))  # type: ignore[union-attr]
            .order_by(Order.id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2], row[3]) for row in result.all()]

    async def total_sales(self) -> float:
        result = await self.session.execute(select(func.coalesce(func.sum(Order.total), 0)))
        return float(result.scalar_one())

    async def sales_stats_for_seller(self, seller_id: int) -> Tuple[float, int]:
        """Revenue and number of sold items for the products of one seller.

        Args:
            seller_id: User ID of the seller

        Returns:
            (total revenue, products sold)
        """
        stmt = (
            select(func.coalesce(func.sum(Order.total), 0), func.count(Order.id))
            .join(Product, Product.id == Order.product_id)
            .where(Product.user_id == seller_id)
        )
        result = await self.session.execute(stmt)
        revenue, sold = result.one()
        return float(revenue), int(sold)
