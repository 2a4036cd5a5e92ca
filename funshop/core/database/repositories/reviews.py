"""
Review repository interface and implementation.

Reviews belong to a product; the reviews a seller receives are the reviews
of the seller's products.
"""

from __future__ import annotations

from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.products import Product
from ..entities.reviews import Review
from ..entities.users import User
from .base import AsyncBaseRepository


class ReviewRepository(AsyncBaseRepository[Review]):
    """Repository for review data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Review)

    async def list_for_product(self, product_id: int) -> List[Tuple[Review, str]]:
        """List the reviews of a product, newest first, with the author's username."""
        stmt = (
            select(Review, User.username)
            .join(User, User.id == Review.user_id)
            .where(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def list_for_seller(self, user_id: int) -> List[Tuple[Review, str, str]]:
        """List the reviews received by a seller.

        Args:
            user_id: User ID of the seller

        Returns:
            List of (review, author username, product name), newest first
        """
        stmt = (
            select(Review, User.username, Product.name)
            .join(Product, Product.id == Review.product_id)
            .join(User, User.id == Review.user_id)
            .where(Product.user_id == user_id)
            .order_by(Review.created_at.desc(), Review.id.desc())  # type: ignore[union-attr]
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]
