"""
Search repository.

Read-only, case-insensitive lookups across products and users for the
search bar.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from funshop.core.models.domain.enums import ProductStatus

from ..entities.products import Product
from ..entities.users import AccountInfo, User
from .base import QueryBuilder


class SearchRepository:
    """Repository for search queries."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def search_products(self, query: str, limit: Optional[int] = 50) -> List[Tuple[Product, str]]:
        """Available products whose name contains ``query``, with the seller's username."""
        stmt = (
            select(Product, User.username)
            .join(User, User.id == Product.user_id)
            .where(
                QueryBuilder.contains_ignore_case(Product.name, query)
                & (Product.status == ProductStatus.available.value)
            )
            .order_by(Product.created_at.desc(), Product.id.desc())  # type: ignore[union-attr]
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def search_users(self, query: str, limit: Optional[int] = 50) -> List[Tuple[User, Optional[str]]]:
        """Users whose username contains ``query``, with their profile image."""
        stmt = (
            select(User, AccountInfo.profile_image)
            .outerjoin(AccountInfo, AccountInfo.user_id == User.id)
            .where(QueryBuilder.contains_ignore_case(User.username, query))
            .order_by(User.username)
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, None)
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]
