"""Seller repository interface and implementation."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.sellers import Seller
from .base import AsyncBaseRepository


class SellerRepository(AsyncBaseRepository[Seller]):
    """Repository for seller onboarding details."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Seller)

    async def get_by_user_id(self, user_id: int) -> Optional[Seller]:
        result = await self.session.execute(select(Seller).where(Seller.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_by_vat_number(self, vat_number: str) -> Optional[Seller]:
        result = await self.session.execute(select(Seller).where(Seller.vat_number == vat_number))
        return result.scalar_one_or_none()
