"""Payment method repository interface and implementation."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.payment_methods import PaymentMethod
from .base import AsyncBaseRepository


class PaymentMethodRepository(AsyncBaseRepository[PaymentMethod]):
    """Repository for saved, masked payment cards."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PaymentMethod)

    async def list_for_user(self, user_id: int) -> List[PaymentMethod]:
        stmt = select(PaymentMethod).where(PaymentMethod.user_id == user_id).order_by(PaymentMethod.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_user(self, method_id: int, user_id: int) -> Optional[PaymentMethod]:
        stmt = select(PaymentMethod).where((PaymentMethod.id == method_id) & (PaymentMethod.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, method_id: int, user_id: int, commit: bool = True) -> bool:
        stmt = delete(PaymentMethod).where((PaymentMethod.id == method_id) & (PaymentMethod.user_id == user_id))
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount > 0
