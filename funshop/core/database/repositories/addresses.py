"""Address repository interface and implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.addresses import Address
from .base import AsyncBaseRepository

ADDRESS_FIELDS = ("street", "city", "postal_code")


class AddressRepository(AsyncBaseRepository[Address]):
    """Repository for saved shipping addresses."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Address)

    async def list_for_user(self, user_id: int) -> List[Address]:
        result = await self.session.execute(select(Address).where(Address.user_id == user_id).order_by(Address.id))
        return list(result.scalars().all())

    async def get_for_user(self, address_id: int, user_id: int) -> Optional[Address]:
        stmt = select(Address).where((Address.id == address_id) & (Address.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(
        self, address_id: int, user_id: int, data: Dict[str, Any], commit: bool = True
    ) -> Optional[Address]:
        address = await self.get_for_user(address_id, user_id)
        if address is None:
            return None
        for key, value in data.items():
            if key in ADDRESS_FIELDS:
                setattr(address, key, value)
        self.session.add(address)
        await self._finish(commit)
        return address

    async def delete(self, address_id: int, user_id: int, commit: bool = True) -> bool:
        stmt = delete(Address).where((Address.id == address_id) & (Address.user_id == user_id))
        result = await self.session.execute(stmt)
        await self._finish(commit)
        return result.rowcount > 0
