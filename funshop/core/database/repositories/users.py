"""
User repository interface and implementation.

This module provides data access operations for accounts, their password
reset tokens and their public profile details.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import AccountInfo, User
from .base import AsyncBaseRepository

# Columns a user may change through the profile form
PROFILE_FIELDS = ("username", "first_name", "last_name", "birth_date")


class UserRepository(AsyncBaseRepository[User]):
    """Repository for user account data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by login email.

        Args:
            email: Email address

        Returns:
            User instance or None
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def update_profile(self, user_id: int, data: Dict[str, Any], commit: bool = True) -> Optional[User]:
        """Update the editable profile columns of a user.

        Keys outside the profile columns are ignored.

        Args:
            user_id: User ID
            data: New values keyed by column name
            commit: Commit right away instead of only flushing

        Returns:
            Updated user or None if not found
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        for key, value in data.items():
            if key in PROFILE_FIELDS:
                setattr(user, key, value)
        self.session.add(user)
        await self._finish(commit)
        return user

    async def delete(self, user_id: int, commit: bool = True) -> bool:
        """Delete a user; owned rows go with it through the foreign key cascades.

        Args:
            user_id: User ID to delete

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(delete(User).where(User.id == user_id))
        await self._finish(commit)
        return result.rowcount > 0

    async def set_account_type(self, user_id: int, account_type: str, commit: bool = True) -> Optional[User]:
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        user.account_type = account_type
        self.session.add(user)
        await self._finish(commit)
        return user

    async def set_reset_token(self, user_id: int, token: str, expires: datetime, commit: bool = True) -> None:
        """Store a password reset token and its expiry.

        Args:
            user_id: User ID
            token: Random reset token
            expires: UTC datetime after which the token is rejected
            commit: Commit right away instead of only flushing
        """
        user = await self.get_by_id(user_id)
        if user is None:
            return
        user.password_reset_token = token
        user.password_reset_expires = expires
        self.session.add(user)
        await self._finish(commit)

    async def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        """Get the user owning an unexpired reset token.

        Args:
            token: Reset token from the email link
            now: Current UTC datetime

        Returns:
            User instance or None when the token is unknown or expired
        """
        stmt = select(User).where(
            (User.password_reset_token == token) & (User.password_reset_expires > now)  # type: ignore[operator]
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_password(self, user_id: int, password_hash: str, commit: bool = True) -> None:
        user = await self.get_by_id(user_id)
        if user is None:
            return
        user.password_hash = password_hash
        self.session.add(user)
        await self._finish(commit)

    async def clear_reset_token(self, user_id: int, commit: bool = True) -> None:
        user = await self.get_by_id(user_id)
        if user is None:
            return
        user.password_reset_token = None
        user.password_reset_expires = None
        self.session.add(user)
        await self._finish(commit)


class AccountInfoRepository(AsyncBaseRepository[AccountInfo]):
    """Repository for the public profile of a user."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AccountInfo)

    async def get_by_user_id(self, user_id: int) -> Optional[AccountInfo]:
        result = await self.session.execute(select(AccountInfo).where(AccountInfo.user_id == user_id))
        return result.scalar_one_or_none()

    async def _get_or_new(self, user_id: int) -> AccountInfo:
        info = await self.get_by_user_id(user_id)
        if info is None:
            info = AccountInfo(user_id=user_id, description="")
        return info

    async def upsert_description(self, user_id: int, description: str, commit: bool = True) -> AccountInfo:
        """Set the profile description, creating the profile row when missing."""
        info = await self._get_or_new(user_id)
        info.description = description
        self.session.add(info)
        await self._finish(commit)
        return info

    async def upsert_profile_image(self, user_id: int, profile_image: str, commit: bool = True) -> AccountInfo:
        """Set the profile image path, creating the profile row when missing."""
        info = await self._get_or_new(user_id)
        info.profile_image = profile_image
        self.session.add(info)
        await self._finish(commit)
        return info
