"""
User account entity models.

This module contains the database entities for registered accounts and the
optional public profile attached to each of them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field

from funshop.core.models.domain.enums import AccountType

from ..base import Base, UTCDateTime, foreign_key_column, utc_now


class UserBase(Base):
    """Base fields for a registered account."""

    username: str = Field(max_length=64, unique=True, index=True, description="Public handle, at least 3 characters")
    first_name: str = Field(max_length=128, description="Given name")
    last_name: str = Field(max_length=128, description="Family name")
    birth_date: Optional[date] = Field(default=None, description="Date of birth")
    email: str = Field(max_length=255, unique=True, index=True, description="Login email")
    account_type: str = Field(
        default=AccountType.customer.value,
        max_length=16,
        description="customer, seller or admin",
    )


class User(UserBase, table=True):
    """Persistent account.

    The bcrypt hash and the password reset token never leave the server; API
    schemas expose only the fields in ``UserBase``.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str = Field(description="bcrypt hash of the password")
    password_reset_token: Optional[str] = Field(default=None, max_length=128, index=True)
    password_reset_expires: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    @property
    def is_admin(self) -> bool:
        return self.account_type == AccountType.admin.value

    @property
    def is_seller(self) -> bool:
        return self.account_type == AccountType.seller.value

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username}, type={self.account_type})"


class AccountInfo(Base, table=True):
    """Public profile details of an account (one row per user).

    Table: account_infos
    """

    __tablename__ = "account_infos"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(sa_column=foreign_key_column("users.id", unique=True))
    description: Optional[str] = Field(default="", description="Free-text presentation")
    profile_image: Optional[str] = Field(default=None, max_length=512, description="Profile image path or URL")
