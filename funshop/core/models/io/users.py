"""
User and authentication I/O models for API requests and responses.

This module contains Pydantic-based I/O schemas for registration, login,
password reset and the profile pages. Password hashes and reset tokens are
never part of a response model.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

from .products import ProductRead


class RegisterRequest(BaseModel):
    """Schema for creating an account."""

    username: str = Field(min_length=3, max_length=64, description="Public handle")
    first_name: str = Field(min_length=1, max_length=128)
    last_name: str = Field(min_length=1, max_length=128)
    birth_date: Optional[date] = None
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class PasswordForgotRequest(BaseModel):
    email: EmailStr


class PasswordResetRequest(BaseModel):
    token: str = Field(min_length=1)
    password: str = Field(min_length=8, max_length=128)


class UserRead(BaseModel):
    """Schema for reading an account from the API."""

    id: int
    username: str
    first_name: str
    last_name: str
    birth_date: Optional[date] = None
    email: str
    account_type: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PublicUserRead(BaseModel):
    """Account fields visible to other users."""

    id: int
    username: str
    first_name: str
    last_name: str
    account_type: str

    model_config = ConfigDict(from_attributes=True)


class AccountInfoRead(BaseModel):
    description: Optional[str] = ""
    profile_image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AuthStatus(BaseModel):
    is_authenticated: bool
    user: Optional[UserRead] = None


class ProfileRead(BaseModel):
    """The signed-in user's own profile."""

    user: UserRead
    account_info: AccountInfoRead
    is_seller: bool


class ProfileUpdate(BaseModel):
    """Schema for updating the signed-in user's profile; omitted fields stay unchanged."""

    username: Optional[str] = Field(default=None, min_length=3, max_length=64)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    birth_date: Optional[date] = None
    description: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("username", "first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("username", "first_name", "last_name")
    @classmethod
    def names_not_null(cls, value: Optional[str], info: ValidationInfo) -> str:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class ProfileImageUpdate(BaseModel):
    profile_image: str = Field(min_length=1, max_length=512, description="Image path or URL")


class MemberProfile(BaseModel):
    """Public profile page of a member."""

    user: PublicUserRead
    account_info: AccountInfoRead
    products: List[ProductRead]
