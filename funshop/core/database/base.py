"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the centralized database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timestamp column that always binds and returns aware UTC datetimes.

    Naive values are taken as UTC. SQLite drops the offset on storage, so
    naive results get UTC attached again on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=timezone.utc)


def foreign_key_column(
    target: str,
    *,
    ondelete: str = "CASCADE",
    nullable: bool = False,
    unique: bool = False,
) -> Column:
    """Build an indexed integer foreign key column.

    A new ``Column`` is returned on every call since SQLAlchemy binds a column
    to exactly one table.

    Args:
        target: Referenced column, e.g. ``"users.id"``
        ondelete: Referential action when the parent row is deleted
        nullable: Whether the column accepts NULL
        unique: Whether the column carries a unique constraint

    Returns:
        Column suitable for ``Field(sa_column=...)``
    """
    return Column(
        Integer,
        ForeignKey(target, ondelete=ondelete),
        nullable=nullable,
        unique=unique,
        index=True,
    )
