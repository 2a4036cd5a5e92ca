"""
Database bootstrap.

Creates the administrator account and the default product categories the
first time the server starts against an empty database.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from funshop.core.database.entities.products import Category
from funshop.core.database.entities.users import AccountInfo, User
from funshop.core.database.repositories.products import CategoryRepository
from funshop.core.database.repositories.users import AccountInfoRepository, UserRepository
from funshop.core.logging_config import get_logger
from funshop.core.models.domain.enums import AccountType
from funshop.server.core.config import settings

from .auth import hash_password

logger = get_logger(__name__)

DEFAULT_CATEGORIES = (
    "Books",
    "Clothing",
    "Collectibles",
    "Electronics",
    "Home",
    "Music",
    "Sports",
    "Toys",
    "Video Games",
    "Other",
)


async def ensure_admin(session: AsyncSession) -> User:
    """Create the administrator account unless one with the configured username exists."""
    users = UserRepository(session)
    admin_config = settings.admin
    existing = await users.get_by_username(admin_config.username)
    if existing is not None:
        logger.debug(f"Admin user '{admin_config.username}' already present")
        return existing

    admin = User(
        username=admin_config.username,
        first_name="admin",
        last_name="funshop",
        birth_date=date(2004, 11, 25),
        email=admin_config.email,
        password_hash=hash_password(admin_config.password),
        account_type=AccountType.admin.value,
    )
    await users.create(admin, commit=False)
    await AccountInfoRepository(session).create(AccountInfo(user_id=admin.id, description=""), commit=False)
    await session.commit()
    logger.info(f"Admin user '{admin.username}' created")
    return admin


async def ensure_categories(session: AsyncSession) -> int:
    """Seed the default categories into an empty category table.

    Returns:
        Number of categories inserted
    """
    categories = CategoryRepository(session)
    if await categories.count() > 0:
        return 0
    for name in DEFAULT_CATEGORIES:
        session.add(Category(name=name))
    await session.commit()
    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
