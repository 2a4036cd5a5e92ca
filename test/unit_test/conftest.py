"""Shared fixtures for unit tests: an in-memory database and a data factory.

Every test gets a fresh in-memory SQLite database with foreign keys
enforced, so cascades behave as in production.
"""

from __future__ import annotations

from datetime import date
from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from funshop.core.database.entities import (
    AccountInfo,
    Address,
    ObservedProduct,
    PaymentMethod,
    Product,
    Review,
    User,
)
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.database.utils import create_all, create_engine, create_sessionmaker
from funshop.core.models.domain.enums import AccountType
from funshop.server.services.auth import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "password123"


@pytest_asyncio.fixture
async def engine():
    """Create a fresh in-memory database engine for each test."""
    engine = create_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def user_password() -> str:
    return TEST_PASSWORD


@pytest.fixture(scope="session")
def password_hash() -> str:
    """bcrypt hash of TEST_PASSWORD, computed once."""
    return hash_password(TEST_PASSWORD)


class ShopFactory:
    """Inserts ready-to-use rows into the test database."""

    def __init__(self, session: AsyncSession, password_hash: str) -> None:
        self.session = session
        self.password_hash = password_hash

    async def _save(self, entity):
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def user(
        self,
        username: str = "mario",
        email: Optional[str] = None,
        account_type: str = AccountType.customer.value,
        **kwargs,
    ) -> User:
        user = await self._save(
            User(
                username=username,
                first_name=kwargs.pop("first_name", username.capitalize()),
                last_name=kwargs.pop("last_name", "Rossi"),
                birth_date=kwargs.pop("birth_date", date(1990, 5, 17)),
                email=email or f"{username}@mail.com",
                password_hash=self.password_hash,
                account_type=account_type,
                **kwargs,
            )
        )
        await self._save(AccountInfo(user_id=user.id, description=""))
        return user

    async def seller(self, username: str = "seller", **kwargs) -> User:
        return await self.user(username=username, account_type=AccountType.seller.value, **kwargs)

    async def admin(self, username: str = "boss", **kwargs) -> User:
        return await self.user(username=username, account_type=AccountType.admin.value, **kwargs)

    async def product(
        self,
        owner: User,
        name: str = "Vintage camera",
        price: Optional[float] = 50.0,
        **kwargs,
    ) -> Product:
        return await self._save(
            Product(
                name=name,
                description=kwargs.pop("description", f"A second-hand {name.lower()}"),
                condition=kwargs.pop("condition", "used"),
                category=kwargs.pop("category", "Collectibles"),
                price=price,
                user_id=owner.id,
                **kwargs,
            )
        )

    async def observe(self, user: User, product: Product, read: bool = True) -> ObservedProduct:
        return await self._save(
            ObservedProduct(
                user_id=user.id,
                product_id=product.id,
                observed_price=product.effective_price,
                notification_read=read,
            )
        )

    async def address(self, user: User, street: str = "Via Roma 1", city: str = "Torino") -> Address:
        return await self._save(Address(user_id=user.id, street=street, city=city, postal_code="10100"))

    async def payment_method(self, user: User, last4: str = "4242") -> PaymentMethod:
        return await self._save(
            PaymentMethod(
                user_id=user.id,
                holder_name=f"{user.first_name} {user.last_name}",
                card_last4=last4,
                expiry_date="12/30",
            )
        )

    async def review(self, author: User, product: Product, rating: int = 5, content: str = "Great!") -> Review:
        return await self._save(Review(content=content, rating=rating, product_id=product.id, user_id=author.id))


@pytest.fixture
def factory(session: AsyncSession, password_hash: str) -> ShopFactory:
    return ShopFactory(session, password_hash)


@pytest.fixture
def repos(session: AsyncSession) -> RepositoryBundle:
    return RepositoryBundle.from_session(session)
