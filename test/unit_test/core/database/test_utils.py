"""Tests for engine creation and the repository bundle factory."""

import pytest
from sqlalchemy import text

from funshop.core.database.repositories import ProductRepository, UserRepository
from funshop.core.database.utils import build_repositories, create_engine


class TestCreateEngine:
    @pytest.mark.parametrize(
        "url",
        [
            "postgres://shop:pw@db:5432/funshop",
            "postgresql://shop:pw@db:5432/funshop",
            "postgresql+psycopg://shop:pw@db:5432/funshop",
        ],
    )
    async def test_postgres_urls_use_asyncpg(self, url):
        engine = create_engine(url)
        try:
            assert engine.url.drivername == "postgresql+asyncpg"
            assert engine.url.database == "funshop"
        finally:
            await engine.dispose()

    async def test_sqlite_enforces_foreign_keys(self, engine):
        async with engine.connect() as conn:
            result = await conn.execute(text("PRAGMA foreign_keys"))
            assert result.scalar_one() == 1


class TestRepositoryBundle:
    async def test_repositories_share_the_session(self, session):
        repos = build_repositories(session)

        assert repos.session is session
        assert isinstance(repos.users, UserRepository)
        assert isinstance(repos.products, ProductRepository)
        assert repos.products.session is session
        assert repos.search.session is session


class TestCascades:
    async def test_deleting_a_user_removes_owned_rows(self, session, factory):
        seller = await factory.seller()
        buyer = await factory.user("luigi")
        product = await factory.product(seller)
        await factory.observe(buyer, product)
        await factory.review(buyer, product)
        product_id, seller_id = product.id, seller.id
        repos = build_repositories(session)

        assert await repos.users.delete(seller_id) is True

        assert await repos.products.get_by_id(product_id) is None
        assert await repos.observed.list_for_user(buyer.id) == []
        assert await repos.reviews.list_for_product(product_id) == []
        assert await repos.account_infos.get_by_user_id(seller_id) is None
