"""API tests for the cart."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestGuestCart:
    async def test_add_and_view(self, client: AsyncClient, factory):
        product = await factory.product(await factory.seller(), price=12.0)

        response = await client.post(f"/api/v1/cart/items/{product.id}")

        assert response.status_code == 200
        assert response.json()["total_qty"] == 1
        cart = (await client.get("/api/v1/cart")).json()
        assert cart["total_price"] == 12.0
        assert cart["items"][0]["product_id"] == product.id

    async def test_add_twice(self, client: AsyncClient, factory):
        product = await factory.product(await factory.seller())
        await client.post(f"/api/v1/cart/items/{product.id}")

        response = await client.post(f"/api/v1/cart/items/{product.id}")

        assert response.status_code == 409

    async def test_remove(self, client: AsyncClient, factory):
        product = await factory.product(await factory.seller())
        await client.post(f"/api/v1/cart/items/{product.id}")

        response = await client.delete(f"/api/v1/cart/items/{product.id}")

        assert response.status_code == 200
        assert response.json() == {"items": [], "total_qty": 0, "total_price": 0.0}

    async def test_missing_and_unavailable_products(self, client: AsyncClient, factory, repos):
        seller = await factory.seller()
        sold = await factory.product(seller, "Sold")
        auction = await factory.product(seller, "Painting", price=None, auction_price=90.0)
        await repos.products.mark_sold(sold.id)

        assert (await client.post("/api/v1/cart/items/999")).status_code == 404
        assert (await client.post(f"/api/v1/cart/items/{sold.id}")).status_code == 400
        assert (await client.post(f"/api/v1/cart/items/{auction.id}")).status_code == 400


class TestMemberCart:
    async def test_sold_items_stay_visible_but_not_counted(self, client: AsyncClient, factory, repos, login):
        buyer = await factory.user()
        seller = await factory.seller()
        a = await factory.product(seller, "A", price=10.0)
        b = await factory.product(seller, "B", price=20.0)
        await login(buyer)
        await client.post(f"/api/v1/cart/items/{a.id}")
        await client.post(f"/api/v1/cart/items/{b.id}")
        await repos.products.mark_sold(b.id)

        cart = (await client.get("/api/v1/cart")).json()

        assert [item["is_available"] for item in cart["items"]] == [True, False]
        assert cart["total_qty"] == 1
        assert cart["total_price"] == 10.0
