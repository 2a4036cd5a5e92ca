"""API tests for the signed-in user's dashboard."""

from datetime import date

import pytest
from httpx import AsyncClient

from funshop.core.database.entities import Order

pytestmark = pytest.mark.asyncio


class TestProfile:
    async def test_requires_login(self, client: AsyncClient):
        assert (await client.get("/api/v1/users/me")).status_code == 401

    async def test_get_profile(self, client: AsyncClient, factory, login):
        user = await factory.user("mario")
        await login(user)

        data = (await client.get("/api/v1/users/me")).json()

        assert data["user"]["username"] == "mario"
        assert data["account_info"] == {"description": "", "profile_image": None}
        assert data["is_seller"] is False

    async def test_update_profile(self, client: AsyncClient, factory, login):
        await login(await factory.user("mario"))

        response = await client.patch(
            "/api/v1/users/me",
            json={"username": "supermario", "birth_date": "1985-09-13", "description": "Plumber"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == "supermario"
        assert data["user"]["birth_date"] == date(1985, 9, 13).isoformat()
        assert data["account_info"]["description"] == "Plumber"

    async def test_username_taken(self, client: AsyncClient, factory, login):
        await factory.user("luigi")
        await login(await factory.user("mario"))

        response = await client.patch("/api/v1/users/me", json={"username": "luigi"})

        assert response.status_code == 409

    @pytest.mark.parametrize("field", ["first_name", "last_name", "username"])
    async def test_null_names_are_rejected(self, client: AsyncClient, factory, login, field):
        await login(await factory.user("mario"))

        response = await client.patch("/api/v1/users/me", json={field: None})

        assert response.status_code == 422
        assert (await client.get("/api/v1/users/me")).json()["user"]["username"] == "mario"

    async def test_profile_image(self, client: AsyncClient, factory, login):
        await login(await factory.user())

        response = await client.put("/api/v1/users/me/profile-image", json={"profile_image": "/static/img/me.png"})

        assert response.status_code == 200
        assert response.json()["profile_image"] == "/static/img/me.png"


class TestHistory:
    async def test_orders(self, client: AsyncClient, factory, repos, login):
        buyer = await factory.user()
        product = await factory.product(await factory.seller(), "Lamp", price=30.0)
        await repos.orders.create(Order(total=30.0, user_id=buyer.id, product_id=product.id))
        await login(buyer)

        [order] = (await client.get("/api/v1/users/me/orders")).json()

        assert order["product_name"] == "Lamp"
        assert order["total"] == 30.0
        assert order["status"] == "confirmed"

    async def test_my_products(self, client: AsyncClient, factory, login):
        seller = await factory.seller()
        await factory.product(seller, "Lamp")
        await factory.product(await factory.seller("other"), "Chair")
        await login(seller)

        assert [p["name"] for p in (await client.get("/api/v1/users/me/products")).json()] == ["Lamp"]


class TestAddressBook:
    async def test_add_list_delete(self, client: AsyncClient, factory, login):
        await login(await factory.user())

        response = await client.post(
            "/api/v1/users/me/addresses", json={"street": "Via Roma 1", "city": "Torino", "postal_code": "10100"}
        )
        assert response.status_code == 201
        address_id = response.json()["id"]

        assert [a["id"] for a in (await client.get("/api/v1/users/me/addresses")).json()] == [address_id]
        assert (await client.delete(f"/api/v1/users/me/addresses/{address_id}")).status_code == 204
        assert (await client.delete(f"/api/v1/users/me/addresses/{address_id}")).status_code == 404

    async def test_cannot_delete_foreign_address(self, client: AsyncClient, factory, login):
        address = await factory.address(await factory.user("luigi"))
        await login(await factory.user("mario"))

        assert (await client.delete(f"/api/v1/users/me/addresses/{address.id}")).status_code == 404


class TestPaymentMethods:
    async def test_only_last_digits_are_kept(self, client: AsyncClient, factory, login):
        await login(await factory.user())

        response = await client.post(
            "/api/v1/users/me/payment-methods",
            json={
                "holder_name": "Mario Rossi",
                "card_number": "5555 4444 3333 1111",
                "expiry_date": "01/29",
                "cvv": "321",
            },
        )

        assert response.status_code == 201
        assert response.json()["card_last4"] == "1111"
        assert "5555444433331111" not in response.text
        methods = (await client.get("/api/v1/users/me/payment-methods")).json()
        assert [m["card_last4"] for m in methods] == ["1111"]
        assert (await client.delete(f"/api/v1/users/me/payment-methods/{methods[0]['id']}")).status_code == 204

    async def test_invalid_card(self, client: AsyncClient, factory, login):
        await login(await factory.user())

        response = await client.post(
            "/api/v1/users/me/payment-methods",
            json={"holder_name": "Mario Rossi", "card_number": "1234", "expiry_date": "01/29", "cvv": "321"},
        )

        assert response.status_code == 422


class TestSellerStats:
    async def test_stats(self, client: AsyncClient, factory, repos, login):
        seller = await factory.seller()
        buyer = await factory.user()
        lamp = await factory.product(seller, "Lamp", price=30.0)
        await factory.product(seller, "Chair", price=45.0)
        await repos.orders.create(Order(total=30.0, user_id=buyer.id, product_id=lamp.id))
        await factory.review(buyer, lamp, rating=4)
        await login(seller)

        data = (await client.get("/api/v1/users/me/stats")).json()

        assert data == {
            "total_revenue": 30.0,
            "products_sold": 1,
            "products_listed": 2,
            "reviews_received": 1,
            "average_rating": 4.0,
        }

    async def test_customers_have_no_stats(self, client: AsyncClient, factory, login):
        await login(await factory.user())
        assert (await client.get("/api/v1/users/me/stats")).status_code == 403
