"""Tests for OrderRepository."""

from funshop.core.database.entities import Order
from funshop.core.models.domain.enums import OrderStatus


async def _order(repos, buyer, product, total):
    return await repos.orders.create(Order(total=total, user_id=buyer.id if buyer else None, product_id=product.id))


class TestOrderRepository:
    async def test_new_order_defaults(self, repos, factory):
        buyer = await factory.user()
        product = await factory.product(await factory.seller())

        order = await _order(repos, buyer, product, 50.0)

        assert order.status == OrderStatus.confirmed.value
        assert order.ordered_at is not None

    async def test_list_for_user_includes_product_details(self, repos, factory):
        buyer = await factory.user()
        seller = await factory.seller()
        product = await factory.product(seller, "Lamp", image_path="/static/img/lamp.png")
        await _order(repos, buyer, product, 50.0)

        [(order, name, image)] = await repos.orders.list_for_user(buyer.id)

        assert order.product_id == product.id
        assert name == "Lamp"
        assert image == "/static/img/lamp.png"

    async def test_order_survives_product_deletion(self, repos, factory):
        buyer = await factory.user()
        product = await factory.product(await factory.seller())
        await _order(repos, buyer, product, 50.0)

        await repos.products.delete(product.id)

        [(order, name, image)] = await repos.orders.list_for_user(buyer.id)
        assert name is None
        assert image is None
        assert order.total == 50.0

    async def test_list_by_ids_in_placement_order(self, repos, factory):
        seller = await factory.seller()
        lamp = await factory.product(seller, "Lamp", image_path="/static/img/lamp.png")
        chair = await factory.product(seller, "Chair")
        first = await _order(repos, None, lamp, 30.0)
        second = await _order(repos, None, chair, 45.0)
        chair_id = chair.id
        await _order(repos, None, await factory.product(seller, "Other"), 5.0)

        await repos.products.delete(chair_id)
        rows = await repos.orders.list_by_ids([second.id, first.id])

        assert [(order.id, name, image, seller_id) for order, name, image, seller_id in rows] == [
            (first.id, "Lamp", "/static/img/lamp.png", seller.id),
            (second.id, None, None, None),
        ]
        assert rows[1][0].product_id is None

    async def test_list_by_ids_without_ids(self, repos):
        assert await repos.orders.list_by_ids([]) == []

    async def test_total_sales_counts_guest_orders(self, repos, factory):
        buyer = await factory.user()
        seller = await factory.seller()
        await _order(repos, buyer, await factory.product(seller, "A"), 10.0)
        await _order(repos, None, await factory.product(seller, "B"), 15.5)

        assert await repos.orders.total_sales() == 25.5

    async def test_total_sales_without_orders(self, repos):
        assert await repos.orders.total_sales() == 0.0

    async def test_sales_stats_for_seller(self, repos, factory):
        buyer = await factory.user()
        anna = await factory.seller("anna")
        bruno = await factory.seller("bruno")
        await _order(repos, buyer, await factory.product(anna, "A"), 10.0)
        await _order(repos, buyer, await factory.product(anna, "B"), 20.0)
        await _order(repos, buyer, await factory.product(bruno, "C"), 99.0)

        assert await repos.orders.sales_stats_for_seller(anna.id) == (30.0, 2)
        assert await repos.orders.sales_stats_for_seller(buyer.id) == (0.0, 0)
