"""Tests for checkout of members and guests."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi import BackgroundTasks

from funshop.core.errors import CheckoutError
from funshop.core.models.domain.enums import ProductStatus
from funshop.core.models.io.checkout import CheckoutRequest
from funshop.server.services.cart import SESSION_CART_KEY
from funshop.server.services.checkout import (
    REMOVED_PRODUCT_NAME,
    SESSION_LATEST_ORDER_KEY,
    CheckoutService,
    pop_latest_order,
)

BASE_URL = "http://shop.test/"

NEW_CARD = {
    "holder_name": "Mario Rossi",
    "card_number": "4242 4242 4242 4242",
    "expiry_date": "12/30",
    "cvv": "123",
}
NEW_ADDRESS = {"street": "Via Roma 1", "city": "Torino", "postal_code": "10100"}
GUEST_DETAILS = {"first_name": "Peach", "last_name": "Toadstool", "email": "peach@mail.com", **NEW_ADDRESS, **NEW_CARD}


@pytest_asyncio.fixture
async def seller(factory):
    return await factory.seller("anna")


@pytest_asyncio.fixture
async def buyer(factory):
    return await factory.user("mario")


class TestPrepare:
    async def test_empty_cart(self, repos, email_service):
        with pytest.raises(CheckoutError, match="empty"):
            await CheckoutService(repos, {}, None, email_service).prepare()

    async def test_member_sees_saved_details(self, repos, factory, email_service, seller, buyer):
        product = await factory.product(seller)
        await repos.cart.add(buyer.id, product.id)
        await factory.address(buyer)
        await factory.payment_method(buyer, "1111")

        view = await CheckoutService(repos, {}, buyer, email_service).prepare()

        assert not view.is_guest
        assert view.cart.total_qty == 1
        assert [address.city for address in view.addresses] == ["Torino"]
        assert [method.card_last4 for method in view.payment_methods] == ["1111"]

    async def test_guest_sees_cart_only(self, repos, factory, email_service, seller):
        product = await factory.product(seller)

        view = await CheckoutService(repos, {SESSION_CART_KEY: [product.id]}, None, email_service).prepare()

        assert view.is_guest
        assert view.addresses == []
        assert view.payment_methods == []


class TestMemberCheckout:
    async def test_new_address_and_card(self, repos, factory, email_service, seller, buyer):
        lamp = await factory.product(seller, "Lamp", price=30.0)
        chair = await factory.product(seller, "Chair", price=45.0, discounted_price=40.0)
        await repos.cart.merge(buyer.id, [lamp.id, chair.id])
        http_session = {}
        data = CheckoutRequest(address_selection="new", payment_method="new", **NEW_ADDRESS, **NEW_CARD)

        summary = await CheckoutService(repos, http_session, buyer, email_service).place_order(data, BASE_URL)

        assert summary.total == 70.0
        assert [item.name for item in summary.items] == ["Lamp", "Chair"]
        assert summary.payment.card_last4 == "4242"
        assert summary.review_link == f"http://shop.test/api/v1/sellers/{seller.id}/reviews"
        assert not summary.is_guest
        assert lamp.status == ProductStatus.sold.value
        assert chair.status == ProductStatus.sold.value
        assert sorted(order.total for order, _, _ in await repos.orders.list_for_user(buyer.id)) == [30.0, 40.0]
        assert await repos.cart.list_for_user(buyer.id) == []
        [address] = await repos.addresses.list_for_user(buyer.id)
        assert address.street == "Via Roma 1"
        [method] = await repos.payment_methods.list_for_user(buyer.id)
        assert (method.card_last4, method.expiry_date) == ("4242", "12/30")
        assert len(http_session[SESSION_LATEST_ORDER_KEY]["order_ids"]) == 2
        assert "items" not in http_session[SESSION_LATEST_ORDER_KEY]
        assert len(email_service.sent) == 1
        assert email_service.sent[0]["To"] == buyer.email

    async def test_saved_address_and_card(self, repos, factory, email_service, seller, buyer):
        product = await factory.product(seller)
        await repos.cart.add(buyer.id, product.id)
        address = await factory.address(buyer, city="Milano")
        method = await factory.payment_method(buyer, "9999")
        data = CheckoutRequest(address_selection=str(address.id), payment_method=str(method.id))

        summary = await CheckoutService(repos, {}, buyer, email_service).place_order(data, BASE_URL)

        assert summary.address.city == "Milano"
        assert summary.payment.card_last4 == "9999"
        assert len(await repos.addresses.list_for_user(buyer.id)) == 1

    @pytest.mark.parametrize(
        "data, message",
        [
            ({"payment_method": "new", **NEW_CARD}, "shipping address"),
            ({"address_selection": "new", "street": "Via Roma 1", "payment_method": "new", **NEW_CARD}, "new address"),
            ({"address_selection": "abc", "payment_method": "new", **NEW_CARD}, "address is not valid"),
            ({"address_selection": "999", "payment_method": "new", **NEW_CARD}, "address is not valid"),
            ({"address_selection": "new", **NEW_ADDRESS}, "payment method"),
            ({"address_selection": "new", "payment_method": "999", **NEW_ADDRESS}, "payment method is not valid"),
            (
                {"address_selection": "new", "payment_method": "new", **NEW_ADDRESS, **NEW_CARD, "cvv": "1"},
                "card details are not valid",
            ),
        ],
    )
    async def test_invalid_details(self, repos, factory, email_service, seller, buyer, data, message):
        product = await factory.product(seller)
        await repos.cart.add(buyer.id, product.id)

        with pytest.raises(CheckoutError, match=message):
            await CheckoutService(repos, {}, buyer, email_service).place_order(CheckoutRequest(**data), BASE_URL)

        assert product.status == ProductStatus.available.value
        assert email_service.sent == []

    async def test_someone_elses_address_is_rejected(self, repos, factory, email_service, seller, buyer):
        other = await factory.user("luigi")
        foreign = await factory.address(other)
        product = await factory.product(seller)
        await repos.cart.add(buyer.id, product.id)
        data = CheckoutRequest(address_selection=str(foreign.id), payment_method="new", **NEW_CARD)

        with pytest.raises(CheckoutError, match="address is not valid"):
            await CheckoutService(repos, {}, buyer, email_service).place_order(data, BASE_URL)

    async def test_watchers_are_flagged(self, repos, factory, email_service, seller, buyer):
        product = await factory.product(seller)
        observed = await factory.observe(await factory.user("luigi"), product)
        await repos.cart.add(buyer.id, product.id)
        data = CheckoutRequest(address_selection="new", payment_method="new", **NEW_ADDRESS, **NEW_CARD)

        await CheckoutService(repos, {}, buyer, email_service).place_order(data, BASE_URL)

        assert observed.notification_read is False

    async def test_sold_items_are_skipped(self, repos, factory, email_service, seller, buyer):
        available = await factory.product(seller, "Lamp", price=30.0)
        sold = await factory.product(seller, "Chair", price=45.0)
        await repos.cart.merge(buyer.id, [available.id, sold.id])
        await repos.products.mark_sold(sold.id)
        data = CheckoutRequest(address_selection="new", payment_method="new", **NEW_ADDRESS, **NEW_CARD)

        summary = await CheckoutService(repos, {}, buyer, email_service).place_order(data, BASE_URL)

        assert [item.product_id for item in summary.items] == [available.id]
        assert summary.total == 30.0

    async def test_only_sold_items(self, repos, factory, email_service, seller, buyer):
        sold = await factory.product(seller)
        await repos.cart.add(buyer.id, sold.id)
        await repos.products.mark_sold(sold.id)

        with pytest.raises(CheckoutError, match="no available items"):
            await CheckoutService(repos, {}, buyer, email_service).place_order(CheckoutRequest(), BASE_URL)

    async def test_concurrent_sale_rolls_back_everything(
        self, repos, factory, email_service, seller, buyer, monkeypatch
    ):
        product = await factory.product(seller)
        await repos.cart.add(buyer.id, product.id)
        buyer_id, product_id = buyer.id, product.id
        monkeypatch.setattr(repos.products, "mark_sold", AsyncMock(return_value=False))
        http_session = {}
        data = CheckoutRequest(address_selection="new", payment_method="new", **NEW_ADDRESS, **NEW_CARD)

        with pytest.raises(CheckoutError, match="just been sold"):
            await CheckoutService(repos, http_session, buyer, email_service).place_order(data, BASE_URL)

        assert await repos.orders.list_for_user(buyer_id) == []
        assert await repos.addresses.list_for_user(buyer_id) == []
        assert await repos.payment_methods.list_for_user(buyer_id) == []
        assert await repos.cart.contains(buyer_id, product_id)
        assert SESSION_LATEST_ORDER_KEY not in http_session
        assert email_service.sent == []


class TestGuestCheckout:
    async def test_guest_order(self, repos, factory, email_service, seller):
        product = await factory.product(seller, price=19.99)
        http_session = {SESSION_CART_KEY: [product.id]}

        summary = await CheckoutService(repos, http_session, None, email_service).place_order(
            CheckoutRequest(**GUEST_DETAILS), BASE_URL
        )

        assert summary.is_guest
        assert summary.buyer.email == "peach@mail.com"
        assert summary.review_link == "http://shop.test/"
        assert summary.total == 19.99
        assert product.status == ProductStatus.sold.value
        assert http_session[SESSION_CART_KEY] == []
        assert await repos.orders.total_sales() == 19.99
        assert email_service.sent[0]["To"] == "peach@mail.com"

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"email": None}, "personal and address"),
            ({"city": "  "}, "personal and address"),
            ({"email": "not-an-email"}, "email address is not valid"),
            ({"card_number": None}, "every field of the payment card"),
            ({"expiry_date": "99/99"}, "card details are not valid"),
        ],
    )
    async def test_invalid_guest_details(self, repos, factory, email_service, seller, overrides, message):
        product = await factory.product(seller)
        data = CheckoutRequest(**{**GUEST_DETAILS, **overrides})

        with pytest.raises(CheckoutError, match=message):
            await CheckoutService(repos, {SESSION_CART_KEY: [product.id]}, None, email_service).place_order(
                data, BASE_URL
            )


class TestConfirmationEmail:
    async def test_email_is_scheduled_in_background(self, repos, factory, email_service, seller):
        product = await factory.product(seller)
        background_tasks = BackgroundTasks()

        await CheckoutService(repos, {SESSION_CART_KEY: [product.id]}, None, email_service).place_order(
            CheckoutRequest(**GUEST_DETAILS), BASE_URL, background_tasks
        )

        assert email_service.sent == []
        assert len(background_tasks.tasks) == 1
        await background_tasks()
        assert len(email_service.sent) == 1


class TestLatestOrder:
    async def test_summary_is_read_once(self, repos, factory, email_service, seller):
        product = await factory.product(seller)
        http_session = {SESSION_CART_KEY: [product.id]}
        summary = await CheckoutService(repos, http_session, None, email_service).place_order(
            CheckoutRequest(**GUEST_DETAILS), BASE_URL
        )

        assert await pop_latest_order(repos, http_session) == summary
        assert await pop_latest_order(repos, http_session) is None

    async def test_items_are_reloaded_from_orders(self, repos, factory, email_service, seller, buyer):
        lamp = await factory.product(seller, "Lamp", price=30.0)
        chair = await factory.product(seller, "Chair", price=45.0)
        await repos.cart.merge(buyer.id, [lamp.id, chair.id])
        chair_id = chair.id
        http_session = {}
        data = CheckoutRequest(address_selection="new", payment_method="new", **NEW_ADDRESS, **NEW_CARD)
        await CheckoutService(repos, http_session, buyer, email_service).place_order(data, BASE_URL)
        await repos.products.delete(chair_id)

        summary = await pop_latest_order(repos, http_session)

        assert [item.name for item in summary.items] == ["Lamp", REMOVED_PRODUCT_NAME]
        assert summary.items[1].product_id is None
        assert summary.total == 75.0
        assert summary.address.city == "Torino"

    async def test_unreadable_reference_is_dropped(self, repos):
        http_session = {SESSION_LATEST_ORDER_KEY: {"total": 70.0}}

        assert await pop_latest_order(repos, http_session) is None
        assert SESSION_LATEST_ORDER_KEY not in http_session
