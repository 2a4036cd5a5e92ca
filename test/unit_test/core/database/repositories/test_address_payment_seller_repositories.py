"""Tests for AddressRepository, PaymentMethodRepository and SellerRepository."""

from funshop.core.database.entities import Seller


class TestAddressRepository:
    async def test_scoped_to_owner(self, repos, factory):
        owner = await factory.user("mario")
        other = await factory.user("luigi")
        address = await factory.address(owner)

        assert (await repos.addresses.get_for_user(address.id, owner.id)).street == "Via Roma 1"
        assert await repos.addresses.get_for_user(address.id, other.id) is None
        assert await repos.addresses.delete(address.id, other.id) is False
        assert await repos.addresses.delete(address.id, owner.id) is True
        assert await repos.addresses.list_for_user(owner.id) == []

    async def test_update(self, repos, factory):
        owner = await factory.user()
        address = await factory.address(owner)

        updated = await repos.addresses.update(address.id, owner.id, {"city": "Milano", "user_id": 999})

        assert updated.city == "Milano"
        assert updated.user_id == owner.id


class TestPaymentMethodRepository:
    async def test_list_and_delete(self, repos, factory):
        owner = await factory.user()
        first = await factory.payment_method(owner, "1111")
        await factory.payment_method(owner, "2222")

        assert [m.card_last4 for m in await repos.payment_methods.list_for_user(owner.id)] == ["1111", "2222"]
        assert await repos.payment_methods.delete(first.id, owner.id) is True
        assert await repos.payment_methods.get_for_user(first.id, owner.id) is None


class TestSellerRepository:
    async def test_lookups(self, repos, factory):
        user = await factory.seller()
        await repos.sellers.create(
            Seller(
                user_id=user.id,
                shop_name="Anna's Attic",
                vat_number="IT12345678901",
                contact_email="anna@mail.com",
                iban="IT60X0542811101000000123456",
                description="Second-hand furniture",
            )
        )

        assert (await repos.sellers.get_by_user_id(user.id)).shop_name == "Anna's Attic"
        assert (await repos.sellers.get_by_vat_number("IT12345678901")).user_id == user.id
        assert await repos.sellers.get_by_vat_number("IT000") is None
