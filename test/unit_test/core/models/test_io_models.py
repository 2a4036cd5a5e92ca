"""Validation rules of the request models."""

import pytest
from pydantic import ValidationError

from funshop.core.models.domain.enums import SellingType
from funshop.core.models.io import (
    CheckoutRequest,
    PaymentMethodCreate,
    ProductCreate,
    ProductUpdate,
    ProfileUpdate,
    RegisterRequest,
    ReviewCreate,
    SellerCreate,
)


class TestRegisterRequest:
    def test_names_are_stripped(self):
        data = RegisterRequest(
            username="  mario ",
            first_name=" Mario",
            last_name="Rossi ",
            email="mario@mail.com",
            password="password123",
        )
        assert (data.username, data.first_name, data.last_name) == ("mario", "Mario", "Rossi")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"username": "mo"},
            {"email": "not-an-email"},
            {"password": "short"},
            {"first_name": ""},
        ],
    )
    def test_invalid_input(self, overrides):
        payload = {
            "username": "mario",
            "first_name": "Mario",
            "last_name": "Rossi",
            "email": "mario@mail.com",
            "password": "password123",
            **overrides,
        }
        with pytest.raises(ValidationError):
            RegisterRequest(**payload)


class TestProductCreate:
    def test_sell_now_drops_auction_price(self):
        data = ProductCreate(selling_type="sell_now", name="Lamp", price=20.0, auction_price=5.0)

        assert data.selling_type == SellingType.sell_now
        assert data.price == 20.0
        assert data.auction_price is None

    def test_auction_drops_price(self):
        data = ProductCreate(selling_type="auction", name="Painting", price=20.0, auction_price=100.0)

        assert data.price is None
        assert data.auction_price == 100.0

    def test_sell_now_requires_price(self):
        with pytest.raises(ValidationError, match="price is required"):
            ProductCreate(selling_type="sell_now", name="Lamp")

    def test_auction_requires_auction_price(self):
        with pytest.raises(ValidationError, match="auction_price is required"):
            ProductCreate(selling_type="auction", name="Painting", price=10.0)

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProductCreate(selling_type="sell_now", name="Lamp", price=0)


class TestProductUpdate:
    def test_omitted_fields_stay_unset(self):
        assert ProductUpdate(price=15.0).model_dump(exclude_unset=True) == {"price": 15.0}

    def test_name_is_stripped(self):
        assert ProductUpdate(name="  Lamp ").name == "Lamp"

    @pytest.mark.parametrize("name", [None, "   "])
    def test_name_cannot_be_cleared(self, name):
        with pytest.raises(ValidationError, match="name cannot be null"):
            ProductUpdate(name=name)

    def test_optional_columns_can_be_cleared(self):
        data = ProductUpdate(discounted_price=None, description=None)

        assert data.model_dump(exclude_unset=True) == {"discounted_price": None, "description": None}


class TestProfileUpdate:
    @pytest.mark.parametrize("field", ["username", "first_name", "last_name"])
    def test_names_cannot_be_null(self, field):
        with pytest.raises(ValidationError, match=f"{field} cannot be null"):
            ProfileUpdate(**{field: None})

    def test_birth_date_can_be_cleared(self):
        assert ProfileUpdate(birth_date=None).model_dump(exclude_unset=True) == {"birth_date": None}


class TestCheckoutRequest:
    def test_saved_ids_may_be_numbers(self):
        data = CheckoutRequest(address_selection=3, payment_method=7)

        assert (data.address_selection, data.payment_method) == (3, 7)

    def test_selections_may_be_strings(self):
        data = CheckoutRequest(address_selection="new", payment_method="12")

        assert (data.address_selection, data.payment_method) == ("new", "12")


class TestPaymentMethodCreate:
    def test_card_number_is_normalized(self):
        card = PaymentMethodCreate(
            holder_name="Mario Rossi", card_number="4242 4242-4242 4242", expiry_date=" 12/30 ", cvv="123"
        )

        assert card.card_number == "4242424242424242"
        assert card.expiry_date == "12/30"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("card_number", "4242"),
            ("card_number", "4242abcd42424242"),
            ("expiry_date", "13/30"),
            ("expiry_date", "1230"),
            ("cvv", "12"),
            ("cvv", "12a"),
        ],
    )
    def test_invalid_card(self, field, value):
        payload = {"holder_name": "Mario", "card_number": "4242424242424242", "expiry_date": "12/2030", "cvv": "1234"}
        payload[field] = value
        with pytest.raises(ValidationError):
            PaymentMethodCreate(**payload)


class TestReviewCreate:
    def test_content_is_stripped(self):
        assert ReviewCreate(product_id=1, content="  Nice  ", rating=5).content == "Nice"

    @pytest.mark.parametrize(
        "payload",
        [{"content": "   ", "rating": 3}, {"content": "ok", "rating": 0}, {"content": "ok", "rating": 6}],
    )
    def test_invalid_review(self, payload):
        with pytest.raises(ValidationError):
            ReviewCreate(product_id=1, **payload)


class TestSellerCreate:
    def test_vat_and_iban_are_normalized(self):
        seller = SellerCreate(
            shop_name="Anna's Attic",
            vat_number=" it12345678901 ",
            contact_email="anna@mail.com",
            iban="it60 x054 2811 1010 0000 0123 456",
            description="Second-hand furniture",
        )

        assert seller.vat_number == "IT12345678901"
        assert seller.iban == "IT60X0542811101000000123456"

    def test_invalid_iban(self):
        with pytest.raises(ValidationError, match="IBAN"):
            SellerCreate(
                shop_name="Anna's Attic",
                vat_number="IT12345678901",
                contact_email="anna@mail.com",
                iban="not an iban",
                description="Second-hand furniture",
            )
