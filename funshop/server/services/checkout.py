"""
Checkout Service.

Turns the current cart into orders. Every write of a checkout (new address,
new card, order rows, sold flags, watcher flags, cart cleanup) happens in
one database transaction; any failure rolls the whole checkout back.

After the commit the session cart is emptied, a reference to the new orders
is kept in the session for the confirmation page, and the confirmation email
is handed to a background task.
"""

from __future__ import annotations

from typing import Any, List, MutableMapping, Optional, Tuple, Union

from fastapi import BackgroundTasks
from pydantic import EmailStr, TypeAdapter, ValidationError

from funshop.core.database.base import utc_now
from funshop.core.database.entities.addresses import Address
from funshop.core.database.entities.orders import Order
from funshop.core.database.entities.payment_methods import PaymentMethod
from funshop.core.database.entities.products import Product
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import CheckoutError
from funshop.core.logging_config import get_logger
from funshop.core.models.io.addresses import AddressRead
from funshop.core.models.io.checkout import (
    BuyerInfo,
    CheckoutRequest,
    CheckoutView,
    LatestOrderRef,
    MaskedPayment,
    OrderedItem,
    OrderSummary,
    ShippingAddress,
)
from funshop.core.models.io.payment_methods import PaymentMethodCreate, PaymentMethodRead
from funshop.core.monitoring import log_order_placed
from funshop.server.core import constant

from .cart import CartService, build_cart_view, clear_session_cart
from .email import EmailService

logger = get_logger(__name__)

NEW_SELECTION = "new"
SESSION_LATEST_ORDER_KEY = "latest_order"
REMOVED_PRODUCT_NAME = "Product no longer listed"

_email_adapter = TypeAdapter(EmailStr)


def _filled(*values: Optional[str]) -> bool:
    return all(value is not None and value.strip() for value in values)


def _saved_id(selection: Union[int, str], message: str) -> int:
    try:
        return int(selection)
    except ValueError as e:
        raise CheckoutError(message) from e


def _validated_card(data: CheckoutRequest) -> PaymentMethodCreate:
    if not _filled(data.holder_name, data.card_number, data.expiry_date, data.cvv):
        raise CheckoutError("Please fill in every field of the payment card.")
    try:
        return PaymentMethodCreate(
            holder_name=data.holder_name.strip(),
            card_number=data.card_number,
            expiry_date=data.expiry_date,
            cvv=data.cvv,
        )
    except ValidationError as e:
        raise CheckoutError("The payment card details are not valid.") from e


def store_latest_order(http_session: MutableMapping[str, Any], summary: OrderSummary, order_ids: List[int]) -> None:
    """Keep a reference to the order in the session; the items stay in the database."""
    ref = LatestOrderRef(order_ids=order_ids, **summary.model_dump(exclude={"items", "total"}))
    http_session[SESSION_LATEST_ORDER_KEY] = ref.model_dump(mode="json")


async def pop_latest_order(repos: RepositoryBundle, http_session: MutableMapping[str, Any]) -> Optional[OrderSummary]:
    """Take the latest order out of the session and rebuild its summary; it can be read only once."""
    raw = http_session.pop(SESSION_LATEST_ORDER_KEY, None)
    if raw is None:
        return None
    try:
        ref = LatestOrderRef.model_validate(raw)
    except ValidationError:
        logger.warning("Dropped an unreadable latest order reference from the session")
        return None
    items = [
        OrderedItem(
            product_id=order.product_id,
            name=name if name is not None else REMOVED_PRODUCT_NAME,
            price=order.total,
            image_path=image_path,
            seller_id=seller_id,
        )
        for order, name, image_path, seller_id in await repos.orders.list_by_ids(ref.order_ids)
    ]
    return OrderSummary(
        items=items,
        total=round(sum(item.price for item in items), 2),
        **ref.model_dump(exclude={"order_ids"}),
    )


class CheckoutService:
    """Checkout for the current visitor, signed in or guest."""

    def __init__(
        self,
        repos: RepositoryBundle,
        http_session: MutableMapping[str, Any],
        user: Optional[User],
        email_service: EmailService,
    ) -> None:
        self.repos = repos
        self.http_session = http_session
        self.user = user
        self.email_service = email_service
        self.cart = CartService(repos, http_session, user)

    async def prepare(self) -> CheckoutView:
        """Data for the checkout page: the cart and, for signed-in users, their saved details.

        Raises:
            CheckoutError: The cart is empty
        """
        cart = build_cart_view(await self.cart.products())
        if not cart.items:
            raise CheckoutError("Your cart is empty.")
        if self.user is None:
            return CheckoutView(cart=cart, is_guest=True)
        addresses = await self.repos.addresses.list_for_user(self.user.id)
        methods = await self.repos.payment_methods.list_for_user(self.user.id)
        return CheckoutView(
            cart=cart,
            addresses=[AddressRead.model_validate(address) for address in addresses],
            payment_methods=[PaymentMethodRead.model_validate(method) for method in methods],
            is_guest=False,
        )

    async def _resolve_member_details(
        self, data: CheckoutRequest
    ) -> Tuple[BuyerInfo, ShippingAddress, MaskedPayment, Optional[Address], Optional[PaymentMethod]]:
        user = self.user
        buyer = BuyerInfo(email=user.email, first_name=user.first_name, last_name=user.last_name)

        if not data.address_selection:
            raise CheckoutError("Please select or enter a shipping address.")
        new_address: Optional[Address] = None
        if data.address_selection == NEW_SELECTION:
            if not _filled(data.street, data.city, data.postal_code):
                raise CheckoutError("Please fill in every field of the new address.")
            new_address = Address(
                user_id=user.id,
                street=data.street.strip(),
                city=data.city.strip(),
                postal_code=data.postal_code.strip(),
            )
            address_source = new_address
        else:
            address_id = _saved_id(data.address_selection, "The selected address is not valid.")
            address_source = await self.repos.addresses.get_for_user(address_id, user.id)
            if address_source is None:
                raise CheckoutError("The selected address is not valid.")
        address = ShippingAddress(
            first_name=user.first_name,
            last_name=user.last_name,
            street=address_source.street,
            city=address_source.city,
            postal_code=address_source.postal_code,
        )

        if not data.payment_method:
            raise CheckoutError("Please select or enter a payment method.")
        new_method: Optional[PaymentMethod] = None
        if data.payment_method == NEW_SELECTION:
            card = _validated_card(data)
            new_method = PaymentMethod(
                user_id=user.id,
                holder_name=card.holder_name,
                card_last4=card.card_number[-4:],
                expiry_date=card.expiry_date,
            )
            method_source = new_method
        else:
            method_id = _saved_id(data.payment_method, "The selected payment method is not valid.")
            method_source = await self.repos.payment_methods.get_for_user(method_id, user.id)
            if method_source is None:
                raise CheckoutError("The selected payment method is not valid.")
        payment = MaskedPayment(
            holder_name=method_source.holder_name,
            card_last4=method_source.card_last4,
            expiry_date=method_source.expiry_date,
        )
        return buyer, address, payment, new_address, new_method

    def _resolve_guest_details(self, data: CheckoutRequest) -> Tuple[BuyerInfo, ShippingAddress, MaskedPayment]:
        if not _filled(data.first_name, data.last_name, data.email, data.street, data.city, data.postal_code):
            raise CheckoutError("Please fill in every personal and address field.")
        try:
            email = _email_adapter.validate_python(data.email.strip())
        except ValidationError as e:
            raise CheckoutError("The email address is not valid.") from e
        card = _validated_card(data)
        buyer = BuyerInfo(email=email, first_name=data.first_name.strip(), last_name=data.last_name.strip())
        address = ShippingAddress(
            first_name=buyer.first_name,
            last_name=buyer.last_name,
            street=data.street.strip(),
            city=data.city.strip(),
            postal_code=data.postal_code.strip(),
        )
        payment = MaskedPayment(
            holder_name=card.holder_name,
            card_last4=card.card_number[-4:],
            expiry_date=card.expiry_date,
        )
        return buyer, address, payment

    async def _write_orders(
        self,
        items: List[Product],
        new_address: Optional[Address],
        new_method: Optional[PaymentMethod],
    ) -> List[int]:
        repos = self.repos
        buyer_id = self.user.id if self.user is not None else None
        order_ids: List[int] = []
        try:
            if new_address is not None:
                await repos.addresses.create(new_address, commit=False)
            if new_method is not None:
                await repos.payment_methods.create(new_method, commit=False)
            for product in items:
                order = await repos.orders.create(
                    Order(total=product.effective_price, user_id=buyer_id, product_id=product.id),
                    commit=False,
                )
                order_ids.append(order.id)
                if not await repos.products.mark_sold(product.id, commit=False):
                    raise CheckoutError(f'"{product.name}" has just been sold to someone else.')
                await repos.observed.flag_change(product.id, commit=False)
            if buyer_id is not None:
                await repos.cart.clear(buyer_id, commit=False)
            await repos.session.commit()
        except Exception:
            await repos.session.rollback()
            raise
        return order_ids

    async def place_order(
        self,
        data: CheckoutRequest,
        base_url: str,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> OrderSummary:
        """Buy every available item of the cart.

        Args:
            data: Checkout form
            base_url: Public base URL used for the review link
            background_tasks: Where the confirmation email is scheduled; sent inline when None

        Returns:
            Summary of the placed order

        Raises:
            CheckoutError: Empty cart, missing or invalid details, or an item sold concurrently
        """
        products = await self.cart.products()
        if not products:
            raise CheckoutError("Your cart is empty.")
        items = [product for product in products if product.is_purchasable]
        if not items:
            raise CheckoutError("There are no available items in your cart.")

        new_address: Optional[Address] = None
        new_method: Optional[PaymentMethod] = None
        if self.user is not None:
            buyer, address, payment, new_address, new_method = await self._resolve_member_details(data)
        else:
            buyer, address, payment = self._resolve_guest_details(data)

        ordered = [
            OrderedItem(
                product_id=product.id,
                name=product.name,
                price=product.effective_price,
                image_path=product.image_path,
                seller_id=product.user_id,
            )
            for product in items
        ]
        order_ids = await self._write_orders(items, new_address, new_method)

        base_url = base_url.rstrip("/")
        if self.user is not None:
            review_link = f"{base_url}{constant.API_V1_STR}/sellers/{ordered[0].seller_id}/reviews"
        else:
            review_link = f"{base_url}/"
        summary = OrderSummary(
            buyer=buyer,
            items=ordered,
            total=round(sum(item.price for item in ordered), 2),
            address=address,
            payment=payment,
            date=utc_now(),
            review_link=review_link,
            is_guest=self.user is None,
        )

        clear_session_cart(self.http_session)
        store_latest_order(self.http_session, summary, order_ids)
        log_order_placed(buyer.email, len(ordered), summary.total, summary.is_guest)

        if background_tasks is not None:
            background_tasks.add_task(self.email_service.send_order_confirmation, buyer.email, summary)
        else:
            await self.email_service.send_order_confirmation(buyer.email, summary)
        return summary
