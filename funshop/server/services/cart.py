"""
Cart Service.

Signed-in users keep their cart in the ``cart_items`` table. Guests keep a
list of product IDs in the signed session cookie; that list is copied into
the table when they log in or register.
"""

from __future__ import annotations

from typing import Any, List, MutableMapping, Optional

from funshop.core.database.entities.products import Product
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import Conflict, NotFound, ValidationFailed
from funshop.core.logging_config import get_logger
from funshop.core.models.io.cart import CartItemView, CartView

logger = get_logger(__name__)

SESSION_CART_KEY = "cart"


def get_session_cart(http_session: MutableMapping[str, Any]) -> List[int]:
    items = http_session.get(SESSION_CART_KEY) or []
    return [item for item in items if isinstance(item, int)]


def set_session_cart(http_session: MutableMapping[str, Any], product_ids: List[int]) -> None:
    http_session[SESSION_CART_KEY] = list(product_ids)


def clear_session_cart(http_session: MutableMapping[str, Any]) -> None:
    http_session[SESSION_CART_KEY] = []


def build_cart_view(products: List[Product]) -> CartView:
    """Build the cart view; totals count available, priced items only."""
    items = [
        CartItemView(
            product_id=product.id,
            name=product.name,
            image_path=product.image_path,
            seller_id=product.user_id,
            price=product.effective_price,
            status=product.status,
            is_available=product.is_purchasable,
        )
        for product in products
    ]
    available = [item for item in items if item.is_available]
    return CartView(
        items=items,
        total_qty=len(available),
        total_price=round(sum(item.price or 0.0 for item in available), 2),
    )


class CartService:
    """Cart operations for the current visitor, signed in or not."""

    def __init__(
        self,
        repos: RepositoryBundle,
        http_session: MutableMapping[str, Any],
        user: Optional[User] = None,
    ) -> None:
        self.repos = repos
        self.http_session = http_session
        self.user = user

    async def products(self) -> List[Product]:
        """Products currently in the cart, in the order they were added."""
        if self.user is not None:
            rows = await self.repos.cart.list_for_user(self.user.id)
            return [product for _, product in rows]
        return await self.repos.products.list_by_ids(get_session_cart(self.http_session))

    async def view(self) -> CartView:
        return build_cart_view(await self.products())

    async def add(self, product_id: int) -> CartView:
        """Add a product to the cart.

        Raises:
            NotFound: The product does not exist
            ValidationFailed: The product is sold or has no fixed price
            Conflict: The product is already in the cart
        """
        product = await self.repos.products.get_by_id(product_id)
        if product is None:
            raise NotFound("Product not found.")
        if not product.is_available:
            raise ValidationFailed("This product is no longer available.")
        if product.effective_price is None:
            raise ValidationFailed("Auction products cannot be added to the cart.")

        if self.user is not None:
            added = await self.repos.cart.add(self.user.id, product_id)
        else:
            cart = get_session_cart(self.http_session)
            added = 0 if product_id in cart else 1
            if added:
                set_session_cart(self.http_session, cart + [product_id])
        if not added:
            raise Conflict("This product is already in your cart.")
        logger.debug(f"Product {product_id} added to cart")
        return await self.view()

    async def remove(self, product_id: int) -> CartView:
        if self.user is not None:
            await self.repos.cart.remove(self.user.id, product_id)
        else:
            set_session_cart(
                self.http_session, [pid for pid in get_session_cart(self.http_session) if pid != product_id]
            )
        return await self.view()


async def merge_guest_cart(repos: RepositoryBundle, user_id: int, http_session: MutableMapping[str, Any]) -> int:
    """Move the guest session cart into the user's persistent cart.

    Products already in the persistent cart or deleted since are skipped.
    The session cart is emptied afterwards.

    Returns:
        Number of products added to the persistent cart
    """
    product_ids = get_session_cart(http_session)
    if not product_ids:
        return 0
    existing = {product.id for product in await repos.products.list_by_ids(product_ids)}
    added = await repos.cart.merge(user_id, [pid for pid in product_ids if pid in existing])
    clear_session_cart(http_session)
    logger.info(f"Merged {added} guest cart item(s) into the cart of user {user_id}")
    return added
