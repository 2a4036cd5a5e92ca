"""
Repository bundle for dependency injection.

Services receive one bundle per request so that every repository shares the
same session and therefore the same transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .addresses import AddressRepository
from .cart_items import CartRepository
from .observed_products import ObservedProductRepository
from .orders import OrderRepository
from .payment_methods import PaymentMethodRepository
from .products import CategoryRepository, ProductRepository
from .reviews import ReviewRepository
from .search import SearchRepository
from .sellers import SellerRepository
from .users import AccountInfoRepository, UserRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all SQL repositories bound to one session."""

    session: AsyncSession
    users: UserRepository
    account_infos: AccountInfoRepository
    products: ProductRepository
    categories: CategoryRepository
    cart: CartRepository
    orders: OrderRepository
    addresses: AddressRepository
    payment_methods: PaymentMethodRepository
    observed: ObservedProductRepository
    reviews: ReviewRepository
    sellers: SellerRepository
    search: SearchRepository

    @classmethod
    def from_session(cls, session: AsyncSession) -> "RepositoryBundle":
        return cls(
            session=session,
            users=UserRepository(session),
            account_infos=AccountInfoRepository(session),
            products=ProductRepository(session),
            categories=CategoryRepository(session),
            cart=CartRepository(session),
            orders=OrderRepository(session),
            addresses=AddressRepository(session),
            payment_methods=PaymentMethodRepository(session),
            observed=ObservedProductRepository(session),
            reviews=ReviewRepository(session),
            sellers=SellerRepository(session),
            search=SearchRepository(session),
        )
