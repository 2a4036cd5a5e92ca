"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain
and table relationships. Each module provides data access operations for its
corresponding SQLModel entity models.

Modules:
- base: AsyncBaseRepository interface and QueryBuilder utilities
- users: Account, password reset and profile operations
- products: Product listing and category operations
- cart_items: Persistent cart operations
- orders: Order history and sales figures
- addresses: Address book operations
- payment_methods: Masked card book operations
- observed_products: Watch lists and price-change flags
- reviews: Review operations
- sellers: Seller onboarding operations
- search: Product and user search
- bundle: RepositoryBundle for dependency injection
"""

from .addresses import AddressRepository
from .base import AsyncBaseRepository, QueryBuilder
from .bundle import RepositoryBundle
from .cart_items import CartRepository
from .observed_products import ObservedProductRepository
from .orders import OrderRepository
from .payment_methods import PaymentMethodRepository
from .products import CategoryRepository, ProductRepository
from .reviews import ReviewRepository
from .search import SearchRepository
from .sellers import SellerRepository
from .users import AccountInfoRepository, UserRepository

__all__ = [
    "AccountInfoRepository",
    "AddressRepository",
    "AsyncBaseRepository",
    "CartRepository",
    "CategoryRepository",
    "ObservedProductRepository",
    "OrderRepository",
    "PaymentMethodRepository",
    "ProductRepository",
    "QueryBuilder",
    "RepositoryBundle",
    "ReviewRepository",
    "SearchRepository",
    "SellerRepository",
    "UserRepository",
]
