"""
Database entity models.

This package contains all database entity models organized by business domain
and table relationships. Each module represents either:

1. A single database table and its related logic
2. A business domain that spans multiple related tables

Modules:
- users: Accounts and their public profile (users, account_infos)
- products: Product listings and categories
- cart_items: Persistent carts of authenticated users
- orders: Order history, one row per purchased product
- addresses: Saved shipping addresses
- payment_methods: Saved, masked payment cards
- observed_products: Watch lists with price-change flags
- reviews: Product reviews
- sellers: Seller onboarding details
"""

from . import (
    addresses,
    cart_items,
    observed_products,
    orders,
    payment_methods,
    products,
    reviews,
    sellers,
    users,
)
from .addresses import Address
from .cart_items import CartItem
from .observed_products import ObservedProduct
from .orders import Order
from .payment_methods import PaymentMethod
from .products import Category, Product
from .reviews import Review
from .sellers import Seller
from .users import AccountInfo, User

__all__ = [
    "AccountInfo",
    "Address",
    "CartItem",
    "Category",
    "ObservedProduct",
    "Order",
    "PaymentMethod",
    "Product",
    "Review",
    "Seller",
    "User",
    "addresses",
    "cart_items",
    "observed_products",
    "orders",
    "payment_methods",
    "products",
    "reviews",
    "sellers",
    "users",
]
