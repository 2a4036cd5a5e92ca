"""Domain enums for storefront models."""

from __future__ import annotations

from enum import Enum


class AccountType(str, Enum):
    """
    Role of a registered account.

    Every account starts as a customer; seller onboarding promotes it.
    """

    customer = "customer"
    seller = "seller"  # May list products and read sales statistics.
    admin = "admin"  # Bootstrap account with access to the dashboard.


class ProductStatus(str, Enum):
    """Stock status of a listed item. Every listing is a single unique item."""

    available = "available"
    sold = "sold"


class SellingType(str, Enum):
    """How a seller lists a product."""

    sell_now = "sell_now"  # Fixed price, purchasable through the cart.
    auction = "auction"  # Starting auction price only, not purchasable.


class OrderStatus(str, Enum):
    """Lifecycle status of an order row."""

    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
