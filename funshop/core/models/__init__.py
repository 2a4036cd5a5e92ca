"""Core models and schemas shared by the database layer and the API."""

from __future__ import annotations

from .domain import AccountType, OrderStatus, ProductStatus, SellingType

__all__ = [
    "AccountType",
    "OrderStatus",
    "ProductStatus",
    "SellingType",
]
