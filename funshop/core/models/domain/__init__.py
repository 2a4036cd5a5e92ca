"""Domain enums for the storefront."""

from .enums import AccountType, OrderStatus, ProductStatus, SellingType

__all__ = ["AccountType", "OrderStatus", "ProductStatus", "SellingType"]
