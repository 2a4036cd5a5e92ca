"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- users: Registration, login, password reset and profile models
- products: Product and category models
- reviews: Review models
- cart: Cart view models
- checkout: Checkout form and order summary models
- addresses / payment_methods: Address and masked card models
- orders: Order history models
- observed: Watch-list models
- sellers: Seller onboarding and statistics models
- admin: Admin dashboard models
- search: Search result models
- common: Shared response models
"""

from .addresses import AddressCreate, AddressRead
from .admin import AdminDashboard, ShopStats
from .cart import CartItemView, CartView
from .checkout import (
    BuyerInfo,
    CheckoutRequest,
    CheckoutView,
    LatestOrderRef,
    MaskedPayment,
    OrderedItem,
    OrderSummary,
    ShippingAddress,
)
from .common import MessageResponse, ShopInformation
from .observed import ObservedProductRead
from .orders import OrderRead
from .payment_methods import PaymentMethodCreate, PaymentMethodRead
from .products import CategoryRead, ProductCreate, ProductDetail, ProductRead, ProductUpdate
from .reviews import ReviewCreate, ReviewRead, SellerReviews
from .search import SearchResults, UserSearchResult
from .sellers import SellerCreate, SellerRead, SellerStats
from .users import (
    AccountInfoRead,
    AuthStatus,
    LoginRequest,
    MemberProfile,
    PasswordForgotRequest,
    PasswordResetRequest,
    ProfileImageUpdate,
    ProfileRead,
    ProfileUpdate,
    PublicUserRead,
    RegisterRequest,
    UserRead,
)

__all__ = [
    "AccountInfoRead",
    "AddressCreate",
    "AddressRead",
    "AdminDashboard",
    "AuthStatus",
    "BuyerInfo",
    "CartItemView",
    "CartView",
    "CategoryRead",
    "CheckoutRequest",
    "CheckoutView",
    "LatestOrderRef",
    "LoginRequest",
    "MaskedPayment",
    "MemberProfile",
    "MessageResponse",
    "ObservedProductRead",
    "OrderRead",
    "OrderSummary",
    "OrderedItem",
    "PasswordForgotRequest",
    "PasswordResetRequest",
    "PaymentMethodCreate",
    "PaymentMethodRead",
    "ProductCreate",
    "ProductDetail",
    "ProductRead",
    "ProductUpdate",
    "ProfileImageUpdate",
    "ProfileRead",
    "ProfileUpdate",
    "PublicUserRead",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewRead",
    "SearchResults",
    "SellerCreate",
    "SellerRead",
    "SellerReviews",
    "SellerStats",
    "ShippingAddress",
    "ShopInformation",
    "ShopStats",
    "UserRead",
    "UserSearchResult",
]
