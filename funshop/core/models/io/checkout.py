"""
Checkout I/O models.

``CheckoutRequest`` carries every field of the checkout form; which ones are
required depends on whether the buyer is signed in and whether a saved
address or card is selected, so those rules live in the checkout service.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .addresses import AddressRead
from .cart import CartView
from .payment_methods import PaymentMethodRead


class CheckoutRequest(BaseModel):
    address_selection: Optional[Union[int, str]] = Field(default=None, description="'new' or the ID of a saved address")
    payment_method: Optional[Union[int, str]] = Field(default=None, description="'new' or the ID of a saved card")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    holder_name: Optional[str] = None
    card_number: Optional[str] = None
    expiry_date: Optional[str] = None
    cvv: Optional[str] = None


class CheckoutView(BaseModel):
    """Data shown on the checkout page."""

    cart: CartView
    addresses: List[AddressRead] = []
    payment_methods: List[PaymentMethodRead] = []
    is_guest: bool


class BuyerInfo(BaseModel):
    email: str
    first_name: str
    last_name: Optional[str] = None


class ShippingAddress(BaseModel):
    first_name: str
    last_name: Optional[str] = None
    street: str
    city: str
    postal_code: str


class MaskedPayment(BaseModel):
    holder_name: str
    card_last4: str
    expiry_date: str


class OrderedItem(BaseModel):
    product_id: Optional[int] = None
    name: str
    price: float
    image_path: Optional[str] = None
    seller_id: Optional[int] = None


class OrderSummary(BaseModel):
    """Summary of a completed checkout, shown once and emailed to the buyer."""

    buyer: BuyerInfo
    items: List[OrderedItem]
    total: float
    address: ShippingAddress
    payment: MaskedPayment
    date: datetime
    review_link: str
    is_guest: bool


class LatestOrderRef(BaseModel):
    """What the session keeps of the latest order.

    Items and total are reloaded from the orders table when it is read.
    """

    order_ids: List[int]
    buyer: BuyerInfo
    address: ShippingAddress
    payment: MaskedPayment
    date: datetime
    review_link: str
    is_guest: bool
