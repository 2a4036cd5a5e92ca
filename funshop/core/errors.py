"""
Domain error types.

Services and request dependencies raise these instead of ``HTTPException`` so
that business rules stay independent of the web layer. Each error carries the
HTTP status the exception handler answers with.
"""

from __future__ import annotations


class FunShopError(Exception):
    """Base class for expected, user-facing failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(FunShopError):
    """Input passed schema validation but breaks a business rule."""

    status_code = 400


class NotAuthenticated(FunShopError):
    status_code = 401


class PermissionDenied(FunShopError):
    status_code = 403


class NotFound(FunShopError):
    status_code = 404


class Conflict(FunShopError):
    """The resource already exists or is in an incompatible state."""

    status_code = 409


class CheckoutError(FunShopError):
    """Checkout was rejected; the transaction has been rolled back."""

    status_code = 400


class EmailDeliveryError(FunShopError):
    status_code = 502
