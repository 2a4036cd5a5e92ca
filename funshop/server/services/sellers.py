"""
Seller onboarding.

Becoming a seller stores the business details and switches the account type
in a single transaction.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from funshop.core.database.entities.sellers import Seller
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import Conflict
from funshop.core.logging_config import get_logger
from funshop.core.models.domain.enums import AccountType
from funshop.core.models.io.sellers import SellerCreate

logger = get_logger(__name__)


async def become_seller(repos: RepositoryBundle, user: User, data: SellerCreate) -> Seller:
    """Register ``user`` as a seller.

    Raises:
        Conflict: The user already is a seller or the VAT number is taken
    """
    if user.is_seller or await repos.sellers.get_by_user_id(user.id) is not None:
        raise Conflict("You are already registered as a seller.")
    if await repos.sellers.get_by_vat_number(data.vat_number) is not None:
        raise Conflict("This VAT number is already registered.")

    seller = Seller(user_id=user.id, **data.model_dump())
    try:
        await repos.sellers.create(seller, commit=False)
        if not user.is_admin:
            await repos.users.set_account_type(user.id, AccountType.seller.value, commit=False)
        await repos.session.commit()
    except IntegrityError as e:
        await repos.session.rollback()
        raise Conflict("Seller registration conflicts with an existing seller.") from e
    except Exception:
        await repos.session.rollback()
        raise
    logger.info(f"User {user.id} became a seller ({seller.shop_name})")
    return seller
