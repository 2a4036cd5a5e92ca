"""
User Dashboard Endpoints.

Everything under ``/users/me`` acts on the signed-in user: profile, order
history, listed products, address book, card book and seller statistics.
"""

from typing import List

from fastapi import APIRouter, Response, status
from sqlalchemy.exc import IntegrityError

from funshop.core.database.entities.addresses import Address
from funshop.core.database.entities.payment_methods import PaymentMethod
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import Conflict, NotFound
from funshop.core.logging_config import get_logger
from funshop.core.models.io.addresses import AddressCreate, AddressRead
from funshop.core.models.io.orders import OrderRead
from funshop.core.models.io.payment_methods import PaymentMethodCreate, PaymentMethodRead
from funshop.core.models.io.products import ProductRead
from funshop.core.models.io.sellers import SellerStats
from funshop.core.models.io.users import (
    AccountInfoRead,
    ProfileImageUpdate,
    ProfileRead,
    ProfileUpdate,
    UserRead,
)
from funshop.server.services.deps import CurrentUserDep, ReposDep, SellerDep
from funshop.server.services.products import to_product_read

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


async def _profile(repos: RepositoryBundle, user: User) -> ProfileRead:
    info = await repos.account_infos.get_by_user_id(user.id)
    return ProfileRead(
        user=UserRead.model_validate(user),
        account_info=AccountInfoRead.model_validate(info) if info else AccountInfoRead(),
        is_seller=user.is_seller or await repos.sellers.get_by_user_id(user.id) is not None,
    )


@router.get("/me", response_model=ProfileRead, summary="My Profile")
async def get_my_profile(repos: ReposDep, user: CurrentUserDep) -> ProfileRead:
    return await _profile(repos, user)


@router.patch(
    "/me",
    response_model=ProfileRead,
    summary="Update My Profile",
    description="Update names, username, birth date and description in one transaction.",
    responses={409: {"description": "Username already taken"}},
)
async def update_my_profile(data: ProfileUpdate, repos: ReposDep, user: CurrentUserDep) -> ProfileRead:
    changes = data.model_dump(exclude_unset=True)
    description = changes.pop("description", None)
    if "username" in changes and changes["username"] != user.username:
        if await repos.users.get_by_username(changes["username"]) is not None:
            raise Conflict("This username is already taken.")
    try:
        await repos.users.update_profile(user.id, changes, commit=False)
        if description is not None:
            await repos.account_infos.upsert_description(user.id, description, commit=False)
        await repos.session.commit()
    except IntegrityError as e:
        await repos.session.rollback()
        if "username" not in changes:
            raise
        raise Conflict("This username is already taken.") from e
    except Exception:
        await repos.session.rollback()
        raise
    logger.info(f"User {user.id} updated their profile")
    return await _profile(repos, user)


@router.put("/me/profile-image", response_model=AccountInfoRead, summary="Set Profile Image")
async def set_profile_image(data: ProfileImageUpdate, repos: ReposDep, user: CurrentUserDep) -> AccountInfoRead:
    info = await repos.account_infos.upsert_profile_image(user.id, data.profile_image)
    return AccountInfoRead.model_validate(info)


@router.get("/me/orders", response_model=List[OrderRead], summary="My Orders")
async def list_my_orders(repos: ReposDep, user: CurrentUserDep) -> List[OrderRead]:
    return [
        OrderRead(
            id=order.id,
            ordered_at=order.ordered_at,
            total=order.total,
            status=order.status,
            product_id=order.product_id,
            product_name=name,
            product_image=image,
        )
        for order, name, image in await repos.orders.list_for_user(user.id)
    ]


@router.get("/me/products", response_model=List[ProductRead], summary="My Products")
async def list_my_products(repos: ReposDep, user: CurrentUserDep) -> List[ProductRead]:
    return [to_product_read(product, user.username) for product in await repos.products.list_by_user(user.id)]


@router.get("/me/addresses", response_model=List[AddressRead], summary="My Addresses")
async def list_my_addresses(repos: ReposDep, user: CurrentUserDep) -> List[AddressRead]:
    return [AddressRead.model_validate(address) for address in await repos.addresses.list_for_user(user.id)]


@router.post(
    "/me/addresses",
    response_model=AddressRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add an Address",
)
async def add_address(data: AddressCreate, repos: ReposDep, user: CurrentUserDep) -> AddressRead:
    address = await repos.addresses.create(Address(user_id=user.id, **data.model_dump()))
    return AddressRead.model_validate(address)


@router.delete(
    "/me/addresses/{address_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an Address",
    responses={404: {"description": "Address not found"}},
)
async def delete_address(address_id: int, repos: ReposDep, user: CurrentUserDep) -> Response:
    if not await repos.addresses.delete(address_id, user.id):
        raise NotFound("Address not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me/payment-methods", response_model=List[PaymentMethodRead], summary="My Payment Methods")
async def list_my_payment_methods(repos: ReposDep, user: CurrentUserDep) -> List[PaymentMethodRead]:
    return [PaymentMethodRead.model_validate(method) for method in await repos.payment_methods.list_for_user(user.id)]


@router.post(
    "/me/payment-methods",
    response_model=PaymentMethodRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add a Payment Method",
    description="Save a card. Only the holder, the last four digits and the expiry date are stored.",
)
async def add_payment_method(data: PaymentMethodCreate, repos: ReposDep, user: CurrentUserDep) -> PaymentMethodRead:
    method = await repos.payment_methods.create(
        PaymentMethod(
            user_id=user.id,
            holder_name=data.holder_name,
            card_last4=data.card_number[-4:],
            expiry_date=data.expiry_date,
        )
    )
    return PaymentMethodRead.model_validate(method)


@router.delete(
    "/me/payment-methods/{method_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Payment Method",
    responses={404: {"description": "Payment method not found"}},
)
async def delete_payment_method(method_id: int, repos: ReposDep, user: CurrentUserDep) -> Response:
    if not await repos.payment_methods.delete(method_id, user.id):
        raise NotFound("Payment method not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/me/stats",
    response_model=SellerStats,
    summary="My Sales Statistics",
    description="Revenue, sold items and received reviews. Sellers only.",
    responses={403: {"description": "The user is not a seller"}},
)
async def my_stats(repos: ReposDep, seller: SellerDep) -> SellerStats:
    revenue, sold = await repos.orders.sales_stats_for_seller(seller.id)
    listed = await repos.products.list_by_user(seller.id)
    reviews = await repos.reviews.list_for_seller(seller.id)
    ratings = [review.rating for review, _, _ in reviews]
    return SellerStats(
        total_revenue=round(revenue, 2),
        products_sold=sold,
        products_listed=len(listed),
        reviews_received=len(reviews),
        average_rating=round(sum(ratings) / len(ratings), 2) if ratings else None,
    )
