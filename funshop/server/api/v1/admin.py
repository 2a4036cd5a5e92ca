"""
Admin Endpoints.

Dashboard and moderation actions, restricted to administrators.
"""

from fastapi import APIRouter, Response, status

from funshop.core.errors import NotFound, ValidationFailed
from funshop.core.logging_config import get_logger
from funshop.core.models.io.admin import AdminDashboard, ShopStats
from funshop.core.models.io.products import ProductRead, ProductUpdate
from funshop.core.models.io.users import UserRead
from funshop.server.services import products as product_service
from funshop.server.services.deps import AdminDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])


@router.get(
    "/dashboard",
    response_model=AdminDashboard,
    summary="Admin Dashboard",
    description="All users and products with the shop's headline figures.",
    responses={403: {"description": "Administrator access required"}},
)
async def dashboard(repos: ReposDep, admin: AdminDep) -> AdminDashboard:
    users = await repos.users.list_all()
    products = await repos.products.list_all()
    stats = ShopStats(
        user_count=len(users),
        available_product_count=await repos.products.count_available(),
        total_sales=round(await repos.orders.total_sales(), 2),
    )
    return AdminDashboard(
        users=[UserRead.model_validate(user) for user in users],
        products=[product_service.to_product_read(product, username) for product, username in products],
        stats=stats,
    )


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a User",
    description="Delete an account together with its products, cart, addresses, cards and reviews.",
    responses={400: {"description": "Administrators cannot delete themselves"}, 404: {"description": "User not found"}},
)
async def delete_user(user_id: int, repos: ReposDep, admin: AdminDep) -> Response:
    if user_id == admin.id:
        raise ValidationFailed("You cannot delete your own account.")
    if not await repos.users.delete(user_id):
        raise NotFound("User not found.")
    logger.info(f"Admin {admin.id} deleted user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/products/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Product",
    responses={404: {"description": "Product not found"}},
)
async def delete_product(product_id: int, repos: ReposDep, admin: AdminDep) -> Response:
    await product_service.delete_product(repos, product_id)
    logger.info(f"Admin {admin.id} deleted product {product_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/products/{product_id}",
    response_model=ProductRead,
    summary="Edit a Product",
    description="Edit any product. A price change notifies everyone watching it.",
    responses={404: {"description": "Product not found"}},
)
async def update_product(product_id: int, data: ProductUpdate, repos: ReposDep, admin: AdminDep) -> ProductRead:
    product = await product_service.update_product(repos, product_id, data.model_dump(exclude_unset=True))
    row = await repos.products.get_with_seller(product.id)
    return product_service.to_product_read(product, row[1] if row else None)
