"""
Product Endpoints.

The home page listing, product details with their reviews, and listing
management for sellers.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from funshop.core.errors import NotFound
from funshop.core.models.io.products import (
    CategoryRead,
    ProductCreate,
    ProductDetail,
    ProductRead,
    ProductUpdate,
)
from funshop.core.models.io.reviews import ReviewRead
from funshop.server.services import products as product_service
from funshop.server.services.deps import CurrentUserDep, OptionalUserDep, ReposDep, SellerDep

router = APIRouter(tags=["products"])


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List Products",
    description="List every product, newest first, with the seller's username.",
)
async def list_products(
    repos: ReposDep,
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    offset: Optional[int] = Query(default=None, ge=0),
) -> List[ProductRead]:
    rows = await repos.products.list_all(limit=limit, offset=offset)
    return [product_service.to_product_read(product, username) for product, username in rows]


@router.get(
    "/categories",
    response_model=List[CategoryRead],
    summary="List Categories",
)
async def list_categories(repos: ReposDep) -> List[CategoryRead]:
    return [CategoryRead.model_validate(category) for category in await repos.categories.list_all()]


@router.get(
    "/{product_id}",
    response_model=ProductDetail,
    summary="Get Product",
    description="Product details with the reviews left on it.",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: int, repos: ReposDep, user: OptionalUserDep) -> ProductDetail:
    row = await repos.products.get_with_seller(product_id)
    if row is None:
        raise NotFound("Product not found.")
    product, seller_username = row
    reviews = [
        ReviewRead.model_validate(review).model_copy(update={"author_username": author})
        for review, author in await repos.reviews.list_for_product(product_id)
    ]
    is_observed = user is not None and await repos.observed.is_observed(user.id, product_id)
    return ProductDetail(
        product=product_service.to_product_read(product, seller_username),
        reviews=reviews,
        is_observed=is_observed,
    )


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="List a Product",
    description="Put a product up for sale. Only sellers can list products.",
    responses={403: {"description": "The user is not a seller"}},
)
async def create_product(data: ProductCreate, repos: ReposDep, seller: SellerDep) -> ProductRead:
    """
    List a new product.

    - **selling_type**: `sell_now` requires **price**, `auction` requires **auction_price**.
    - **image_path**: Path or URL of an already uploaded image.
    """
    product = await product_service.create_product(repos, seller, data)
    return product_service.to_product_read(product, seller.username)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    summary="Edit a Product",
    description="Edit one of your products. A price change notifies everyone watching it.",
    responses={404: {"description": "Product not found or not yours"}},
)
async def update_product(product_id: int, data: ProductUpdate, repos: ReposDep, user: CurrentUserDep) -> ProductRead:
    product = await product_service.update_product(
        repos, product_id, data.model_dump(exclude_unset=True), owner_id=user.id
    )
    return product_service.to_product_read(product, user.username)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Product",
    responses={404: {"description": "Product not found or not yours"}},
)
async def delete_product(product_id: int, repos: ReposDep, user: CurrentUserDep) -> Response:
    await product_service.delete_product(repos, product_id, owner_id=user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
