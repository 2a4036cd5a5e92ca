"""
Observed Product Endpoints.

A signed-in user's watch list. Reading the list acknowledges its
notifications: unread rows are marked read and their observed price is
reset to the current price.
"""

from typing import List

from fastapi import APIRouter, Response, status

from funshop.core.errors import Conflict, NotFound
from funshop.core.models.io.common import MessageResponse
from funshop.core.models.io.observed import ObservedProductRead
from funshop.server.services.deps import CurrentUserDep, ReposDep
from funshop.server.services.products import to_product_read

router = APIRouter(tags=["observed"])


@router.get(
    "",
    response_model=List[ObservedProductRead],
    summary="Watch List",
    description="Watched products with price-change notifications, which are then marked as read.",
)
async def list_observed(repos: ReposDep, user: CurrentUserDep) -> List[ObservedProductRead]:
    rows = await repos.observed.list_for_user(user.id)
    items = [
        ObservedProductRead(
            product=to_product_read(product, seller_username),
            observed_price=observed.observed_price,
            current_price=product.effective_price,
            notification_read=observed.notification_read,
            price_changed=not observed.notification_read and observed.observed_price != product.effective_price,
        )
        for observed, product, seller_username in rows
    ]
    await repos.observed.mark_read(user.id)
    return items


@router.post(
    "/{product_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Watch a Product",
    responses={404: {"description": "Product not found"}, 409: {"description": "Already watched"}},
)
async def observe_product(product_id: int, repos: ReposDep, user: CurrentUserDep) -> MessageResponse:
    product = await repos.products.get_by_id(product_id)
    if product is None:
        raise NotFound("Product not found.")
    if not await repos.observed.add(user.id, product_id, product.effective_price):
        raise Conflict("You are already watching this product.")
    return MessageResponse(message=f'You are now watching "{product.name}".')


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Stop Watching a Product",
)
async def unobserve_product(product_id: int, repos: ReposDep, user: CurrentUserDep) -> Response:
    await repos.observed.remove(user.id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
