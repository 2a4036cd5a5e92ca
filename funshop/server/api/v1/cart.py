"""
Cart Endpoints.

Work for guests (session cart) and signed-in users (persistent cart) alike.
"""

from fastapi import APIRouter, Request

from funshop.core.models.io.cart import CartView
from funshop.server.services.cart import CartService
from funshop.server.services.deps import OptionalUserDep, ReposDep

router = APIRouter(tags=["cart"])


@router.get("", response_model=CartView, summary="Get Cart")
async def get_cart(request: Request, repos: ReposDep, user: OptionalUserDep) -> CartView:
    return await CartService(repos, request.session, user).view()


@router.post(
    "/items/{product_id}",
    response_model=CartView,
    summary="Add to Cart",
    responses={
        400: {"description": "Product sold or not sold at a fixed price"},
        404: {"description": "Product not found"},
        409: {"description": "Product already in the cart"},
    },
)
async def add_to_cart(product_id: int, request: Request, repos: ReposDep, user: OptionalUserDep) -> CartView:
    return await CartService(repos, request.session, user).add(product_id)


@router.delete("/items/{product_id}", response_model=CartView, summary="Remove from Cart")
async def remove_from_cart(product_id: int, request: Request, repos: ReposDep, user: OptionalUserDep) -> CartView:
    return await CartService(repos, request.session, user).remove(product_id)
