"""
Seller Endpoints.

Seller onboarding and the reviews a seller has received.
"""

from fastapi import APIRouter, status

from funshop.core.errors import NotFound
from funshop.core.models.io.reviews import ReviewRead, SellerReviews
from funshop.core.models.io.sellers import SellerCreate, SellerRead
from funshop.server.services.deps import CurrentUserDep, ReposDep
from funshop.server.services.sellers import become_seller

router = APIRouter(tags=["sellers"])


@router.post(
    "",
    response_model=SellerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Become a Seller",
    description="Register the signed-in user as a seller with their business details.",
    responses={409: {"description": "Already a seller or VAT number taken"}},
)
async def create_seller(data: SellerCreate, repos: ReposDep, user: CurrentUserDep) -> SellerRead:
    seller = await become_seller(repos, user, data)
    return SellerRead.model_validate(seller)


@router.get(
    "/{user_id}/reviews",
    response_model=SellerReviews,
    summary="Seller Reviews",
    description="Reviews left on the products of a seller, newest first.",
    responses={404: {"description": "User not found"}},
)
async def seller_reviews(user_id: int, repos: ReposDep) -> SellerReviews:
    seller = await repos.users.get_by_id(user_id)
    if seller is None:
        raise NotFound("Seller not found.")
    rows = await repos.reviews.list_for_seller(user_id)
    reviews = [
        ReviewRead.model_validate(review).model_copy(update={"author_username": author, "product_name": name})
        for review, author, name in rows
    ]
    average = round(sum(r.rating for r in reviews) / len(reviews), 2) if reviews else None
    return SellerReviews(
        seller_id=seller.id,
        seller_username=seller.username,
        average_rating=average,
        reviews=reviews,
    )
