"""Review Endpoints."""

from fastapi import APIRouter, status

from funshop.core.database.entities.reviews import Review
from funshop.core.errors import NotFound
from funshop.core.logging_config import get_logger
from funshop.core.models.io.reviews import ReviewCreate, ReviewRead
from funshop.server.services.deps import CurrentUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["reviews"])


@router.post(
    "",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Review a Product",
    responses={404: {"description": "Product not found"}},
)
async def create_review(data: ReviewCreate, repos: ReposDep, user: CurrentUserDep) -> ReviewRead:
    """
    Leave a review on a product.

    - **content**: Review text, required.
    - **rating**: Integer from 1 to 5.
    """
    product = await repos.products.get_by_id(data.product_id)
    if product is None:
        raise NotFound("Product not found.")
    review = await repos.reviews.create(
        Review(content=data.content, rating=data.rating, product_id=product.id, user_id=user.id)
    )
    logger.info(f"User {user.id} reviewed product {product.id}")
    return ReviewRead.model_validate(review).model_copy(
        update={"author_username": user.username, "product_name": product.name}
    )
