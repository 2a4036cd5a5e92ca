"""Search endpoint for products and users."""

from fastapi import APIRouter, Query

from funshop.core.models.io.search import SearchResults, UserSearchResult
from funshop.server.services.deps import ReposDep
from funshop.server.services.products import to_product_read

router = APIRouter(tags=["search"])


@router.get(
    "",
    response_model=SearchResults,
    summary="Search",
    description="Case-insensitive search of available products by name and of users by username.",
)
async def search(repos: ReposDep, q: str = Query(default="", max_length=100)) -> SearchResults:
    query = q.strip()
    if not query:
        return SearchResults(query=query, products=[], users=[])
    products = await repos.search.search_products(query)
    users = await repos.search.search_users(query)
    return SearchResults(
        query=query,
        products=[to_product_read(product, username) for product, username in products],
        users=[
            UserSearchResult(
                id=user.id,
                username=user.username,
                account_type=user.account_type,
                profile_image=profile_image,
            )
            for user, profile_image in users
        ],
    )
