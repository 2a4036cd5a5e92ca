"""Order summary endpoint shown once after checkout."""

from fastapi import APIRouter, Request

from funshop.core.errors import NotFound
from funshop.core.models.io.checkout import OrderSummary
from funshop.server.services.checkout import pop_latest_order
from funshop.server.services.deps import ReposDep

router = APIRouter(tags=["orders"])


@router.get(
    "/summary",
    response_model=OrderSummary,
    summary="Latest Order Summary",
    description="Summary of the order just placed. It is removed from the session once read.",
    responses={404: {"description": "No order to show"}},
)
async def latest_order_summary(request: Request, repos: ReposDep) -> OrderSummary:
    summary = await pop_latest_order(repos, request.session)
    if summary is None:
        raise NotFound("There is no order summary to show.")
    return summary
