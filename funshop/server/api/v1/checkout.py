"""
Checkout Endpoints.

Signed-in buyers pick a saved address and card or enter new ones, which are
saved. Guests fill in every field and nothing but the orders is stored.
"""

from fastapi import APIRouter, BackgroundTasks, Request, status

from funshop.core.models.io.checkout import CheckoutRequest, CheckoutView, OrderSummary
from funshop.server.services.checkout import CheckoutService
from funshop.server.services.deps import BaseUrlDep, EmailServiceDep, OptionalUserDep, ReposDep

router = APIRouter(tags=["checkout"])


@router.get(
    "",
    response_model=CheckoutView,
    summary="Checkout Page",
    description="The cart plus, for signed-in users, their saved addresses and masked cards.",
    responses={400: {"description": "Empty cart"}},
)
async def checkout_page(
    request: Request, repos: ReposDep, user: OptionalUserDep, email_service: EmailServiceDep
) -> CheckoutView:
    return await CheckoutService(repos, request.session, user, email_service).prepare()


@router.post(
    "",
    response_model=OrderSummary,
    status_code=status.HTTP_201_CREATED,
    summary="Place Order",
    description="Buy every available item of the cart in one transaction and email a confirmation.",
    responses={400: {"description": "Empty cart, missing details or an item was sold meanwhile"}},
)
async def place_order(
    data: CheckoutRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    repos: ReposDep,
    user: OptionalUserDep,
    email_service: EmailServiceDep,
    base_url: BaseUrlDep,
) -> OrderSummary:
    """
    Place an order.

    - **address_selection**: `new` or a saved address ID (signed-in users).
    - **payment_method**: `new` or a saved card ID (signed-in users).
    - Guests provide **first_name**, **last_name**, **email**, the address and the card.
    """
    service = CheckoutService(repos, request.session, user, email_service)
    return await service.place_order(data, base_url, background_tasks)
