"""Public member profile endpoint."""

from fastapi import APIRouter

from funshop.core.errors import NotFound
from funshop.core.models.io.users import AccountInfoRead, MemberProfile, PublicUserRead
from funshop.server.services.deps import ReposDep
from funshop.server.services.products import to_product_read

router = APIRouter(tags=["members"])


@router.get(
    "/{user_id}",
    response_model=MemberProfile,
    summary="Member Profile",
    description="Public profile of a member with the products they have listed.",
    responses={404: {"description": "User not found"}},
)
async def get_member(user_id: int, repos: ReposDep) -> MemberProfile:
    member = await repos.users.get_by_id(user_id)
    if member is None:
        raise NotFound("User not found.")
    info = await repos.account_infos.get_by_user_id(member.id)
    products = await repos.products.list_by_user(member.id)
    return MemberProfile(
        user=PublicUserRead.model_validate(member),
        account_info=AccountInfoRead.model_validate(info) if info else AccountInfoRead(),
        products=[to_product_read(product, member.username) for product in products],
    )
