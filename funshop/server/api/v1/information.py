"""Static shop information endpoint."""

from fastapi import APIRouter

from funshop.core.models.io.common import ShopInformation
from funshop.server.core import constant
from funshop.server.core.config import settings

router = APIRouter(tags=["information"])


@router.get("", response_model=ShopInformation, summary="Shop Information")
async def information() -> ShopInformation:
    return ShopInformation(
        name=constant.PROJECT_NAME,
        description=constant.SHOP_DESCRIPTION,
        contact_email=settings.admin.email,
        sections=list(constant.INFORMATION_SECTIONS),
    )
