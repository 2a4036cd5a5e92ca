"""
Request Dependencies.

Annotated dependencies for API endpoints: the repository bundle bound to the
request's database session, the signed-in user resolved from the session
cookie, and the shared email service.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from funshop.core.database import get_session
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import NotAuthenticated, PermissionDenied
from funshop.server.core.config import settings

from .auth import logout_session, session_user_id
from .email import EmailService, get_email_service

SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_repositories(session: SessionDep) -> RepositoryBundle:
    return RepositoryBundle.from_session(session)


ReposDep = Annotated[RepositoryBundle, Depends(get_repositories)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]


async def get_optional_user(request: Request, repos: ReposDep) -> Optional[User]:
    """The signed-in user, or None for a guest.

    A session that points at a deleted account is logged out.
    """
    user_id = session_user_id(request.session)
    if user_id is None:
        return None
    user = await repos.users.get_by_id(user_id)
    if user is None:
        logout_session(request.session)
    return user


OptionalUserDep = Annotated[Optional[User], Depends(get_optional_user)]


async def get_current_user(user: OptionalUserDep) -> User:
    if user is None:
        raise NotAuthenticated("You must be logged in.")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


async def get_seller(user: CurrentUserDep, repos: ReposDep) -> User:
    """The signed-in user when they may sell.

    Administrators keep their account type when onboarding, so for them the
    seller profile is what grants access.
    """
    if user.is_seller:
        return user
    if user.is_admin and await repos.sellers.get_by_user_id(user.id) is not None:
        return user
    raise PermissionDenied("Only sellers can do this.")


SellerDep = Annotated[User, Depends(get_seller)]


async def get_admin(user: CurrentUserDep) -> User:
    if not user.is_admin:
        raise PermissionDenied("Administrator access required.")
    return user


AdminDep = Annotated[User, Depends(get_admin)]


def get_base_url(request: Request) -> str:
    """Public base URL for links in emails, falling back to the request's own base URL."""
    return (settings.public_base_url or str(request.base_url)).rstrip("/")


BaseUrlDep = Annotated[str, Depends(get_base_url)]
