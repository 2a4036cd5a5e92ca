"""
Authentication Endpoints.

Registration, login and logout through the signed session cookie, and the
password reset flow. Logging in or registering moves the guest cart into
the account's cart.
"""

from fastapi import APIRouter, Request, status

from funshop.core.logging_config import get_logger
from funshop.core.models.io.common import MessageResponse
from funshop.core.models.io.users import (
    AuthStatus,
    LoginRequest,
    PasswordForgotRequest,
    PasswordResetRequest,
    RegisterRequest,
    UserRead,
)
from funshop.server.services import auth as auth_service
from funshop.server.services.cart import merge_guest_cart
from funshop.server.services.deps import BaseUrlDep, EmailServiceDep, OptionalUserDep, ReposDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.get(
    "/status",
    response_model=AuthStatus,
    summary="Authentication Status",
    description="Tell whether the current session is signed in, and as whom.",
)
async def auth_status(user: OptionalUserDep) -> AuthStatus:
    if user is None:
        return AuthStatus(is_authenticated=False)
    return AuthStatus(is_authenticated=True, user=UserRead.model_validate(user))


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a customer account, sign it in and move the guest cart into it.",
    responses={
        201: {"description": "Account created and signed in"},
        409: {"description": "Email or username already taken"},
    },
)
async def register(data: RegisterRequest, request: Request, repos: ReposDep) -> UserRead:
    """
    Register a new account.

    - **username**: At least 3 characters, unique.
    - **first_name** / **last_name**: Required.
    - **email**: Valid and unique email address.
    - **password**: At least 8 characters.
    """
    user = await auth_service.register_user(repos, data)
    auth_service.login_session(request.session, user)
    await merge_guest_cart(repos, user.id, request.session)
    return UserRead.model_validate(user)


@router.post(
    "/login",
    response_model=UserRead,
    summary="Log In",
    description="Sign in with email and password and move the guest cart into the account.",
    responses={401: {"description": "Invalid email or password"}},
)
async def login(data: LoginRequest, request: Request, repos: ReposDep) -> UserRead:
    user = await auth_service.authenticate(repos, data.email, data.password)
    auth_service.login_session(request.session, user)
    await merge_guest_cart(repos, user.id, request.session)
    logger.info(f"User {user.id} logged in")
    return UserRead.model_validate(user)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log Out",
)
async def logout(request: Request) -> MessageResponse:
    auth_service.logout_session(request.session)
    return MessageResponse(message="You have been logged out.")


@router.post(
    "/password/forgot",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request Password Reset",
    description=(
        "Email a password reset link when the address belongs to an account. "
        "The answer is the same whether or not the address is registered."
    ),
)
async def forgot_password(
    data: PasswordForgotRequest,
    repos: ReposDep,
    base_url: BaseUrlDep,
    email_service: EmailServiceDep,
) -> MessageResponse:
    await auth_service.request_password_reset(repos, data.email, base_url, email_service)
    return MessageResponse(message="If an account exists for this email, a reset link has been sent.")


@router.post(
    "/password/reset",
    response_model=MessageResponse,
    summary="Reset Password",
    responses={400: {"description": "Invalid or expired token"}},
)
async def reset_password(data: PasswordResetRequest, repos: ReposDep) -> MessageResponse:
    await auth_service.reset_password(repos, data.token, data.password)
    return MessageResponse(message="Your password has been updated. You can now log in.")
