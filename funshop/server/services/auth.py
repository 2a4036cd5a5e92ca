"""
Authentication Service.

Password hashing with bcrypt, credential checks, registration, password
reset and the session helpers that remember who is signed in. The session
only ever stores the user's ID.
"""

from __future__ import annotations

import secrets
from datetime import timedelta
from typing import Any, MutableMapping, Optional

import bcrypt
from sqlalchemy.exc import IntegrityError

from funshop.core.database.base import utc_now
from funshop.core.database.entities.users import AccountInfo, User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import Conflict, NotAuthenticated, ValidationFailed
from funshop.core.logging_config import get_logger
from funshop.core.models.domain.enums import AccountType
from funshop.core.models.io.users import RegisterRequest
from funshop.server.core.config import settings

from .email import EmailService

logger = get_logger(__name__)

SESSION_USER_KEY = "user_id"
INVALID_CREDENTIALS = "Invalid email or password."


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash; malformed hashes never match."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


async def authenticate(repos: RepositoryBundle, email: str, password: str) -> User:
    """Return the user owning ``email`` when ``password`` matches.

    Raises:
        NotAuthenticated: For an unknown email and a wrong password alike
    """
    user = await repos.users.get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info(f"Failed login attempt for {email}")
        raise NotAuthenticated(INVALID_CREDENTIALS)
    return user


async def register_user(repos: RepositoryBundle, data: RegisterRequest) -> User:
    """Create a customer account and its empty profile.

    Raises:
        Conflict: When the email or the username is already taken
    """
    if await repos.users.get_by_email(data.email) is not None:
        raise Conflict("An account with this email already exists.")
    if await repos.users.get_by_username(data.username) is not None:
        raise Conflict("This username is already taken.")

    user = User(
        username=data.username,
        first_name=data.first_name,
        last_name=data.last_name,
        birth_date=data.birth_date,
        email=data.email,
        password_hash=hash_password(data.password),
        account_type=AccountType.customer.value,
    )
    try:
        await repos.users.create(user, commit=False)
        await repos.account_infos.create(AccountInfo(user_id=user.id, description=""), commit=False)
        await repos.session.commit()
    except IntegrityError as e:
        await repos.session.rollback()
        raise Conflict("An account with this email or username already exists.") from e
    await repos.session.refresh(user)
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def login_session(http_session: MutableMapping[str, Any], user: User) -> None:
    http_session[SESSION_USER_KEY] = user.id


def logout_session(http_session: MutableMapping[str, Any]) -> None:
    http_session.pop(SESSION_USER_KEY, None)


def session_user_id(http_session: MutableMapping[str, Any]) -> Optional[int]:
    value = http_session.get(SESSION_USER_KEY)
    return value if isinstance(value, int) else None


async def request_password_reset(
    repos: RepositoryBundle, email: str, base_url: str, email_service: EmailService
) -> None:
    """Issue a reset token and email the link, when ``email`` belongs to an account.

    Unknown emails are ignored silently so that callers cannot probe which
    addresses are registered. Delivery failures are logged.
    """
    user = await repos.users.get_by_email(email)
    if user is None:
        logger.info("Password reset requested for an unknown email")
        return
    token = secrets.token_urlsafe(32)
    expires = utc_now() + timedelta(minutes=settings.password_reset_ttl_minutes)
    await repos.users.set_reset_token(user.id, token, expires)
    reset_link = f"{base_url.rstrip('/')}/reset-password/{token}"
    try:
        await email_service.send_password_reset(user.email, reset_link)
    except Exception as e:
        logger.error(f"Password reset email for user {user.id} failed: {e}")


async def reset_password(repos: RepositoryBundle, token: str, new_password: str) -> User:
    """Replace the password of the user owning an unexpired reset token.

    Raises:
        ValidationFailed: When the token is unknown or expired
    """
    user = await repos.users.get_by_reset_token(token, utc_now())
    if user is None:
        raise ValidationFailed("The password reset link is invalid or has expired.")
    await repos.users.update_password(user.id, hash_password(new_password), commit=False)
    await repos.users.clear_reset_token(user.id, commit=False)
    await repos.session.commit()
    logger.info(f"Password reset for user {user.id}")
    return user
