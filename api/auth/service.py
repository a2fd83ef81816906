"""
Auth business logic: credential check and the password-reset flow.

Neither `authenticate` nor `prepare_password_reset` reveals whether an email
is registered. A failed login is a normal response with
`authenticated: false`, and the forgot-password reply is the same text
whether or not a reset email goes out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlencode

from fastapi.concurrency import run_in_threadpool

from core import config
from core.errors import NotFoundError, ValidationFailedError
from users import repository as user_repository
from users import service as user_service

from . import schemas, security

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Invalid email or password."
LOGIN_OK_MESSAGE = "User authenticated successfully."
FORGOT_PASSWORD_MESSAGE = "If this email is registered, a reset link has been sent."
INVALID_TOKEN_MESSAGE = "Invalid or expired token."
PASSWORD_RESET_MESSAGE = "Password updated successfully."


@dataclass(frozen=True)
class ResetDispatch:
    email: str
    reset_url: str
    expire_minutes: int


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against when the email is unknown so both failure paths cost the same.
    return security.hash_password("not-a-real-password")


def reset_url(token: str) -> str:
    return f"{config.frontend_url()}/reset-password?{urlencode({'token': token})}"


async def authenticate(payload: schemas.LoginRequest) -> dict:
    user_row = await user_repository.get_user_by_email(payload.email)
    if user_row is not None:
        password_hash = str(user_row.get("password") or "")
    else:
        password_hash = await run_in_threadpool(_dummy_hash)

    is_valid = await run_in_threadpool(security.verify_password, payload.password, password_hash)
    if user_row is None or not is_valid:
        return {"authenticated": False, "message": LOGIN_FAILED_MESSAGE}

    logger.info("user_authenticated user_id=%s", user_row["id"])
    return {
        "authenticated": True,
        "message": LOGIN_OK_MESSAGE,
        "data": user_service.to_public(user_row),
    }


async def prepare_password_reset(email: str) -> ResetDispatch | None:
    """
    Build the reset link for a registered email. Returns None for unknown emails;
    callers must answer the same way in both cases.
    """
    user_row = await user_repository.get_user_by_email(email)
    if user_row is None:
        logger.info("password_reset_requested known=false")
        return None

    token = security.build_reset_token(user_id=int(user_row["id"]))
    logger.info("password_reset_requested known=true user_id=%s", user_row["id"])
    return ResetDispatch(
        email=str(user_row["email"]),
        reset_url=reset_url(token),
        expire_minutes=security.reset_token_expire_minutes(),
    )


async def reset_password(payload: schemas.ResetPasswordRequest) -> dict:
    try:
        user_id = security.reset_token_user_id(payload.token)
    except security.AuthSecurityError as exc:
        raise ValidationFailedError(INVALID_TOKEN_MESSAGE) from exc

    if not payload.new_password.strip():
        raise ValidationFailedError("New password must not be blank.")

    user_row = await user_repository.get_user(user_id)
    if user_row is None:
        raise NotFoundError(user_service.USER_NOT_FOUND)

    password_hash = await user_service.hash_password(payload.new_password)
    updated = await user_repository.set_password(user_id, password_hash)
    if updated is None:
        raise NotFoundError(user_service.USER_NOT_FOUND)

    logger.info("password_reset_completed user_id=%s", user_id)
    return {"message": PASSWORD_RESET_MESSAGE}
