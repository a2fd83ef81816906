"""
User business logic.

Passwords are bcrypt-hashed before they reach the repository, and the hash is
never part of anything returned to a client.
"""

from __future__ import annotations

import logging

from fastapi.concurrency import run_in_threadpool

from auth import security
from core import records
from core.errors import NotFoundError, ValidationFailedError

from . import repository, schemas

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."


def to_public(user_row: dict) -> dict:
    return records.sanitize(user_row, drop=("password",))


async def hash_password(plain_password: str) -> str:
    try:
        return await run_in_threadpool(security.hash_password, plain_password)
    except (security.AuthSecurityError, ValueError) as exc:
        raise ValidationFailedError("Password is not valid.") from exc


async def get_user(user_id: int) -> dict:
    user_row = await repository.get_user(user_id)
    if user_row is None:
        raise NotFoundError(USER_NOT_FOUND)
    return to_public(user_row)


async def create_user(payload: schemas.UserCreate) -> dict:
    values = payload.model_dump()
    values["password"] = await hash_password(payload.password)

    user_row = await repository.create_user(values)
    logger.info("user_created user_id=%s", user_row["id"])
    return to_public(user_row)


async def update_user(user_id: int, payload: schemas.UserUpdate) -> dict:
    existing = await repository.get_user(user_id)
    if existing is None:
        raise NotFoundError(USER_NOT_FOUND)

    values = payload.model_dump(exclude_unset=True, exclude_none=True)
    password = values.pop("password", None)
    if password is not None and password.strip():
        values["password"] = await hash_password(password)

    user_row = await repository.update_user(user_id, values)
    if user_row is None:
        raise NotFoundError(USER_NOT_FOUND)
    logger.info("user_updated user_id=%s password_changed=%s", user_id, "password" in values)
    return to_public(user_row)


async def delete_user(user_id: int) -> str:
    deleted = await repository.delete_user(user_id)
    if not deleted:
        raise NotFoundError(USER_NOT_FOUND)
    logger.info("user_deleted user_id=%s", user_id)
    return "User deleted."
