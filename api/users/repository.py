"""
User persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import records

USERS = records.Table(
    name="users",
    columns=("name", "surname", "email", "phone", "password", "birthday"),
)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _normalized(values: dict[str, Any]) -> dict[str, Any]:
    if "email" in values:
        values = {**values, "email": normalize_email(values["email"])}
    return values


async def create_user(values: dict[str, Any]) -> dict:
    return await records.insert(USERS, _normalized(values))


async def get_user(user_id: int) -> dict | None:
    return await records.get(USERS, user_id)


async def get_user_by_email(email: str) -> dict | None:
    return await records.find_one(USERS, "email", normalize_email(email))


async def update_user(user_id: int, values: dict[str, Any]) -> dict | None:
    return await records.update(USERS, user_id, _normalized(values))


async def set_password(user_id: int, password_hash: str) -> dict | None:
    return await records.update(USERS, user_id, {"password": password_hash})


async def delete_user(user_id: int) -> bool:
    # Pets (and their records) go with the user through ON DELETE CASCADE.
    return await records.delete(USERS, user_id)
