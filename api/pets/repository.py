"""
Pet persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import records

PETS = records.Table(
    name="pets",
    columns=("user_id", "name", "breed", "gender", "weight", "birthday", "photo"),
    parent_column="user_id",
)


async def list_pets_by_user(user_id: int) -> list[dict]:
    return await records.list_by_parent(PETS, user_id)


async def get_pet(pet_id: int) -> dict | None:
    return await records.get(PETS, pet_id)


async def create_pet(values: dict[str, Any]) -> dict:
    return await records.insert(PETS, values)


async def update_pet(pet_id: int, values: dict[str, Any]) -> dict | None:
    return await records.update(PETS, pet_id, values)


async def delete_pet(pet_id: int) -> bool:
    return await records.delete(PETS, pet_id)
