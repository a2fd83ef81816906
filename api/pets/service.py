"""
Pet business logic.

A pet returned as its own resource (create, update, list by owner) leaves out
`user_id`; `get_pet` keeps it so a client can navigate back to the owner.
"""

from __future__ import annotations

import logging

from core import records
from core.errors import NotFoundError
from users import repository as user_repository
from users import service as user_service

from . import repository, schemas

logger = logging.getLogger(__name__)

PET_NOT_FOUND = "Pet not found."
NO_PETS_FOR_USER = "No pets found for this user."


def to_public(pet_row: dict) -> dict:
    return records.sanitize(pet_row, drop=("user_id",))


async def _pets_of(user_id: int) -> list[dict]:
    if await user_repository.get_user(user_id) is None:
        raise NotFoundError(user_service.USER_NOT_FOUND)
    rows = await repository.list_pets_by_user(user_id)
    if not rows:
        raise NotFoundError(NO_PETS_FOR_USER)
    return rows


async def list_pets_by_user(user_id: int) -> list[dict]:
    return [to_public(row) for row in await _pets_of(user_id)]


async def list_pet_names_by_user(user_id: int) -> list[dict]:
    return [{"id": row["id"], "name": row["name"]} for row in await _pets_of(user_id)]


async def get_pet(pet_id: int) -> dict:
    pet_row = await repository.get_pet(pet_id)
    if pet_row is None:
        raise NotFoundError(PET_NOT_FOUND)
    return records.sanitize(pet_row)


async def create_pet(payload: schemas.PetCreate) -> dict:
    pet_row = await repository.create_pet(payload.model_dump())
    logger.info("pet_created pet_id=%s user_id=%s", pet_row["id"], pet_row["user_id"])
    return to_public(pet_row)


async def update_pet(pet_id: int, payload: schemas.PetUpdate) -> dict:
    if await repository.get_pet(pet_id) is None:
        raise NotFoundError(PET_NOT_FOUND)

    pet_row = await repository.update_pet(pet_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if pet_row is None:
        raise NotFoundError(PET_NOT_FOUND)
    return to_public(pet_row)


async def delete_pet(pet_id: int) -> str:
    if not await repository.delete_pet(pet_id):
        raise NotFoundError(PET_NOT_FOUND)
    logger.info("pet_deleted pet_id=%s", pet_id)
    return "Pet deleted."
