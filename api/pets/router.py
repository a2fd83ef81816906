"""
Pet API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get("/pet/user/{user_id}")
async def list_pets_by_user(user_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.list_pets_by_user(user_id)}


@router.get("/pet/name/user/{user_id}")
async def list_pet_names_by_user(user_id: int = Path(..., gt=0)) -> dict:
    """
    Lightweight variant for pickers: only `id` and `name` of each pet.
    """
    return {"data": await service.list_pet_names_by_user(user_id)}


@router.get("/pet/{pet_id}")
async def get_pet(pet_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.get_pet(pet_id)}


@router.post("/pet", status_code=status.HTTP_201_CREATED)
async def create_pet(request: schemas.PetCreate) -> dict:
    return {"data": await service.create_pet(request)}


@router.put("/pet/{pet_id}")
async def update_pet(request: schemas.PetUpdate, pet_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.update_pet(pet_id, request)}


@router.delete("/pet/{pet_id}")
async def delete_pet(pet_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.delete_pet(pet_id)}
