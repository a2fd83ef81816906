"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, status

from . import schemas, service

router = APIRouter()


@router.get("/user/data/{user_id}")
async def get_user_data(user_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.get_user(user_id)}


@router.post("/user", status_code=status.HTTP_201_CREATED)
async def create_user(request: schemas.UserCreate) -> dict:
    return {"data": await service.create_user(request)}


@router.put("/user/{user_id}")
async def update_user(request: schemas.UserUpdate, user_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.update_user(user_id, request)}


@router.delete("/user/{user_id}")
async def delete_user(user_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.delete_user(user_id)}
