"""
Feeding API endpoints.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Path, Query, status

from . import schemas, service

router = APIRouter()


@router.get("/feeding/pet/{pet_id}")
async def list_feedings_by_pet(pet_id: int = Path(..., gt=0)) -> dict:
    return await service.list_feedings(pet_id)


@router.get("/feeding/pet/date/{pet_id}")
async def list_feedings_by_pet_and_dates(
    pet_id: int = Path(..., gt=0),
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
) -> dict:
    """
    Feedings with `date` between startDate and endDate, both inclusive.
    """
    return await service.list_feedings(pet_id, start_date=start_date, end_date=end_date)


@router.post("/feeding", status_code=status.HTTP_201_CREATED)
async def create_feeding(request: schemas.FeedingCreate) -> dict:
    return {"data": await service.create_feeding(request)}


@router.put("/feeding/{feeding_id}")
async def update_feeding(request: schemas.FeedingUpdate, feeding_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.update_feeding(feeding_id, request)}


@router.delete("/feeding/{feeding_id}")
async def delete_feeding(feeding_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.delete_feeding(feeding_id)}
