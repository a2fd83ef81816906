"""
Daily activity API endpoints.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Path, Query, status

from . import schemas, service

router = APIRouter()


@router.get("/daily_activity/pet/{pet_id}")
async def list_daily_activities_by_pet(pet_id: int = Path(..., gt=0)) -> dict:
    return await service.list_daily_activities(pet_id)


@router.get("/daily_activity/pet/date/{pet_id}")
async def list_daily_activities_by_pet_and_dates(
    pet_id: int = Path(..., gt=0),
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
) -> dict:
    return await service.list_daily_activities(pet_id, start_date=start_date, end_date=end_date)


@router.post("/daily_activity", status_code=status.HTTP_201_CREATED)
async def create_daily_activity(request: schemas.DailyActivityCreate) -> dict:
    return {"data": await service.create_daily_activity(request)}


@router.put("/daily_activity/{activity_id}")
async def update_daily_activity(
    request: schemas.DailyActivityUpdate,
    activity_id: int = Path(..., gt=0),
) -> dict:
    return {"data": await service.update_daily_activity(activity_id, request)}


@router.delete("/daily_activity/{activity_id}")
async def delete_daily_activity(activity_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.delete_daily_activity(activity_id)}
