"""
Medical history API endpoints.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Path, Query, status

from . import schemas, service

router = APIRouter()


@router.get("/medical_history/pet/{pet_id}")
async def list_medical_history_by_pet(pet_id: int = Path(..., gt=0)) -> dict:
    return await service.list_medical_history(pet_id)


@router.get("/medical_history/pet/date/{pet_id}")
async def list_medical_history_by_pet_and_dates(
    pet_id: int = Path(..., gt=0),
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
) -> dict:
    return await service.list_medical_history(pet_id, start_date=start_date, end_date=end_date)


@router.post("/medical_history", status_code=status.HTTP_201_CREATED)
async def create_medical_history(request: schemas.MedicalHistoryCreate) -> dict:
    return {"data": await service.create_medical_history(request)}


@router.put("/medical_history/{record_id}")
async def update_medical_history(
    request: schemas.MedicalHistoryUpdate,
    record_id: int = Path(..., gt=0),
) -> dict:
    return {"data": await service.update_medical_history(record_id, request)}


@router.delete("/medical_history/{record_id}")
async def delete_medical_history(record_id: int = Path(..., gt=0)) -> dict:
    return {"data": await service.delete_medical_history(record_id)}
