"""
Feeding business logic.
"""

from __future__ import annotations

from datetime import date

from pets import care_records

from . import repository, schemas

KIND = care_records.CareRecordKind(table=repository.FEEDINGS, label="Feeding", plural="feedings")


async def list_feedings(pet_id: int, *, start_date: date | None = None, end_date: date | None = None) -> dict:
    return await care_records.list_for_pet(KIND, pet_id, start_date=start_date, end_date=end_date)


async def create_feeding(payload: schemas.FeedingCreate) -> dict:
    return await care_records.create(KIND, payload.model_dump())


async def update_feeding(feeding_id: int, payload: schemas.FeedingUpdate) -> dict:
    return await care_records.update(KIND, feeding_id, payload.model_dump(exclude_unset=True, exclude_none=True))


async def delete_feeding(feeding_id: int) -> str:
    return await care_records.delete(KIND, feeding_id)
