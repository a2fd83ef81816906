"""
Medical history business logic.
"""

from __future__ import annotations

from datetime import date

from pets import care_records

from . import repository, schemas

KIND = care_records.CareRecordKind(
    table=repository.MEDICAL_HISTORIES,
    label="Medical history",
    plural="medical history records",
)


async def list_medical_history(
    pet_id: int,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> dict:
    return await care_records.list_for_pet(KIND, pet_id, start_date=start_date, end_date=end_date)


async def create_medical_history(payload: schemas.MedicalHistoryCreate) -> dict:
    return await care_records.create(KIND, payload.model_dump())


async def update_medical_history(record_id: int, payload: schemas.MedicalHistoryUpdate) -> dict:
    return await care_records.update(KIND, record_id, payload.model_dump(exclude_unset=True, exclude_none=True))


async def delete_medical_history(record_id: int) -> str:
    return await care_records.delete(KIND, record_id)
