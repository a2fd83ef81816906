"""
Daily activity business logic.
"""

from __future__ import annotations

from datetime import date

from pets import care_records

from . import repository, schemas

KIND = care_records.CareRecordKind(
    table=repository.DAILY_ACTIVITIES,
    label="Daily activity",
    plural="daily activities",
)


async def list_daily_activities(
    pet_id: int,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> dict:
    return await care_records.list_for_pet(KIND, pet_id, start_date=start_date, end_date=end_date)


async def create_daily_activity(payload: schemas.DailyActivityCreate) -> dict:
    return await care_records.create(KIND, payload.model_dump())


async def update_daily_activity(activity_id: int, payload: schemas.DailyActivityUpdate) -> dict:
    return await care_records.update(KIND, activity_id, payload.model_dump(exclude_unset=True, exclude_none=True))


async def delete_daily_activity(activity_id: int) -> str:
    return await care_records.delete(KIND, activity_id)
