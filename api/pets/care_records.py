"""
Shared business logic for records a pet owns (feedings, medical history,
daily activities).

All three follow one contract:
- listing looks the pet up first, so "unknown pet" and "pet without records"
  are reported with different messages (both 404);
- the pet snapshot is returned next to the records;
- update merges only the supplied fields;
- every not-found path raises before touching storage again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from core import records
from core.errors import NotFoundError

from . import repository as pet_repository
from .service import PET_NOT_FOUND

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CareRecordKind:
    table: records.Table
    label: str
    plural: str

    @property
    def not_found(self) -> str:
        return f"{self.label} not found."


async def list_for_pet(
    kind: CareRecordKind,
    pet_id: int,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> dict[str, Any]:
    filtered = start_date is not None and end_date is not None
    pet_row = await pet_repository.get_pet(pet_id)
    if pet_row is None:
        raise NotFoundError(PET_NOT_FOUND)

    rows = await records.list_by_parent(kind.table, pet_id, start_date=start_date, end_date=end_date)
    if not rows:
        message = f"No {kind.plural} found for this pet"
        if filtered:
            message += " in the selected date range"
        raise NotFoundError(message + ".")

    return {
        "pet": records.sanitize(pet_row),
        "data": [records.sanitize(row) for row in rows],
    }


async def create(kind: CareRecordKind, values: dict[str, Any]) -> dict[str, Any]:
    row = await records.insert(kind.table, values)
    logger.info("care_record_created table=%s id=%s pet_id=%s", kind.table.name, row["id"], row["pet_id"])
    return records.sanitize(row)


async def update(kind: CareRecordKind, record_id: int, values: dict[str, Any]) -> dict[str, Any]:
    if await records.get(kind.table, record_id) is None:
        raise NotFoundError(kind.not_found)

    row = await records.update(kind.table, record_id, values)
    if row is None:
        raise NotFoundError(kind.not_found)
    return records.sanitize(row)


async def delete(kind: CareRecordKind, record_id: int) -> str:
    if not await records.delete(kind.table, record_id):
        raise NotFoundError(kind.not_found)
    logger.info("care_record_deleted table=%s id=%s", kind.table.name, record_id)
    return f"{kind.label} deleted."
