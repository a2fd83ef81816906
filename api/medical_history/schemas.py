"""
Medical history API schemas (request models).
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class MedicalHistoryCreate(BaseModel):
    pet_id: int = Field(..., gt=0)
    type: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=1000)
    date: dt.date


class MedicalHistoryUpdate(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1, max_length=1000)
    date: dt.date | None = None
