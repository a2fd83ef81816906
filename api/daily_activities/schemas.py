"""
Daily activity API schemas (request models).
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field


class DailyActivityCreate(BaseModel):
    pet_id: int = Field(..., gt=0)
    type: str = Field(..., min_length=1, max_length=255)
    # Minutes.
    duration: int = Field(..., gt=0)
    notes: str = Field(..., min_length=1, max_length=1000)
    date: dt.date


class DailyActivityUpdate(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=255)
    duration: int | None = Field(default=None, gt=0)
    notes: str | None = Field(default=None, min_length=1, max_length=1000)
    date: dt.date | None = None
