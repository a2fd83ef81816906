"""
Feeding API schemas (request models).
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field


class FeedingCreate(BaseModel):
    pet_id: int = Field(..., gt=0)
    type: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=1000)
    quantity: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    date: dt.date


class FeedingUpdate(BaseModel):
    type: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1, max_length=1000)
    quantity: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    date: dt.date | None = None
