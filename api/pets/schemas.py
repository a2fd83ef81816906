"""
Pet API schemas (request models).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class PetCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    breed: str = Field(..., min_length=1, max_length=255)
    gender: str = Field(..., min_length=1, max_length=50)
    weight: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    birthday: date
    photo: str = Field(..., min_length=1)


class PetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    breed: str | None = Field(default=None, min_length=1, max_length=255)
    gender: str | None = Field(default=None, min_length=1, max_length=50)
    weight: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    birthday: date | None = None
    photo: str | None = Field(default=None, min_length=1)
