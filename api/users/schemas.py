"""
User API schemas (request models).
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    surname: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    phone: str = Field(..., min_length=1, max_length=50)
    birthday: date
    password: str = Field(..., min_length=1, max_length=72)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    surname: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, min_length=1, max_length=50)
    birthday: date | None = None
    # Blank or whitespace-only keeps the current password.
    password: str | None = Field(default=None, max_length=72)
