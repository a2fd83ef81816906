"""
Auth API schemas (request models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from users.schemas import EMAIL_PATTERN


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, pattern=EMAIL_PATTERN)


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., min_length=1)
    new_password: str = Field(..., alias="newPassword", min_length=1, max_length=72)
