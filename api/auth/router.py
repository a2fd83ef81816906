"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks

from core import mailer

from . import schemas, service

router = APIRouter()


@router.post("/user/auth")
async def authenticate(request: schemas.LoginRequest) -> dict:
    return await service.authenticate(request)


@router.post("/forgot-password")
async def forgot_password(
    request: schemas.ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
) -> dict:
    dispatch = await service.prepare_password_reset(request.email)

    # Send after the response so registered and unknown emails answer alike.
    if dispatch is not None:
        background_tasks.add_task(
            mailer.send_reset_email,
            dispatch.email,
            dispatch.reset_url,
            expire_minutes=dispatch.expire_minutes,
        )
    return {"message": service.FORGOT_PASSWORD_MESSAGE}


@router.post("/reset-password")
async def reset_password(request: schemas.ResetPasswordRequest) -> dict:
    return await service.reset_password(request)
