"""
Application error type and the FastAPI handlers that render it.

Every failure a client can see is one of three kinds, each with a fixed
status code and the same JSON shape: `{"error": "<message>"}`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, details: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class ValidationFailedError(AppError):
    kind = ErrorKind.VALIDATION_FAILED


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        details.append(
            {
                "field": ".".join(loc),
                "message": str(err.get("msg") or "Invalid value."),
            }
        )
    return details


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("app_error path=%s message=%s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": INTERNAL_ERROR_MESSAGE})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationFailedError("Invalid request.", details=_field_errors(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.INTERNAL],
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
