from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from lockerdesk.core.errors import (
    ConflictError,
    ConstraintViolationError,
    ForbiddenError,
    InternalError,
    InvalidStateError,
    LockerDeskError,
    NotFoundError,
    UnsupportedActionError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[LockerDeskError], int] = {
    NotFoundError: 404,
    ForbiddenError: 403,
    InvalidStateError: 403,
    ConflictError: 409,
    UnsupportedActionError: 400,
    ConstraintViolationError: 422,
    InternalError: 500,
}


def status_for(exc: LockerDeskError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return 400


def _error_body(message: str, error_code: str) -> dict[str, str]:
    return {"detail": message, "error_code": error_code}


async def lockerdesk_error_handler(request: Request, exc: LockerDeskError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=_error_body(exc.message, exc.error_code))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    # store-level unique constraint lost a race against the core's own check
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=409,
        content=_error_body("Database constraint violation", ConflictError.error_code),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_body("Something went wrong. Please try again.", InternalError.error_code),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LockerDeskError, lockerdesk_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
