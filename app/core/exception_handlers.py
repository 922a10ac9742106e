"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, store and
framework exceptions to JSON responses. Every body has an ``error`` message;
diagnostic detail (SQL errors, stack traces) is logged, not returned.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import PermitAdminException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "AUTHENTICATION_ERROR": 401,
    "AUTHORIZATION_ERROR": 403,
    "VALIDATION_ERROR": 400,
    "SERVICE_UNAVAILABLE": 503,
}


def _permit_admin_exception_handler(
    request: Request, exc: PermitAdminException
) -> JSONResponse:
    """Return JSON from PermitAdminException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, status, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return JSONResponse(status_code=status, content=exc.to_dict(), headers=headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail), "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


def _store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Return 500 for entity store failures; the SQL error is only logged."""
    logger.error(
        "Entity store error on %s %s: %s", request.method, request.url.path, exc
    )
    settings = get_settings()
    message = str(exc) if settings.debug else "Entity store error"
    return JSONResponse(
        status_code=500,
        content={"error": message, "code": "STORE_ERROR"},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": detail, "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: PermitAdminException (and subclasses), RequestValidationError,
    StarletteHTTPException, SQLAlchemyError, generic Exception.
    """
    app.add_exception_handler(PermitAdminException, _permit_admin_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _store_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
