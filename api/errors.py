"""
Exception handlers.

Maps each domain error family to an HTTP status so routers can let service
errors propagate instead of wrapping every call in try/except.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    SalesError,
    SalesValidationError,
    VehicleInventoryError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (SalesValidationError, 400, "Invalid request"),
    (NotFoundError, 404, "Not found"),
    (ConflictError, 409, "Conflict"),
    (VehicleInventoryError, 502, "Vehicle inventory service unavailable"),
    (PersistenceError, 500, "Sale storage failure"),
)


def _status_for(exc: SalesError) -> tuple[int, str]:
    for error_type, status_code, title in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code, title
    return 500, "Internal error"


async def sales_error_handler(request: Request, exc: SalesError) -> JSONResponse:
    status_code, title = _status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": title, "detail": str(exc), "status_code": status_code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SalesError, sales_error_handler)


__all__ = ["register_exception_handlers"]
