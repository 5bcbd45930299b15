"""Error Handlers — every failure leaves the API as {"error": {...}} JSON.

Invariants:
    - HerdbookError keeps its own status and to_response() body
    - Body/query validation failures are 400 VALIDATION_ERROR with one detail per field
    - Anything else is 500 INTERNAL_ERROR; the exception text stays in the logs

Design Decisions:
    - Handlers are plain module functions added with add_exception_handler, so
      tests can call them directly
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from herdbook.core.errors import ErrorSeverity, HerdbookError

logger = logging.getLogger(__name__)


def _error_body(
    code: str, message: str, category: str, severity: ErrorSeverity, **extra,
) -> dict:
    return {"error": {
        "code": code, "message": message, "category": category,
        "severity": severity.value, **extra,
    }}


def _field_details(exc: RequestValidationError) -> list[dict]:
    return jsonable_encoder([
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ])


async def handle_herdbook_error(request: Request, exc: HerdbookError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "resource": exc.context.resource,
            "record_id": exc.context.record_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = _field_details(exc)
    logger.warning(
        f"{request.method} {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", "Invalid request data", "validation",
            ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path}: unhandled {type(exc).__name__}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred", "internal",
            ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HerdbookError, handle_herdbook_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
