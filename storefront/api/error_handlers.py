"""Error Handlers — map exceptions onto the storefront's JSON error envelope.

Invariants:
    - StorefrontError → its own to_response() at its own http_status
    - Every 400 validation failure (path id, missing email, request body) carries
      error.details[] naming the offending field
    - Anything else → 500 with a generic message; the traceback only reaches the log

Design Decisions:
    - Handlers are plain module functions registered with add_exception_handler,
      so each can be exercised without building an app
    - Log level follows the status: 4xx at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.errors import (
    ErrorCategory, ErrorSeverity, StorefrontError, validation_response,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, handle_storefront_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_storefront_error(request: Request, exc: StorefrontError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request data on {request.url.path}: {[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=validation_response("Invalid request data", details),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_BODY,
    )
