"""Error Handlers — every failure leaves the API in one JSON envelope.

Invariants:
    - Body shape is always {"error": {code, message, category, severity, ...}}
    - RecipeCatalogError → its own http_status; 5xx logged at ERROR, 4xx at WARNING
    - RequestValidationError → 400 VALIDATION_ERROR with per-field details
    - Anything else → 500 INTERNAL_ERROR, exception text logged but never returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from recipe_catalog.core.errors import (
    ErrorCategory, ErrorSeverity, RecipeCatalogError,
)

logger = logging.getLogger(__name__)


def _envelope(
    http_status: int,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> JSONResponse:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        **extra,
    }
    return JSONResponse(status_code=http_status, content={"error": body})


def register_error_handlers(app: FastAPI) -> None:
    """Register the catalog, validation and catch-all handlers on app."""

    @app.exception_handler(RecipeCatalogError)
    async def catalog_error_handler(request: Request, exc: RecipeCatalogError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logger.warning(
            f"Rejected request to {request.url.path}: {len(details)} invalid field(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return _envelope(
            status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR",
            "Invalid request data", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, details=details,
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
            "An unexpected error occurred", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
        )
