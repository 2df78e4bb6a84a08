"""Error handlers for the FastAPI application.

Every error leaves the API in one shape:
`{"error": {"message", "status_code", "details"}}`.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List, Optional

from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")


def create_error_response(message: str, status_code: int = 500, details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """Build the standard error body.

    Args:
        message: Human-readable error message.
        status_code: HTTP status code.
        details: Optional structured details (missing fields, config key, ...).

    Returns:
        JSONResponse carrying the error envelope.
    """
    body: Dict[str, Any] = {"message": message, "status_code": status_code}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Engine errors: missing request fields, catalog reads, bad configuration."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})


def _field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed payloads rejected by pydantic (wrong enum value, out-of-range day count)."""
    errors = _field_errors(exc)
    logger.warning("Request validation failed on %s %s: %s", request.method, request.url.path, errors)
    return create_error_response(
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"validation_errors": errors},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Catalog database error on %s %s", request.method, request.url.path, exc_info=exc)
    # no driver internals in the response
    return create_error_response(
        "A database error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "database_error"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return create_error_response(
        "An internal server error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "internal_error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
    logger.debug("Exception handlers registered")
