"""
Custom exception handlers for FastAPI.

Domain errors map to fixed statuses by type. Request IDs are logged
server-side for tracing but not exposed to clients, and 500 responses
carry a generic message only. HTTPException is Starlette's base class so
routing 404s and 405s get the same body as errors raised in endpoints.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
import structlog

from core.errors import (
    DomainError,
    NotFoundError,
    OptimisticLockError,
    UniquenessConflictError,
    ValidationError,
)
from core.logging import get_logger

logger = get_logger("backend.errors")

# Checked in order; the first matching base class wins.
DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (OptimisticLockError, status.HTTP_412_PRECONDITION_FAILED),
    (UniquenessConflictError, status.HTTP_409_CONFLICT),
]


def _get_request_id() -> str:
    """Get the current request ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(detail: str, status_code: int, code: str | None = None) -> dict:
    payload = {
        "detail": detail,
        "status_code": status_code,
    }
    if code:
        payload["code"] = code
    return payload


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error; unmapped ones are server errors."""
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code = status_for(exc)
        request_id = _get_request_id()

        if status_code >= 500:
            logger.error(
                "domain_error",
                error=exc.message,
                code=exc.code,
                details=exc.details,
                request_id=request_id,
                exc_info=exc,
            )
            return JSONResponse(
                status_code=status_code,
                content=_response_payload("Internal server error", status_code),
            )

        logger.warning(
            "domain_error",
            error=exc.message,
            code=exc.code,
            status_code=status_code,
            request_id=request_id,
        )
        return JSONResponse(
            status_code=status_code,
            content=_response_payload(exc.message, status_code, exc.code),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "request_validation_error",
            errors=exc.errors(),
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422, "REQUEST_VALIDATION_ERROR"),
                "errors": jsonable_errors(exc),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Full details stay server-side
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_response_payload("Internal server error", 500),
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Pydantic error entries reduced to JSON-safe fields."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
