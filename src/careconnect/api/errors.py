"""Exception handlers translating domain errors into JSON responses."""

from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from careconnect.domain.errors import (
    AuthError,
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = structlog.get_logger()

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: 400,
    AuthError: 401,
    NotFoundError: 404,
    ConflictError: 409,
    StorageError: 500,
}


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return status_code
    return 400


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on a FastAPI app.

    Every error body has a human-readable ``detail`` and a stable ``code``.
    """

    @app.exception_handler(DomainError)
    async def _domain_error_handler(request: Request, exc: DomainError) -> Response:
        status_code = status_for(exc)
        detail = str(exc)
        if isinstance(exc, StorageError):
            # Storage messages can carry SQL; keep them in the logs only
            logger.error("request_failed", path=request.url.path, error=detail)
            detail = "Storage failure"
        return JSONResponse(status_code=status_code, content={"detail": detail, "code": exc.code})

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> Response:
        payload: dict[str, Any] = {
            "detail": exc.detail,
            "code": f"http.{exc.status_code}",
        }
        headers = dict(exc.headers or {})
        return JSONResponse(status_code=int(exc.status_code), content=payload, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        payload: dict[str, Any] = {
            "detail": jsonable_errors(exc),
            "code": ValidationError.code,
        }
        return JSONResponse(status_code=422, content=payload)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal Server Error", "code": "internal.unhandled"},
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic error entries to JSON-safe location/message pairs."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
