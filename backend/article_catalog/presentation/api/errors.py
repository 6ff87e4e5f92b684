"""Exception handlers — render every error as a JSON ErrorResponse body."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from article_catalog.application.schemas import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header"})
_UNPROCESSABLE = 422


def _trace_id(request: Request) -> str:
    """Use the caller's X-Request-ID when present so logs can be correlated."""
    return request.headers.get("X-Request-ID") or uuid.uuid4().hex


def _exposes_internals(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return settings is not None and settings.app_env == "development"


def _field_name(loc: tuple | list) -> str:
    parts = [str(p) for p in loc if p not in _LOCATION_PREFIXES]
    return ".".join(parts) or "body"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ErrorResponse(
        message=str(exc.detail),
        status_code=exc.status_code,
        trace_id=_trace_id(request),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ())), []).append(error.get("msg", ""))

    logger.info("Rejected request to %s: %s", request.url.path, errors)
    body = ValidationErrorResponse(
        status_code=_UNPROCESSABLE,
        trace_id=_trace_id(request),
        errors=errors,
    )
    return JSONResponse(
        status_code=_UNPROCESSABLE,
        content=body.model_dump(by_alias=True),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    trace_id = _trace_id(request)
    logger.exception("Unhandled error on %s %s (trace %s)", request.method, request.url.path, trace_id)
    body = ErrorResponse(
        message="An internal server error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        trace_id=trace_id,
        detail=str(exc) if _exposes_internals(request) else None,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(by_alias=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
