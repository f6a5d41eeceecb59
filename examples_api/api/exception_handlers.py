"""Translation of domain failures and exceptions into HTTP error responses.

This is the only place where wire-shaped errors are built. Domain failures
arrive as values from the routers; exception handlers cover request-shape
errors, storage errors that escaped an adapter, and everything unexpected.
"""

import logging
from collections.abc import Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from examples_api.errors import (
    BAD_REQUEST,
    DUPLICATED_KEY,
    INTERNAL_ERROR,
    OUTDATED_VERSION,
    Failure,
    FailureCategory,
    ValidationError,
)
from examples_api.schemas.error import Error, ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY: dict[FailureCategory, int] = {
    FailureCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureCategory.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    FailureCategory.UNPROCESSABLE: 422,
    FailureCategory.CONFLICT: status.HTTP_409_CONFLICT,
    FailureCategory.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    FailureCategory.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_error_response(errors: Iterable[ValidationError]) -> ErrorResponse:
    """Map domain errors to the wire format, keeping their order."""
    return ErrorResponse(
        errors=[
            Error(code=e.code, message=e.message, attributes=dict(e.attributes))
            for e in errors
        ]
    )


def _error_response(status_code: int, errors: Iterable[ValidationError]) -> JSONResponse:
    body = to_error_response(errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def failure_response(failure: Failure) -> JSONResponse:
    """Return the HTTP response for a failure produced by a use case."""
    errors = failure.to_errors()
    logger.warning(
        "Request failed with %s: %s",
        failure.category.value,
        ", ".join(e.code for e in errors),
    )
    return _error_response(STATUS_BY_CATEGORY[failure.category], errors)


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query")]
    return ".".join(parts)


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        ValidationError.common(
            BAD_REQUEST,
            {
                "field": _field_name(err.get("loc", ())),
                "value": None if err.get("type") == "missing" else err.get("input"),
                "reason": err.get("msg"),
            },
        )
        for err in exc.errors()
    ]
    logger.warning("Malformed request: %s", [e.attributes["field"] for e in errors])
    return _error_response(status.HTTP_400_BAD_REQUEST, errors)


def integrity_error_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Unique constraint violated: %s", exc.orig)
    return _error_response(
        status.HTTP_409_CONFLICT, [ValidationError.common(DUPLICATED_KEY)]
    )


def stale_data_error_handler(_request: Request, exc: StaleDataError) -> JSONResponse:
    logger.warning("Optimistic lock failed: %s", exc)
    return _error_response(
        status.HTTP_409_CONFLICT, [ValidationError.common(OUTDATED_VERSION)]
    )


def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log everything, expose nothing but the generic message."""
    logger.error(
        "An unexpected error occurred on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, [ValidationError.common(INTERNAL_ERROR)]
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register boundary exception handlers on the FastAPI app."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StaleDataError, stale_data_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
