"""HTTP error mapping for the lexiboard API.

Every failure leaves the API as the same envelope:
`{"success": false, "error": ..., "type": ..., "field"?: ..., "details"?: ...}`.
"""

import logging
from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from lexiboard.domain.catalog.exceptions import ErrorType, error_type_of
from lexiboard.domain.common.exceptions import (
    DomainError,
    DuplicateEntityError,
    ValidationError,
)
from lexiboard.infrastructure.common.schemas.response_wrappers import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_TYPE: dict[ErrorType, int] = {
    ErrorType.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorType.JSON_PARSE_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorType.UNAUTHORIZED_ERROR: status.HTTP_401_UNAUTHORIZED,
    ErrorType.NOT_FOUND_ERROR: status.HTTP_404_NOT_FOUND,
    ErrorType.DUPLICATE_ERROR: status.HTTP_409_CONFLICT,
    ErrorType.API_FETCH_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorType.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_TYPE_BY_STATUS: dict[int, ErrorType] = {
    status.HTTP_400_BAD_REQUEST: ErrorType.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorType.UNAUTHORIZED_ERROR,
    status.HTTP_403_FORBIDDEN: ErrorType.UNAUTHORIZED_ERROR,
    status.HTTP_404_NOT_FOUND: ErrorType.NOT_FOUND_ERROR,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorType.VALIDATION_ERROR,
    status.HTTP_409_CONFLICT: ErrorType.DUPLICATE_ERROR,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorType.VALIDATION_ERROR,
    status.HTTP_502_BAD_GATEWAY: ErrorType.API_FETCH_ERROR,
}


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)

ForbiddenException = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Administrator access required",
)


def _envelope(
    status_code: int, body: ErrorResponse, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        headers=headers,
    )


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain failure with its taxonomy type."""
    if not isinstance(exc, DomainError):
        return await unhandled_exception_handler(request, exc)

    error_type = error_type_of(exc)
    details: dict[str, Any] = {
        key: value for key, value in exc.details.items() if key not in ("field", "existing_id")
    }
    body = ErrorResponse(
        error=exc.message,
        type=error_type,
        field=exc.field if isinstance(exc, ValidationError) else None,
        details=details or None,
        existing_id=(
            str(exc.existing_id)
            if isinstance(exc, DuplicateEntityError) and exc.existing_id is not None
            else None
        ),
    )
    status_code = STATUS_BY_ERROR_TYPE[error_type]
    logger.info(
        "Request failed path=%s status=%s type=%s error=%s",
        request.url.path,
        status_code,
        error_type.value,
        exc.message,
    )
    return _envelope(status_code, body)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPExceptions (auth, routing) in the shared envelope."""
    if not isinstance(exc, StarletteHTTPException):
        return await unhandled_exception_handler(request, exc)

    error_type = ERROR_TYPE_BY_STATUS.get(exc.status_code, ErrorType.DATABASE_ERROR)
    body = ErrorResponse(error=str(exc.detail), type=error_type)
    return _envelope(exc.status_code, body, headers=getattr(exc, "headers", None))


async def request_validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render request schema failures as VALIDATION_ERROR naming the first bad field."""
    if not isinstance(exc, RequestValidationError):
        return await unhandled_exception_handler(request, exc)

    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    body = ErrorResponse(
        error=first.get("msg", "Invalid request"),
        type=ErrorType.VALIDATION_ERROR,
        field=".".join(location) or None,
    )
    logger.warning("Request validation failed path=%s errors=%s", request.url.path, len(errors))
    return _envelope(status.HTTP_400_BAD_REQUEST, body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unexpected is reported as a DATABASE_ERROR."""
    logger.error(
        "Unhandled exception path=%s error_type=%s",
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    body = ErrorResponse(error="Internal server error", type=ErrorType.DATABASE_ERROR)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, body)
