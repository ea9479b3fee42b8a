"""Client-side failure taxonomy and user-facing messages.

Every failure a catalog operation can produce, whether raised locally by the
normalizer and validator or returned by the gateway as an error envelope,
ends up as one `ClassifiedError` with a type from the shared taxonomy.
Anything unrecognised is a DATABASE_ERROR so there is always a message to
show.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from lexiboard.domain.catalog.exceptions import ErrorType, error_type_of
from lexiboard.domain.common.exceptions import DomainError, DuplicateEntityError
from lexiboard.domain.common.exceptions import ValidationError as DomainValidationError

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for failures reported by the catalog gateway."""

    error_type: ErrorType = ErrorType.DATABASE_ERROR

    def __init__(
        self,
        message: str,
        field: str | None = None,
        status_code: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.status_code = status_code
        self.details = dict(details or {})


class ValidationError(CatalogError):
    error_type = ErrorType.VALIDATION_ERROR


class DuplicateError(CatalogError):
    error_type = ErrorType.DUPLICATE_ERROR

    @property
    def existing_id(self) -> str | None:
        value = self.details.get("existingId")
        return str(value) if value is not None else None


class NotFoundError(CatalogError):
    error_type = ErrorType.NOT_FOUND_ERROR


class UnauthorizedError(CatalogError):
    error_type = ErrorType.UNAUTHORIZED_ERROR


class ApiFetchError(CatalogError):
    error_type = ErrorType.API_FETCH_ERROR


class JsonParseError(CatalogError):
    error_type = ErrorType.JSON_PARSE_ERROR


class DatabaseError(CatalogError):
    error_type = ErrorType.DATABASE_ERROR


ERROR_CLASSES: dict[ErrorType, type[CatalogError]] = {
    cls.error_type: cls
    for cls in (
        ValidationError,
        DuplicateError,
        NotFoundError,
        UnauthorizedError,
        ApiFetchError,
        JsonParseError,
        DatabaseError,
    )
}

# Used when an error body carries no recognisable `type`
ERROR_TYPE_BY_STATUS: dict[int, ErrorType] = {
    400: ErrorType.VALIDATION_ERROR,
    401: ErrorType.UNAUTHORIZED_ERROR,
    403: ErrorType.UNAUTHORIZED_ERROR,
    404: ErrorType.NOT_FOUND_ERROR,
    409: ErrorType.DUPLICATE_ERROR,
    422: ErrorType.VALIDATION_ERROR,
    502: ErrorType.API_FETCH_ERROR,
}

PERMISSION_STATUS_CODES = frozenset({401, 403})


def _parse_error_type(value: object) -> ErrorType | None:
    try:
        return ErrorType(str(value))
    except ValueError:
        return None


def error_from_body(status_code: int, body: object) -> CatalogError:
    """Build the exception for a gateway error envelope."""
    message = f"Request failed with status {status_code}"
    error_type: ErrorType | None = None
    field = None
    details: dict[str, Any] = {}

    if isinstance(body, Mapping):
        message = str(body.get("error") or body.get("detail") or message)
        error_type = _parse_error_type(body.get("type"))
        field = body.get("field")
        if isinstance(body.get("details"), Mapping):
            details.update(body["details"])
        if body.get("existingId") is not None:
            details["existingId"] = body["existingId"]

    if error_type is None:
        error_type = ERROR_TYPE_BY_STATUS.get(status_code, ErrorType.DATABASE_ERROR)
    cls = ERROR_CLASSES[error_type]
    return cls(message, field=field, status_code=status_code, details=details)


def error_from_response(response: httpx.Response) -> CatalogError:
    """Build the exception for a non-2xx response (or a `success: false` body)."""
    try:
        body = response.json()
    except ValueError:
        body = None
    return error_from_body(response.status_code, body)


@dataclass(frozen=True)
class ClassifiedError:
    """A failure reduced to its taxonomy type and raw message."""

    type: ErrorType
    message: str
    field: str | None = None
    status_code: int | None = None

    @property
    def is_permission_error(self) -> bool:
        """Whether the failure should open the sign-in-as-admin dialog."""
        return self.status_code in PERMISSION_STATUS_CODES


MESSAGE_PREFIXES: dict[str, dict[ErrorType, str]] = {
    "en": {
        ErrorType.VALIDATION_ERROR: "Validation error",
        ErrorType.DUPLICATE_ERROR: "Already exists",
        ErrorType.NOT_FOUND_ERROR: "Not found",
        ErrorType.UNAUTHORIZED_ERROR: "Access denied",
        ErrorType.API_FETCH_ERROR: "Dictionary connection error",
        ErrorType.JSON_PARSE_ERROR: "Invalid JSON",
        ErrorType.DATABASE_ERROR: "Database error",
    },
    "vi": {
        ErrorType.VALIDATION_ERROR: "Lỗi xác thực",
        ErrorType.DUPLICATE_ERROR: "Dữ liệu đã tồn tại",
        ErrorType.NOT_FOUND_ERROR: "Không tìm thấy",
        ErrorType.UNAUTHORIZED_ERROR: "Không có quyền truy cập",
        ErrorType.API_FETCH_ERROR: "Lỗi kết nối API",
        ErrorType.JSON_PARSE_ERROR: "Lỗi định dạng JSON",
        ErrorType.DATABASE_ERROR: "Lỗi cơ sở dữ liệu",
    },
}

FALLBACK_MESSAGES: dict[str, str] = {
    "en": "Something went wrong",
    "vi": "Có lỗi xảy ra",
}

PERMISSION_MESSAGES: dict[str, str] = {
    "en": "You need to sign in with an admin account to do this",
    "vi": "Bạn cần đăng nhập với tài khoản admin để thực hiện thao tác này",
}

SUPPORTED_LOCALES = tuple(MESSAGE_PREFIXES)


class ErrorClassifier:
    """Maps exceptions onto the taxonomy and renders localized messages."""

    def __init__(self, locale: str = "en") -> None:
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale: {locale}")
        self.locale = locale

    def classify(self, error: BaseException) -> ClassifiedError:
        """Reduce any exception to a ClassifiedError."""
        if isinstance(error, CatalogError):
            return ClassifiedError(
                type=error.error_type,
                message=error.message,
                field=error.field,
                status_code=error.status_code,
            )
        if isinstance(error, DomainError):
            field = error.field if isinstance(error, DomainValidationError) else None
            return ClassifiedError(type=error_type_of(error), message=error.message, field=field)
        if isinstance(error, httpx.HTTPError):
            logger.warning(f"Catalog request failed: {error!r}")
            return ClassifiedError(type=ErrorType.DATABASE_ERROR, message=str(error))

        logger.error(f"Unclassified error: {error!r}")
        return ClassifiedError(type=ErrorType.DATABASE_ERROR, message=str(error))

    def localize(self, classified: ClassifiedError, locale: str | None = None) -> str:
        """Render a classified error as the text shown next to the form."""
        locale = locale or self.locale
        if not classified.message:
            return FALLBACK_MESSAGES[locale]
        prefix = MESSAGE_PREFIXES[locale][classified.type]
        return f"{prefix}: {classified.message}"

    def message_for(self, error: BaseException, locale: str | None = None) -> str:
        """Classify and localize in one step."""
        return self.localize(self.classify(error), locale)

    def permission_message(self, locale: str | None = None) -> str:
        """Text of the dialog shown when a write needs an admin session."""
        return PERMISSION_MESSAGES[locale or self.locale]


def as_catalog_error(
    error: BaseException, classifier: ErrorClassifier | None = None
) -> CatalogError:
    """Return the error as a CatalogError, converting it when needed."""
    if isinstance(error, CatalogError):
        return error
    classified = (classifier or ErrorClassifier()).classify(error)
    details: dict[str, Any] = {}
    if isinstance(error, DuplicateEntityError) and error.existing_id is not None:
        details["existingId"] = str(error.existing_id)
    cls = ERROR_CLASSES[classified.type]
    return cls(classified.message, field=classified.field, details=details)
