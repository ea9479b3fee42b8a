"""Catalog module domain exceptions and the shared error taxonomy."""

from enum import StrEnum

from lexiboard.domain.common.exceptions import (
    AuthorizationError,
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)


class ErrorType(StrEnum):
    """Fixed failure taxonomy carried in the `type` field of error envelopes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ERROR = "DUPLICATE_ERROR"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
    UNAUTHORIZED_ERROR = "UNAUTHORIZED_ERROR"
    API_FETCH_ERROR = "API_FETCH_ERROR"
    JSON_PARSE_ERROR = "JSON_PARSE_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class JsonParseError(DomainError):
    """Raised when a JSON import text is not syntactically valid JSON."""

    def __init__(self, parser_message: str) -> None:
        super().__init__("Invalid JSON format", {"parser_message": parser_message})
        self.parser_message = parser_message


class DictionaryLookupError(DomainError):
    """Raised when the dictionary service cannot produce an entry for a word."""

    def __init__(self, word: str, reason: str) -> None:
        super().__init__(reason, {"word": word})
        self.word = word
        self.reason = reason


class RecordNotFoundError(EntityNotFoundError):
    """Raised when a lexical record cannot be found."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(kind.capitalize(), record_id)
        self.kind = kind


class DuplicateRecordError(DuplicateEntityError):
    """Raised when a (headword, kind) pair is already taken."""

    def __init__(self, kind: str, headword: str, existing_id: object = None) -> None:
        super().__init__(kind.capitalize(), headword, existing_id)
        self.kind = kind


class BoardNotFoundError(EntityNotFoundError):
    """Raised when a board cannot be found."""

    def __init__(self, board_id: object) -> None:
        super().__init__("Board", board_id)


class LessonNotFoundError(EntityNotFoundError):
    """Raised when a lesson cannot be found."""

    def __init__(self, lesson_id: object) -> None:
        super().__init__("Lesson", lesson_id)


def error_type_of(error: BaseException) -> ErrorType:
    """
    Map an exception onto the error taxonomy.

    Anything that is not a recognised domain failure is a DATABASE_ERROR, so
    callers always get a renderable category.
    """
    if isinstance(error, ValidationError):
        return ErrorType.VALIDATION_ERROR
    if isinstance(error, DuplicateEntityError):
        return ErrorType.DUPLICATE_ERROR
    if isinstance(error, EntityNotFoundError):
        return ErrorType.NOT_FOUND_ERROR
    if isinstance(error, AuthorizationError):
        return ErrorType.UNAUTHORIZED_ERROR
    if isinstance(error, DictionaryLookupError):
        return ErrorType.API_FETCH_ERROR
    if isinstance(error, JsonParseError):
        return ErrorType.JSON_PARSE_ERROR
    return ErrorType.DATABASE_ERROR
