"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to HTTP responses by the infrastructure layer and to
user-facing messages by the client's error classifier.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: band outside 1.0-9.0, empty headword, no examples.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Updating a record by an id that doesn't exist.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainError):
    """
    Raised when an entity would violate a uniqueness invariant.

    Example: Creating a second vocabulary record for the same word.
    """

    def __init__(self, entity_type: str, key: str, existing_id: object = None) -> None:
        message = f'{entity_type} "{key}" already exists'
        details: dict[str, object] = {"entity_type": entity_type, "key": key}
        if existing_id is not None:
            details["existing_id"] = str(existing_id)
        super().__init__(message, details)
        self.entity_type = entity_type
        self.key = key
        self.existing_id = existing_id


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: A non-admin token trying to create a record.
    """

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
