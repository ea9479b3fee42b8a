"""
Domain common module.

Contains base classes for domain modeling:
- Entity: Objects with identity and lifecycle
- Domain exceptions shared by every module
"""

from .entity import Entity, EntityId
from .exceptions import (
    AuthorizationError,
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "AuthorizationError",
    "DomainError",
    "DuplicateEntityError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ValidationError",
]
