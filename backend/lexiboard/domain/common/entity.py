"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class Lesson(Entity[LessonId]):
        id: LessonId
        title: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Identifiers are opaque strings assigned by the store. An empty string
    marks an entity that has not been persisted yet.

    Example:
        record_id = RecordId("3f2a9c")
        board_id = BoardId("3f2a9c")
        # Different types, so they cannot be mixed up
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"{self.__class__.__name__} must wrap a string")
        if self.value != self.value.strip():
            raise ValueError(f"{self.__class__.__name__} cannot contain surrounding whitespace")

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id. The store assigns the real one on insert."""
        return cls("")

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned an identity."""
        return bool(self.id)
