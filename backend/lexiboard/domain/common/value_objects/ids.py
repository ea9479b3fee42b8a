from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class RecordId(EntityId):
    """Strongly-typed lexical record identifier."""

    value: str


@dataclass(frozen=True)
class BoardId(EntityId):
    """Strongly-typed board identifier."""

    value: str


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    value: str
