"""Common value objects shared across all domain modules."""

from .ids import BoardId, LessonId, RecordId

__all__ = [
    "BoardId",
    "LessonId",
    "RecordId",
]
