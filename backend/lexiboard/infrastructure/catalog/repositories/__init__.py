from .board_repository import BoardRepository
from .lesson_repository import LessonRepository
from .record_repository import RecordRepository

__all__ = ["BoardRepository", "LessonRepository", "RecordRepository"]
