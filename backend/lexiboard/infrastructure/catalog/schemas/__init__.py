from .board_schemas import (
    BoardCreateRequest,
    BoardItemRequest,
    BoardResponse,
    BoardUpdateRequest,
)
from .lesson_schemas import LessonCreateRequest, LessonResponse, LessonUpdateRequest
from .record_schemas import FetchWordRequest, RecordWriteRequest

__all__ = [
    "BoardCreateRequest",
    "BoardItemRequest",
    "BoardResponse",
    "BoardUpdateRequest",
    "FetchWordRequest",
    "LessonCreateRequest",
    "LessonResponse",
    "LessonUpdateRequest",
    "RecordWriteRequest",
]
