from .board_mapper import BoardMapper
from .lesson_mapper import LessonMapper
from .record_mapper import RecordMapper

__all__ = ["BoardMapper", "LessonMapper", "RecordMapper"]
