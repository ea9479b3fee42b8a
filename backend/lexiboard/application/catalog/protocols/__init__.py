from .board_repository import BoardRepositoryProtocol
from .dictionary_fetch import DictionaryFetchPort
from .lesson_repository import LessonRepositoryProtocol
from .record_repository import RecordFilters, RecordRepositoryProtocol

__all__ = [
    "BoardRepositoryProtocol",
    "DictionaryFetchPort",
    "LessonRepositoryProtocol",
    "RecordFilters",
    "RecordRepositoryProtocol",
]
