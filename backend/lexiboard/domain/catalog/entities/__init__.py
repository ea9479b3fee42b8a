from .board import Board, BoardType
from .lesson import Lesson
from .record import (
    ExpressionType,
    LexicalRecord,
    Level,
    RecordDraft,
    RecordKind,
    WordType,
)

__all__ = [
    "Board",
    "BoardType",
    "ExpressionType",
    "Lesson",
    "Level",
    "LexicalRecord",
    "RecordDraft",
    "RecordKind",
    "WordType",
]
