"""Protocol for Lesson repository in catalog context."""

from typing import Protocol

from lexiboard.domain.catalog.entities.lesson import Lesson
from lexiboard.domain.common.value_objects.ids import BoardId, LessonId


class LessonRepositoryProtocol(Protocol):
    """Protocol for Lesson repository operations."""

    def find_by_board(self, board_id: BoardId) -> list[Lesson]:
        """List a board's lessons ordered by `order`."""
        ...

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """Find a lesson by id."""
        ...

    def count_by_board(self, board_id: BoardId) -> int:
        """Count a board's lessons."""
        ...

    def save(self, lesson: Lesson) -> Lesson:
        """Insert a new lesson or update an existing one."""
        ...

    def delete(self, lesson: Lesson) -> None:
        """Delete a lesson."""
        ...
