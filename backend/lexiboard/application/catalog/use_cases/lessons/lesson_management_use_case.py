"""Use case for lesson CRUD operations."""

import structlog

from lexiboard.application.catalog.protocols.board_repository import BoardRepositoryProtocol
from lexiboard.application.catalog.protocols.lesson_repository import LessonRepositoryProtocol
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.lesson import Lesson
from lexiboard.domain.catalog.exceptions import BoardNotFoundError, LessonNotFoundError
from lexiboard.domain.common.value_objects.ids import BoardId, LessonId

logger = structlog.get_logger(__name__)


class LessonManagementUseCase:
    """Use case for the lessons of a board."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        board_repository: BoardRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            lesson_repository: Lesson repository protocol implementation
            board_repository: Board repository, used to check the owning board
            uow: Unit of work wrapping writes
        """
        self.lesson_repository = lesson_repository
        self.board_repository = board_repository
        self.uow = uow

    def _require_board(self, board_id: str) -> BoardId:
        board_id_vo = BoardId(board_id)
        if self.board_repository.find_by_id(board_id_vo) is None:
            raise BoardNotFoundError(board_id)
        return board_id_vo

    def list_lessons(self, board_id: str) -> list[Lesson]:
        """
        List a board's lessons ordered by `order`.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        return self.lesson_repository.find_by_board(self._require_board(board_id))

    def get_lesson(self, lesson_id: str) -> Lesson:
        """
        Get a lesson by id.

        Raises:
            LessonNotFoundError: If the lesson does not exist
        """
        lesson = self.lesson_repository.find_by_id(LessonId(lesson_id))
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    def create_lesson(
        self,
        board_id: str,
        title: str,
        description: str | None = None,
        order: int | None = None,
    ) -> Lesson:
        """
        Create a lesson at the end of its board.

        Without an explicit order the lesson's order is the board's current
        lesson count.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        with self.uow:
            board_id_vo = self._require_board(board_id)
            if order is None:
                order = self.lesson_repository.count_by_board(board_id_vo)
            lesson = Lesson.create(
                board_id=board_id_vo, title=title, order=order, description=description
            )
            lesson = self.lesson_repository.save(lesson)
            self.uow.commit()

        logger.info("lesson_created", lesson_id=lesson.id.value, board_id=board_id, order=order)
        return lesson

    def update_lesson(
        self,
        lesson_id: str,
        title: str | None = None,
        description: str | None = None,
        order: int | None = None,
    ) -> Lesson:
        """
        Update the given fields of a lesson.

        Raises:
            LessonNotFoundError: If the lesson does not exist
        """
        with self.uow:
            lesson = self.get_lesson(lesson_id)
            lesson.update_details(title=title, order=order, description=description)
            lesson = self.lesson_repository.save(lesson)
            self.uow.commit()

        logger.info("lesson_updated", lesson_id=lesson_id)
        return lesson

    def delete_lesson(self, lesson_id: str) -> None:
        """
        Delete a lesson.

        Raises:
            LessonNotFoundError: If the lesson does not exist
        """
        with self.uow:
            lesson = self.get_lesson(lesson_id)
            self.lesson_repository.delete(lesson)
            self.uow.commit()

        logger.info("lesson_deleted", lesson_id=lesson_id, board_id=lesson.board_id.value)
