"""Repository for Lesson domain entity."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lexiboard.domain.catalog.entities.lesson import Lesson
from lexiboard.domain.common.value_objects.ids import BoardId, LessonId
from lexiboard.infrastructure.catalog.mappers.lesson_mapper import LessonMapper
from lexiboard.models import Lesson as LessonORM


class LessonRepository:
    """Domain-centric repository for Lesson persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LessonMapper()

    def _get_orm(self, lesson_id: LessonId) -> LessonORM | None:
        stmt = select(LessonORM).where(LessonORM.id == lesson_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_board(self, board_id: BoardId) -> list[Lesson]:
        """List a board's lessons ordered by `order`, then creation time."""
        stmt = (
            select(LessonORM)
            .where(LessonORM.board_id == board_id.value)
            .order_by(LessonORM.order, LessonORM.created_at)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """Find lesson by ID."""
        orm_model = self._get_orm(lesson_id)
        if not orm_model:
            return None
        return self.mapper.to_domain(orm_model)

    def count_by_board(self, board_id: BoardId) -> int:
        """Count a board's lessons."""
        stmt = select(func.count(LessonORM.id)).where(LessonORM.board_id == board_id.value)
        return self.db.execute(stmt).scalar_one()

    def save(self, lesson: Lesson) -> Lesson:
        """Persist lesson to database."""
        if not lesson.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(lesson)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        # Update existing
        existing_orm = self._get_orm(lesson.id)
        if existing_orm is None:
            raise ValueError(f"Lesson {lesson.id} is not in the store")
        self.mapper.to_orm(lesson, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)

    def delete(self, lesson: Lesson) -> None:
        """Hard delete a lesson from the database."""
        orm_model = self._get_orm(lesson.id)
        if orm_model is not None:
            self.db.delete(orm_model)
            self.db.flush()
