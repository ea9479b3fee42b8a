"""Mapper for Lesson ORM ↔ Domain conversion."""

from lexiboard.domain.catalog.entities.lesson import Lesson
from lexiboard.domain.common.value_objects.ids import BoardId, LessonId
from lexiboard.models import Lesson as LessonORM


class LessonMapper:
    """Mapper for Lesson ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonORM) -> Lesson:
        """Convert ORM model to domain entity."""
        return Lesson.create_with_id(
            id=LessonId(orm_model.id),
            board_id=BoardId(orm_model.board_id),
            title=orm_model.title,
            order=orm_model.order,
            description=orm_model.description,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Lesson, orm_model: LessonORM | None = None) -> LessonORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.order = domain_entity.order
            orm_model.description = domain_entity.description
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        orm_model = LessonORM(
            board_id=domain_entity.board_id.value,
            title=domain_entity.title,
            order=domain_entity.order,
            description=domain_entity.description,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
        if domain_entity.id:
            orm_model.id = domain_entity.id.value
        return orm_model
