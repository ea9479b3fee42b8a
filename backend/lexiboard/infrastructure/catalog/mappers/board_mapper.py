"""Mapper for Board ORM ↔ Domain conversion."""

from lexiboard.domain.catalog.entities.board import Board, BoardType
from lexiboard.domain.common.value_objects.ids import BoardId, RecordId
from lexiboard.models import Board as BoardORM


class BoardMapper:
    """Mapper for Board ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BoardORM) -> Board:
        """Convert ORM model to domain entity."""
        return Board.create_with_id(
            id=BoardId(orm_model.id),
            name=orm_model.name,
            type=BoardType(orm_model.type),
            order=orm_model.order,
            description=orm_model.description,
            color=orm_model.color,
            icon=orm_model.icon,
            item_ids=[RecordId(item.record_id) for item in orm_model.items],
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Board, orm_model: BoardORM | None = None) -> BoardORM:
        """Convert domain entity to ORM model. Membership is not copied."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.type = domain_entity.type.value
            orm_model.order = domain_entity.order
            orm_model.description = domain_entity.description
            orm_model.color = domain_entity.color
            orm_model.icon = domain_entity.icon
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        orm_model = BoardORM(
            name=domain_entity.name,
            type=domain_entity.type.value,
            order=domain_entity.order,
            description=domain_entity.description,
            color=domain_entity.color,
            icon=domain_entity.icon,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
        if domain_entity.id:
            orm_model.id = domain_entity.id.value
        return orm_model
