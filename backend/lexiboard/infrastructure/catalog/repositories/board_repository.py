"""Repository for Board domain entity."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lexiboard.domain.catalog.entities.board import Board, BoardType
from lexiboard.domain.common.value_objects.ids import BoardId, RecordId
from lexiboard.infrastructure.catalog.mappers.board_mapper import BoardMapper
from lexiboard.models import Board as BoardORM
from lexiboard.models import BoardItem as BoardItemORM


class BoardRepository:
    """Domain-centric repository for Board persistence and membership."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BoardMapper()

    def _get_orm(self, board_id: BoardId) -> BoardORM | None:
        stmt = select(BoardORM).where(BoardORM.id == board_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_all(self, board_type: BoardType | None = None) -> list[Board]:
        """List boards ordered by `order`, then name."""
        stmt = select(BoardORM).order_by(BoardORM.order, BoardORM.name)
        if board_type is not None:
            stmt = stmt.where(BoardORM.type == board_type.value)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, board_id: BoardId) -> Board | None:
        """Find board by ID."""
        orm_model = self._get_orm(board_id)
        if not orm_model:
            return None
        return self.mapper.to_domain(orm_model)

    def save(self, board: Board) -> Board:
        """Persist board details. Membership is written by add_item/remove_item."""
        if not board.is_persisted:
            # Create new
            orm_model = self.mapper.to_orm(board)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        # Update existing
        existing_orm = self._get_orm(board.id)
        if existing_orm is None:
            raise ValueError(f"Board {board.id} is not in the store")
        self.mapper.to_orm(board, existing_orm)
        self.db.flush()
        return self.mapper.to_domain(existing_orm)

    def delete(self, board: Board) -> None:
        """
        Hard delete a board from the database.

        Lessons and membership links are deleted with it.
        """
        orm_model = self._get_orm(board.id)
        if orm_model is not None:
            self.db.delete(orm_model)
            self.db.flush()

    def _expire_membership(self, board_id: BoardId) -> None:
        # Links are written directly, so a loaded `items` collection is stale
        orm_model = self.db.get(BoardORM, board_id.value)
        if orm_model is not None:
            self.db.expire(orm_model, ["items"])

    # Membership methods

    def add_item(self, board_id: BoardId, record_id: RecordId) -> None:
        """Link a record to a board at the end of its membership order."""
        existing = self.db.get(BoardItemORM, (board_id.value, record_id.value))
        if existing is not None:
            return

        last_position = self.db.execute(
            select(func.max(BoardItemORM.position)).where(BoardItemORM.board_id == board_id.value)
        ).scalar_one()
        self.db.add(
            BoardItemORM(
                board_id=board_id.value,
                record_id=record_id.value,
                position=0 if last_position is None else last_position + 1,
            )
        )
        self.db.flush()
        self._expire_membership(board_id)

    def remove_item(self, board_id: BoardId, record_id: RecordId) -> None:
        """Unlink a record from a board."""
        existing = self.db.get(BoardItemORM, (board_id.value, record_id.value))
        if existing is not None:
            self.db.delete(existing)
            self.db.flush()
            self._expire_membership(board_id)

    def remove_record_from_all_boards(self, record_id: RecordId) -> int:
        """Unlink a record from every board and return how many links were removed."""
        stmt = select(BoardItemORM).where(BoardItemORM.record_id == record_id.value)
        links = list(self.db.execute(stmt).scalars().all())
        for link in links:
            self.db.delete(link)
        self.db.flush()
        for link in links:
            self._expire_membership(BoardId(link.board_id))
        return len(links)
