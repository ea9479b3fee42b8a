"""Use case for board CRUD operations."""

import structlog

from lexiboard.application.catalog.protocols.board_repository import BoardRepositoryProtocol
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.board import Board, BoardType
from lexiboard.domain.catalog.exceptions import BoardNotFoundError
from lexiboard.domain.common.value_objects.ids import BoardId

logger = structlog.get_logger(__name__)


class BoardManagementUseCase:
    """Use case for listing, creating, editing and deleting boards."""

    def __init__(self, board_repository: BoardRepositoryProtocol, uow: UnitOfWork) -> None:
        """
        Initialize use case with dependencies.

        Args:
            board_repository: Board repository protocol implementation
            uow: Unit of work wrapping writes
        """
        self.board_repository = board_repository
        self.uow = uow

    def list_boards(self, board_type: BoardType | None = None) -> list[Board]:
        """List boards in display order, optionally of one type."""
        return self.board_repository.find_all(board_type)

    def get_board(self, board_id: str) -> Board:
        """
        Get a board by id.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        board = self.board_repository.find_by_id(BoardId(board_id))
        if board is None:
            raise BoardNotFoundError(board_id)
        return board

    def create_board(
        self,
        name: str,
        board_type: BoardType,
        order: int | None = None,
        description: str | None = None,
        color: str | None = None,
        icon: str | None = None,
    ) -> Board:
        """
        Create a board.

        Without an explicit order the board goes after the existing boards of
        its type.
        """
        with self.uow:
            if order is None:
                order = len(self.board_repository.find_all(board_type))
            board = Board.create(
                name=name,
                type=board_type,
                order=order,
                description=description,
                color=color,
                icon=icon,
            )
            board = self.board_repository.save(board)
            self.uow.commit()

        logger.info("board_created", board_id=board.id.value, type=board.type.value)
        return board

    def update_board(
        self,
        board_id: str,
        name: str | None = None,
        order: int | None = None,
        description: str | None = None,
        color: str | None = None,
        icon: str | None = None,
    ) -> Board:
        """
        Update the given fields of a board.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        with self.uow:
            board = self.get_board(board_id)
            board.update_details(
                name=name, order=order, description=description, color=color, icon=icon
            )
            board = self.board_repository.save(board)
            self.uow.commit()

        logger.info("board_updated", board_id=board_id)
        return board

    def delete_board(self, board_id: str) -> None:
        """
        Delete a board with its lessons and membership links.

        Records on the board are not deleted.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        with self.uow:
            board = self.get_board(board_id)
            self.board_repository.delete(board)
            self.uow.commit()

        logger.info("board_deleted", board_id=board_id, item_count=len(board.item_ids))
