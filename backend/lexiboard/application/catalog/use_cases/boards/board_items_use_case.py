"""Use case for linking records to boards."""

import structlog

from lexiboard.application.catalog.protocols.board_repository import BoardRepositoryProtocol
from lexiboard.application.catalog.protocols.record_repository import RecordRepositoryProtocol
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.board import Board
from lexiboard.domain.catalog.exceptions import BoardNotFoundError, RecordNotFoundError
from lexiboard.domain.common.value_objects.ids import BoardId, RecordId

logger = structlog.get_logger(__name__)


class BoardItemsUseCase:
    """Use case for board membership."""

    def __init__(
        self,
        board_repository: BoardRepositoryProtocol,
        record_repository: RecordRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.board_repository = board_repository
        self.record_repository = record_repository
        self.uow = uow

    def _get_board(self, board_id: str) -> Board:
        board = self.board_repository.find_by_id(BoardId(board_id))
        if board is None:
            raise BoardNotFoundError(board_id)
        return board

    def add_item(self, board_id: str, record_id: str) -> Board:
        """
        Link a record to a board.

        Linking a record that is already on the board changes nothing and
        still succeeds.

        Raises:
            BoardNotFoundError: If the board does not exist
            RecordNotFoundError: If no record has the id
        """
        with self.uow:
            board = self._get_board(board_id)
            record = self.record_repository.find_by_id(RecordId(record_id))
            if record is None:
                raise RecordNotFoundError("record", record_id)

            if board.add_item(record.id):
                self.board_repository.add_item(board.id, record.id)
                self.uow.commit()
                logger.info("board_item_added", board_id=board_id, record_id=record_id)

        return board

    def remove_item(self, board_id: str, record_id: str) -> Board:
        """
        Unlink a record from a board. Unlinking a non-member is a no-op.

        Raises:
            BoardNotFoundError: If the board does not exist
        """
        with self.uow:
            board = self._get_board(board_id)
            rid = RecordId(record_id)
            if board.remove_item(rid):
                self.board_repository.remove_item(board.id, rid)
                self.uow.commit()
                logger.info("board_item_removed", board_id=board_id, record_id=record_id)

        return board
