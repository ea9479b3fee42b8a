"""Use case for deleting lexical records."""

import structlog

from lexiboard.application.catalog.protocols.board_repository import BoardRepositoryProtocol
from lexiboard.application.catalog.protocols.record_repository import RecordRepositoryProtocol
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.record import RecordKind
from lexiboard.domain.catalog.exceptions import RecordNotFoundError
from lexiboard.domain.common.value_objects.ids import RecordId

logger = structlog.get_logger(__name__)


class DeleteRecordUseCase:
    """Use case for deleting a record and its board memberships."""

    def __init__(
        self,
        record_repository: RecordRepositoryProtocol,
        board_repository: BoardRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            record_repository: Record repository protocol implementation
            board_repository: Board repository, used to unlink the record
            uow: Unit of work; unlinking and deleting commit together
        """
        self.record_repository = record_repository
        self.board_repository = board_repository
        self.uow = uow

    def delete(self, kind: RecordKind, record_id: str) -> None:
        """
        Delete a record (hard delete).

        Every board membership is removed in the same transaction, so no
        board ever lists a deleted record.

        Raises:
            RecordNotFoundError: If no record of this kind has the id
        """
        with self.uow:
            record = self.record_repository.find_by_id(RecordId(record_id), kind)
            if record is None:
                raise RecordNotFoundError(kind.value, record_id)

            removed_links = self.board_repository.remove_record_from_all_boards(record.id)
            self.record_repository.delete(record)
            self.uow.commit()

        logger.info(
            "record_deleted",
            record_id=record_id,
            kind=kind.value,
            removed_links=removed_links,
        )
