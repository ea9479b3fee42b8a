"""Use case for reading lexical records by id."""

from lexiboard.application.catalog.protocols.record_repository import RecordRepositoryProtocol
from lexiboard.application.common.pagination import MAX_PAGE_SIZE
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordKind
from lexiboard.domain.catalog.exceptions import RecordNotFoundError
from lexiboard.domain.common.exceptions import ValidationError
from lexiboard.domain.common.value_objects.ids import RecordId


class GetRecordUseCase:
    """Use case for reading records by id."""

    def __init__(self, record_repository: RecordRepositoryProtocol) -> None:
        self.record_repository = record_repository

    def get(self, kind: RecordKind, record_id: str) -> LexicalRecord:
        """
        Get a record by id.

        Raises:
            RecordNotFoundError: If no record of this kind has the id
        """
        record = self.record_repository.find_by_id(RecordId(record_id), kind)
        if record is None:
            raise RecordNotFoundError(kind.value, record_id)
        return record

    def get_many(self, kind: RecordKind, record_ids: list[str]) -> list[LexicalRecord]:
        """
        Get several records of one kind, e.g. the members of a board.

        Blank and repeated ids are ignored. Ids with no record are skipped, so
        the result can be shorter than the request.

        Raises:
            ValidationError: If more than MAX_PAGE_SIZE distinct ids are asked for
        """
        unique_ids = list(dict.fromkeys(value.strip() for value in record_ids if value.strip()))
        if len(unique_ids) > MAX_PAGE_SIZE:
            raise ValidationError(
                f"At most {MAX_PAGE_SIZE} ids can be requested at once", field="ids"
            )
        return self.record_repository.find_by_ids(
            kind, [RecordId(record_id) for record_id in unique_ids]
        )
