"""Use case for editing lexical records."""

import structlog

from lexiboard.application.catalog.protocols.record_repository import RecordRepositoryProtocol
from lexiboard.application.catalog.services.schema_normalizer import (
    IngestionSource,
    SchemaNormalizer,
)
from lexiboard.application.catalog.use_cases.records.create_record_use_case import (
    prepare_draft_for_write,
    reject_unreviewed_fetch,
)
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordKind
from lexiboard.domain.catalog.exceptions import DuplicateRecordError, RecordNotFoundError
from lexiboard.domain.catalog.services.record_validator import RecordValidator
from lexiboard.domain.common.value_objects.ids import RecordId

logger = structlog.get_logger(__name__)


class UpdateRecordUseCase:
    """Use case for replacing the content of an existing record."""

    def __init__(
        self,
        record_repository: RecordRepositoryProtocol,
        normalizer: SchemaNormalizer,
        validator: RecordValidator,
        uow: UnitOfWork,
    ) -> None:
        self.record_repository = record_repository
        self.normalizer = normalizer
        self.validator = validator
        self.uow = uow

    async def update(
        self, kind: RecordKind, record_id: str, source: IngestionSource
    ) -> LexicalRecord:
        """
        Run an edit through the same pipeline as a create.

        The edit replaces the whole content; there is no version check, so the
        last write wins.

        Args:
            kind: Kind of the record being edited
            record_id: Id of the record
            source: Manual or JSON ingestion source

        Returns:
            The updated record

        Raises:
            ValidationError: If the draft breaks a field constraint
            RecordNotFoundError: If no record of this kind has the id
            DuplicateRecordError: If the new headword belongs to another record
        """
        reject_unreviewed_fetch(source)
        draft = await self.normalizer.normalize(source)
        prepare_draft_for_write(kind, draft, self.validator)

        with self.uow:
            record = self.record_repository.find_by_id(RecordId(record_id), kind)
            if record is None:
                raise RecordNotFoundError(kind.value, record_id)

            clash = self.record_repository.find_by_headword(kind, draft.headword)
            if clash is not None and clash.id != record.id:
                raise DuplicateRecordError(kind.value, draft.headword.strip(), clash.id)

            record.revise(draft)
            record = self.record_repository.save(record)
            self.uow.commit()

        logger.info(
            "record_updated", record_id=record_id, kind=kind.value, headword=record.headword
        )
        return record
