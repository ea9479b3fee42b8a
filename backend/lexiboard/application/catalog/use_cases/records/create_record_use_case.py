"""Use case for creating lexical records."""

import structlog

from lexiboard.application.catalog.protocols.record_repository import RecordRepositoryProtocol
from lexiboard.application.catalog.services.schema_normalizer import (
    DictionaryFetchInput,
    IngestionSource,
    SchemaNormalizer,
)
from lexiboard.application.common.unit_of_work import UnitOfWork
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordDraft, RecordKind
from lexiboard.domain.catalog.exceptions import DuplicateRecordError
from lexiboard.domain.catalog.services.record_validator import RecordValidator
from lexiboard.domain.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)


def prepare_draft_for_write(
    kind: RecordKind, draft: RecordDraft, validator: RecordValidator
) -> RecordDraft:
    """Check that a normalized draft matches the target kind and is valid."""
    if draft.kind is not kind:
        raise ValidationError(
            f"Expected a {kind.value} record, got {draft.kind.value}", field="kind"
        )
    return validator.validate(draft)


def reject_unreviewed_fetch(source: IngestionSource) -> None:
    """Dictionary results go back to the form for review; they are never saved directly."""
    if isinstance(source, DictionaryFetchInput):
        raise ValidationError(
            "Dictionary results must be reviewed and submitted manually", field="method"
        )


class CreateRecordUseCase:
    """Use case for creating a vocabulary or expression record."""

    def __init__(
        self,
        record_repository: RecordRepositoryProtocol,
        normalizer: SchemaNormalizer,
        validator: RecordValidator,
        uow: UnitOfWork,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            record_repository: Record repository protocol implementation
            normalizer: Schema normalizer for the ingestion source
            validator: Record validator
            uow: Unit of work wrapping the write
        """
        self.record_repository = record_repository
        self.normalizer = normalizer
        self.validator = validator
        self.uow = uow

    async def create(self, kind: RecordKind, source: IngestionSource) -> LexicalRecord:
        """
        Normalize, validate and store a new record.

        Args:
            kind: Kind of record the caller is creating
            source: Manual or JSON ingestion source

        Returns:
            The stored record with its id

        Raises:
            JsonParseError: If JSON import text does not parse
            ValidationError: If the draft breaks a field constraint
            DuplicateRecordError: If the headword is already taken for this kind
        """
        reject_unreviewed_fetch(source)
        draft = await self.normalizer.normalize(source)
        prepare_draft_for_write(kind, draft, self.validator)

        with self.uow:
            existing = self.record_repository.find_by_headword(kind, draft.headword)
            if existing is not None:
                raise DuplicateRecordError(kind.value, draft.headword.strip(), existing.id)

            record = self.record_repository.save(LexicalRecord.create(draft))
            self.uow.commit()

        logger.info(
            "record_created",
            record_id=record.id.value,
            kind=kind.value,
            headword=record.headword,
            source=type(source).__name__,
        )
        return record
