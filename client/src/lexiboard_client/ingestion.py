"""Form-level orchestration of the ingestion pipeline.

One `IngestionForm` stands for one open create or edit form. Submitting
runs normalize, validate, persist and (on create) associate strictly in
order, and the outcome says what the form should show next.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import httpx

from lexiboard.application.catalog.services.schema_normalizer import (
    DictionaryFetchInput,
    JsonImportInput,
    ManualInput,
    SchemaNormalizer,
)
from lexiboard.domain.catalog.entities.record import RecordDraft, RecordKind
from lexiboard.domain.catalog.services.record_validator import RecordValidator
from lexiboard.domain.common.exceptions import DomainError
from lexiboard_client.board_associator import BoardAssociator
from lexiboard_client.client import CatalogGateway, json_payload, manual_payload
from lexiboard_client.errors import CatalogError, ClassifiedError, ErrorClassifier

logger = logging.getLogger(__name__)


class FormMode(StrEnum):
    """Input tab the form is showing."""

    MANUAL = "manual"
    FETCH = "fetch"
    JSON = "json"


class SubmissionStatus(StrEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PERMISSION_DENIED = "permission_denied"
    IGNORED = "ignored"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of one submit (or fetch) on a form."""

    status: SubmissionStatus
    record: dict[str, Any] | None = None
    error: ClassifiedError | None = None
    message: str | None = None
    associated: bool = False

    @property
    def ok(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED


class _GatewayDictionary:
    """Dictionary port backed by the gateway's fetch endpoint."""

    def __init__(self, gateway: CatalogGateway) -> None:
        self.gateway = gateway

    async def lookup(self, word: str) -> dict[str, Any]:
        return await self.gateway.fetch_word(word)


class IngestionForm:
    """State and submit flow of one create or edit form.

    The form keeps its draft across failures so the user can correct it. A
    submit while another is in flight is ignored. After `close()` a late
    response is discarded without touching form state.
    """

    def __init__(
        self,
        gateway: CatalogGateway,
        kind: RecordKind,
        record_id: str | None = None,
        board_id: str | None = None,
        classifier: ErrorClassifier | None = None,
        validator: RecordValidator | None = None,
        associator: BoardAssociator | None = None,
    ) -> None:
        self.gateway = gateway
        self.kind = kind
        self.record_id = record_id
        self.board_id = board_id
        self.classifier = classifier or ErrorClassifier()
        self.validator = validator or RecordValidator()
        self.associator = associator or BoardAssociator(gateway)
        self.normalizer = SchemaNormalizer(dictionary=_GatewayDictionary(gateway))

        self.mode = FormMode.MANUAL
        self.draft: RecordDraft | None = None
        self.record: dict[str, Any] | None = None
        self.error: ClassifiedError | None = None
        self.error_message: str | None = None
        self.submitting = False
        self.fetching = False
        self.permission_dialog_open = False
        self.closed = False

    @property
    def is_edit(self) -> bool:
        return self.record_id is not None

    @property
    def submit_enabled(self) -> bool:
        return not (self.submitting or self.closed)

    def load(self, document: dict[str, Any]) -> RecordDraft:
        """Fill the form from a stored record (edit mode)."""
        self.draft = RecordDraft.from_document(document, self.kind)
        self.mode = FormMode.MANUAL
        return self.draft

    def close(self) -> None:
        """Dismiss the form. In-flight requests are not cancelled."""
        self.closed = True

    def dismiss_permission_dialog(self) -> None:
        """Closing the permission dialog also closes the form."""
        self.permission_dialog_open = False
        self.close()

    def _fail(self, error: BaseException) -> SubmissionOutcome:
        classified = self.classifier.classify(error)
        self.error = classified
        self.error_message = self.classifier.localize(classified)
        return SubmissionOutcome(
            status=SubmissionStatus.FAILED, error=classified, message=self.error_message
        )

    async def fetch(self, word: str) -> SubmissionOutcome:
        """
        Look a word up and load the result into the form for review.

        The fetched draft is never saved here; the form switches to manual
        mode and the user submits it like any typed draft.
        """
        if self.closed or self.fetching:
            return SubmissionOutcome(status=SubmissionStatus.IGNORED)

        self.fetching = True
        self.error = None
        self.error_message = None
        try:
            draft = await self.normalizer.normalize(DictionaryFetchInput(word, self.kind))
        except (DomainError, CatalogError, httpx.HTTPError) as e:
            if self.closed:
                return SubmissionOutcome(status=SubmissionStatus.DISCARDED)
            return self._fail(e)
        except Exception as e:
            logger.error(f"Dictionary fetch for {word!r} failed unexpectedly", exc_info=True)
            if self.closed:
                return SubmissionOutcome(status=SubmissionStatus.DISCARDED)
            return self._fail(e)
        finally:
            self.fetching = False

        if self.closed:
            return SubmissionOutcome(status=SubmissionStatus.DISCARDED)
        self.draft = draft
        self.mode = FormMode.MANUAL
        return SubmissionOutcome(status=SubmissionStatus.SUCCEEDED, record=draft.to_document())

    async def submit_manual(self, draft: RecordDraft | None = None) -> SubmissionOutcome:
        """Submit a typed draft, or the draft currently in the form."""
        if draft is not None:
            self.draft = draft
        if self.draft is None:
            self.draft = RecordDraft(kind=self.kind)
        self.mode = FormMode.MANUAL
        return await self._submit(ManualInput(self.draft))

    async def submit_json(self, text: str) -> SubmissionOutcome:
        """Submit pasted JSON."""
        self.mode = FormMode.JSON
        return await self._submit(JsonImportInput(text, self.kind))

    async def _submit(self, source: ManualInput | JsonImportInput) -> SubmissionOutcome:
        if not self.submit_enabled:
            logger.debug("Ignoring submit while the form is busy or closed")
            return SubmissionOutcome(status=SubmissionStatus.IGNORED)

        self.submitting = True
        self.error = None
        self.error_message = None
        try:
            return await self._run(source)
        finally:
            self.submitting = False

    async def _run(self, source: ManualInput | JsonImportInput) -> SubmissionOutcome:
        try:
            draft = await self.normalizer.normalize(source)
            self.validator.validate(draft)
        except DomainError as e:
            return self._fail(e)
        except Exception as e:
            logger.error("Normalizing the draft failed unexpectedly", exc_info=True)
            return self._fail(e)

        if isinstance(source, JsonImportInput):
            payload = json_payload(source.text)
        else:
            payload = manual_payload(draft)

        try:
            if self.record_id is not None:
                record = await self.gateway.update_record(self.kind, self.record_id, payload)
            else:
                record = await self.gateway.create_record(self.kind, payload)
        except (CatalogError, httpx.HTTPError) as e:
            if self.closed:
                logger.info("Discarding failed response for a closed form")
                return SubmissionOutcome(status=SubmissionStatus.DISCARDED)
            classified = self.classifier.classify(e)
            if classified.is_permission_error:
                self.permission_dialog_open = True
                return SubmissionOutcome(
                    status=SubmissionStatus.PERMISSION_DENIED,
                    error=classified,
                    message=self.classifier.permission_message(),
                )
            return self._fail(e)
        except Exception as e:
            logger.error("Saving the record failed unexpectedly", exc_info=True)
            if self.closed:
                return SubmissionOutcome(status=SubmissionStatus.DISCARDED)
            return self._fail(e)

        if self.closed:
            logger.info(f"Discarding response for record {record.get('id')}: form closed")
            return SubmissionOutcome(status=SubmissionStatus.DISCARDED, record=record)

        associated = False
        if not self.is_edit and record.get("id"):
            associated = await self.associator.associate(self.board_id, str(record["id"]))

        self.record = record
        return SubmissionOutcome(
            status=SubmissionStatus.SUCCEEDED, record=record, associated=associated
        )
