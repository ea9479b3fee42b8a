"""Pydantic schemas for lexical record API requests."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from lexiboard.application.catalog.services.schema_normalizer import (
    IngestionSource,
    JsonImportInput,
    ManualInput,
)
from lexiboard.domain.catalog.entities.record import RecordDraft, RecordKind
from lexiboard.domain.common.exceptions import ValidationError


class RecordWriteRequest(BaseModel):
    """Body of create and update requests.

    `method` selects the ingestion source: `manual` sends the record object
    in `data`, `json` sends the raw import text in `json`.
    """

    model_config = ConfigDict(populate_by_name=True)

    method: Literal["manual", "json"] = "manual"
    data: dict[str, Any] | None = None
    json_text: str | None = Field(default=None, alias="json")

    def to_source(self, kind: RecordKind) -> IngestionSource:
        """Build the ingestion source for the normalizer."""
        if self.method == "json":
            if self.json_text is None:
                raise ValidationError("JSON text is required", field="json")
            return JsonImportInput(text=self.json_text, kind=kind)

        if self.data is None:
            raise ValidationError("Record data is required", field="data")
        return ManualInput(draft=RecordDraft.from_document(self.data, kind))


class FetchWordRequest(BaseModel):
    """Body of a dictionary lookup request."""

    word: str = Field(..., min_length=1, max_length=100)
