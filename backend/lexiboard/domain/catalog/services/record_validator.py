"""Domain service enforcing field-level constraints on record drafts."""

import math
from typing import Final

from lexiboard.domain.catalog.entities.record import (
    ExpressionType,
    Level,
    RecordDraft,
    RecordKind,
)
from lexiboard.domain.common.exceptions import ValidationError

MIN_BAND: Final[float] = 1.0
MAX_BAND: Final[float] = 9.0


class RecordValidator:
    """Checks a draft and raises on the first broken constraint.

    Checks run in a fixed order so the reported field is predictable:
    1. Required text (`headword`; `meaning` for expressions; `title`,
       `structure` and `explanation` for grammar)
    2. `band` (required for vocabulary, optional for expressions)
    3. `level`
    4. `examples` (not for grammar)
    5. `topics` (not for grammar)
    6. `expressionType` (expressions only)

    The draft is never modified. The same checks run on create and edit, in
    the client before a request is sent and in the service before a write.
    """

    def validate(self, draft: RecordDraft) -> RecordDraft:
        """Return the draft unchanged if valid, otherwise raise ValidationError."""
        self._check_required_text(draft)
        self._check_band(draft)
        self._check_level(draft)
        if draft.kind is not RecordKind.GRAMMAR:
            self._check_non_empty(draft.examples, "examples", "At least one example is required")
            self._check_non_empty(draft.topics, "topics", "At least one topic is required")
        self._check_expression_type(draft)
        return draft

    def _check_required_text(self, draft: RecordDraft) -> None:
        if draft.kind is RecordKind.GRAMMAR:
            self._check_grammar_text(draft)
            return
        if not draft.headword.strip():
            raise ValidationError("Headword is required", field="headword")
        if draft.kind is RecordKind.EXPRESSION and not draft.meaning.strip():
            raise ValidationError("Meaning is required", field="meaning")

    def _check_grammar_text(self, draft: RecordDraft) -> None:
        for value, field, label in (
            (draft.headword, "title", "Title"),
            (draft.structure, "structure", "Structure"),
            (draft.meaning, "explanation", "Explanation"),
        ):
            if not value.strip():
                raise ValidationError(f"{label} is required", field=field)

    def _check_band(self, draft: RecordDraft) -> None:
        band = draft.band
        if band is None or draft.kind is RecordKind.GRAMMAR:
            if draft.kind is RecordKind.VOCABULARY:
                raise ValidationError("Band is required", field="band")
            return

        if isinstance(band, bool) or not isinstance(band, int | float) or not math.isfinite(band):
            raise ValidationError("Band must be a number", field="band", value=str(band))
        if not MIN_BAND <= band <= MAX_BAND:
            raise ValidationError(
                f"Band must be between {MIN_BAND} and {MAX_BAND}", field="band", value=band
            )
        if not (band * 2).is_integer():
            raise ValidationError("Band must be a multiple of 0.5", field="band", value=band)

    def _check_level(self, draft: RecordDraft) -> None:
        allowed = [level.value for level in Level]
        if draft.level not in allowed:
            raise ValidationError(
                f"Level must be one of: {', '.join(allowed)}", field="level", value=draft.level
            )

    def _check_non_empty(self, values: tuple[str, ...], field: str, message: str) -> None:
        if not any(value.strip() for value in values):
            raise ValidationError(message, field=field)

    def _check_expression_type(self, draft: RecordDraft) -> None:
        if draft.kind is not RecordKind.EXPRESSION or draft.expression_type is None:
            return
        allowed = [expression_type.value for expression_type in ExpressionType]
        if draft.expression_type not in allowed:
            raise ValidationError(
                f"Expression type must be one of: {', '.join(allowed)}",
                field="expressionType",
                value=draft.expression_type,
            )
