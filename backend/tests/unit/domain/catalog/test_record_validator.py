"""Tests for RecordValidator."""

import math

import pytest

from lexiboard.domain.catalog.entities.record import RecordDraft, RecordKind
from lexiboard.domain.catalog.services.record_validator import RecordValidator
from lexiboard.domain.common.exceptions import ValidationError


def _vocabulary(**overrides) -> RecordDraft:
    fields = {
        "kind": RecordKind.VOCABULARY,
        "headword": "resilient",
        "band": 7.0,
        "level": "advanced",
        "examples": ("She is resilient.",),
        "topics": ("Character",),
    }
    fields.update(overrides)
    return RecordDraft(**fields)


def _expression(**overrides) -> RecordDraft:
    fields = {
        "kind": RecordKind.EXPRESSION,
        "headword": "break the ice",
        "meaning": "to make people feel relaxed",
        "level": "intermediate",
        "examples": ("A joke can break the ice.",),
        "topics": ("Social",),
    }
    fields.update(overrides)
    return RecordDraft(**fields)


class TestRecordValidator:
    @pytest.fixture
    def validator(self) -> RecordValidator:
        return RecordValidator()

    def test_valid_draft_is_returned_unchanged(self, validator):
        draft = _vocabulary()
        assert validator.validate(draft) is draft

    @pytest.mark.parametrize("band", [1.0, 1.5, 5.0, 8.5, 9.0])
    def test_accepts_bands_on_the_half_point_grid(self, validator, band):
        validator.validate(_vocabulary(band=band))

    @pytest.mark.parametrize("band", [0.5, 0.99, 9.5, 10.0, 6.3, 7.25, -1.0, math.nan, math.inf])
    def test_rejects_invalid_bands(self, validator, band):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(band=band))
        assert exc_info.value.field == "band"

    def test_vocabulary_requires_band(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(band=None))
        assert exc_info.value.field == "band"

    def test_expression_band_is_optional(self, validator):
        validator.validate(_expression(band=None))

    def test_expression_band_is_checked_when_present(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_expression(band=9.5))
        assert exc_info.value.field == "band"

    @pytest.mark.parametrize("headword", ["", "   ", "\t\n"])
    def test_rejects_blank_headword(self, validator, headword):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(headword=headword))
        assert exc_info.value.field == "headword"

    def test_expression_requires_meaning(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_expression(meaning=" "))
        assert exc_info.value.field == "meaning"

    @pytest.mark.parametrize("level", [None, "", "expert", "Advanced"])
    def test_rejects_unknown_level(self, validator, level):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(level=level))
        assert exc_info.value.field == "level"

    def test_requires_a_non_blank_example(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(examples=("", "  ")))
        assert exc_info.value.field == "examples"

    def test_requires_a_topic(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(topics=()))
        assert exc_info.value.field == "topics"

    def test_rejects_unknown_expression_type(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_expression(expression_type="proverb"))
        assert exc_info.value.field == "expressionType"

    def test_missing_expression_type_is_allowed(self, validator):
        validator.validate(_expression(expression_type=None))

    def test_first_failure_wins(self, validator):
        """Several broken fields report the earliest check."""
        draft = _vocabulary(band=12.0, level="expert", examples=(), topics=())
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(draft)
        assert exc_info.value.field == "band"

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_vocabulary(level="expert", examples=()))
        assert exc_info.value.field == "level"

    def test_validation_does_not_modify_the_draft(self, validator):
        draft = _vocabulary(headword="  resilient  ", examples=(" a ", ""))
        validator.validate(draft)
        assert draft.headword == "  resilient  "
        assert draft.examples == (" a ", "")


def _grammar(**overrides) -> RecordDraft:
    fields = {
        "kind": RecordKind.GRAMMAR,
        "headword": "Present perfect",
        "structure": "have/has + past participle",
        "meaning": "Past actions that still matter",
        "level": "intermediate",
    }
    fields.update(overrides)
    return RecordDraft(**fields)


class TestGrammarValidation:
    @pytest.fixture
    def validator(self) -> RecordValidator:
        return RecordValidator()

    def test_examples_topics_and_band_are_not_required(self, validator):
        draft = _grammar()
        assert validator.validate(draft) is draft

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"headword": " "}, "title"),
            ({"structure": ""}, "structure"),
            ({"meaning": "  "}, "explanation"),
            ({"level": None}, "level"),
        ],
    )
    def test_required_fields(self, validator, overrides, field):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_grammar(**overrides))
        assert exc_info.value.field == field

    def test_title_is_checked_first(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_grammar(headword="", structure="", level="expert"))
        assert exc_info.value.field == "title"


class TestOversizedBand:
    def test_huge_band_from_a_document_is_reported_on_band(self):
        validator = RecordValidator()
        draft = RecordDraft.from_document(
            {
                "headword": "resilient",
                "band": 10**400,
                "level": "advanced",
                "examples": ["She is resilient."],
                "topics": ["Character"],
            },
            RecordKind.VOCABULARY,
        )

        with pytest.raises(ValidationError) as exc_info:
            validator.validate(draft)
        assert exc_info.value.field == "band"
