"""Lexical record entity and the canonical draft every ingestion path converges to."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from lexiboard.domain.common.entity import Entity
from lexiboard.domain.common.exceptions import DomainError, ValidationError
from lexiboard.domain.common.value_objects.ids import RecordId


class RecordKind(StrEnum):
    """Kinds of lexical record held by the catalog."""

    VOCABULARY = "vocabulary"
    EXPRESSION = "expression"
    GRAMMAR = "grammar"

    @property
    def resource(self) -> str:
        """URL segment the HTTP API uses for this kind."""
        if self is RecordKind.EXPRESSION:
            return "expressions"
        return self.value

    @classmethod
    def from_resource(cls, resource: str) -> "RecordKind":
        """Resolve a kind from its URL segment."""
        for kind in cls:
            if kind.resource == resource:
                return kind
        raise ValueError(f"Unknown record resource: {resource}")


class Level(StrEnum):
    """Learner level a record is aimed at."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExpressionType(StrEnum):
    """Sub-kinds of expression."""

    IDIOM = "idiom"
    PHRASE = "phrase"


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _optional_text(value: object) -> str | None:
    text = _text(value)
    return text or None


def _strings(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list | tuple):
        return tuple(_text(item) for item in value if item is not None)
    return ()


def _band(value: object) -> float | None:
    # Unparseable values become NaN so validation reports them on `band`
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int | float):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return math.nan


def _first_present(document: Mapping[str, Any], *keys: str) -> object:
    for key in keys:
        if key in document and document[key] is not None:
            return document[key]
    return None


@dataclass(frozen=True)
class WordType:
    """A part of speech with the meanings the word has in that role."""

    part_of_speech: str
    meanings: tuple[str, ...] = ()

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "WordType":
        """Build from a JSON object; accepts `type` as an alias of `partOfSpeech`."""
        part_of_speech = _text(_first_present(document, "partOfSpeech", "type"))
        return cls(
            part_of_speech=part_of_speech.strip().lower(),
            meanings=_strings(document.get("meanings")),
        )

    def to_document(self) -> dict[str, Any]:
        return {"partOfSpeech": self.part_of_speech, "meanings": list(self.meanings)}


@dataclass(frozen=True)
class RecordDraft:
    """
    Canonical record shape.

    Manual forms, dictionary lookups and JSON imports all produce one of these
    before validation. Drafts are immutable so validating one can never
    change it. Vocabulary uses `phonetic`, `synonyms` and `types`;
    expressions use `meaning`, `synonyms` (serialized as `relatedWords`) and
    `expression_type`. Grammar entries keep their title in `headword` and
    their explanation in `meaning`, next to `structure`, `usage` and `notes`.
    """

    kind: RecordKind
    headword: str = ""
    phonetic: str = ""
    meaning: str = ""
    audio_url: str = ""
    band: float | None = None
    level: str | None = None
    examples: tuple[str, ...] = ()
    synonyms: tuple[str, ...] = ()
    topics: tuple[str, ...] = ()
    types: tuple[WordType, ...] = ()
    word_forms: tuple[str, ...] = ()
    grammar: str | None = None
    expression_type: str | None = None
    category: str | None = None
    structure: str = ""
    usage: str | None = None
    notes: str | None = None

    @property
    def headword_key(self) -> str:
        """Key the uniqueness invariant is checked on."""
        return self.headword.strip().casefold()

    @classmethod
    def from_document(cls, document: object, kind: RecordKind) -> "RecordDraft":
        """
        Map a JSON document onto the canonical shape.

        Only the shape is normalized here; semantic checks belong to the
        validator. Key aliases used by older exports are accepted: `word` and
        `expression` for `headword`, `relatedWords` for `synonyms`, and `type`
        for an expression's `expressionType`. Grammar documents use `title`
        and `explanation`, with `headword` and `meaning` accepted as aliases.

        Raises:
            ValidationError: If the document is not a JSON object
        """
        if not isinstance(document, Mapping):
            raise ValidationError("JSON document must be an object", field="document")

        if kind is RecordKind.EXPRESSION:
            synonyms = _first_present(document, "relatedWords", "synonyms")
            expression_type = _first_present(document, "expressionType", "type")
        else:
            synonyms = _first_present(document, "synonyms", "relatedWords")
            expression_type = None

        raw_types = document.get("types")
        types: tuple[WordType, ...] = ()
        if isinstance(raw_types, list | tuple):
            types = tuple(
                WordType.from_document(item) for item in raw_types if isinstance(item, Mapping)
            )

        if kind is RecordKind.GRAMMAR:
            headword = _first_present(document, "title", "headword")
            meaning = _first_present(document, "explanation", "meaning")
            band = None
        else:
            headword = _first_present(document, "headword", "word", "expression")
            meaning = document.get("meaning")
            band = _band(document.get("band"))

        level = document.get("level")
        return cls(
            kind=kind,
            headword=_text(headword),
            phonetic=_text(document.get("phonetic")),
            meaning=_text(meaning),
            audio_url=_text(document.get("audioUrl")),
            band=band,
            level=_text(level) if level is not None else None,
            examples=_strings(document.get("examples")),
            synonyms=_strings(synonyms),
            topics=_strings(document.get("topics")),
            types=types,
            word_forms=_strings(document.get("wordForms")),
            grammar=_optional_text(document.get("grammar")),
            expression_type=_optional_text(expression_type),
            category=_optional_text(document.get("category")),
            structure=_text(document.get("structure")),
            usage=_optional_text(document.get("usage")),
            notes=_optional_text(document.get("notes")),
        )

    def cleaned(self) -> "RecordDraft":
        """
        Copy with surrounding whitespace trimmed and blank list entries dropped.

        This is the form the store keeps; it is applied after validation.
        """

        def strip_all(values: tuple[str, ...]) -> tuple[str, ...]:
            return tuple(value.strip() for value in values if value.strip())

        expression_type = self.expression_type
        if self.kind is RecordKind.EXPRESSION and not expression_type:
            expression_type = ExpressionType.IDIOM.value

        return replace(
            self,
            headword=self.headword.strip(),
            band=None if self.kind is RecordKind.GRAMMAR else self.band,
            phonetic=self.phonetic.strip(),
            meaning=self.meaning.strip(),
            audio_url=self.audio_url.strip(),
            level=self.level.strip() if self.level else self.level,
            examples=strip_all(self.examples),
            synonyms=strip_all(self.synonyms),
            topics=strip_all(self.topics),
            types=tuple(
                WordType(t.part_of_speech.strip(), strip_all(t.meanings)) for t in self.types
            ),
            word_forms=strip_all(self.word_forms),
            grammar=self.grammar.strip() if self.grammar else None,
            expression_type=expression_type,
            structure=self.structure.strip(),
            usage=(self.usage or "").strip() or None,
            notes=(self.notes or "").strip() or None,
        )

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON document used on the wire."""
        band = self.band if self.band is not None and math.isfinite(self.band) else None
        if self.kind is RecordKind.VOCABULARY:
            return {
                "kind": self.kind.value,
                "headword": self.headword,
                "phonetic": self.phonetic,
                "audioUrl": self.audio_url,
                "band": band,
                "level": self.level,
                "types": [word_type.to_document() for word_type in self.types],
                "examples": list(self.examples),
                "synonyms": list(self.synonyms),
                "wordForms": list(self.word_forms),
                "topics": list(self.topics),
                "grammar": self.grammar,
            }
        if self.kind is RecordKind.GRAMMAR:
            return {
                "kind": self.kind.value,
                "title": self.headword,
                "structure": self.structure,
                "explanation": self.meaning,
                "level": self.level,
                "examples": list(self.examples),
                "usage": self.usage,
                "notes": self.notes,
                "topics": list(self.topics),
            }
        return {
            "kind": self.kind.value,
            "headword": self.headword,
            "expressionType": self.expression_type,
            "meaning": self.meaning,
            "band": band,
            "level": self.level,
            "examples": list(self.examples),
            "relatedWords": list(self.synonyms),
            "topics": list(self.topics),
            "grammar": self.grammar,
            "category": self.category,
        }


@dataclass
class LexicalRecord(Entity[RecordId]):
    """
    A persisted vocabulary, expression or grammar entry.

    The record pairs a store-assigned identity with canonical content. It is
    only ever changed by replacing the content with a newly validated draft.
    """

    # Identity
    id: RecordId

    # Content
    content: RecordDraft

    # Timestamps
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.content.headword.strip():
            raise DomainError("Record headword cannot be empty")

    @property
    def kind(self) -> RecordKind:
        return self.content.kind

    @property
    def headword(self) -> str:
        return self.content.headword

    # Command methods
    def revise(self, content: RecordDraft) -> None:
        """Replace the content with an edited draft of the same kind."""
        if content.kind is not self.kind:
            raise DomainError(
                f"Cannot turn a {self.kind.value} record into a {content.kind.value} record"
            )
        self.content = content.cleaned()
        self.updated_at = datetime.now(UTC)

    def to_document(self) -> dict[str, Any]:
        """Serialize with identity and timestamps."""
        return {
            "id": self.id.value,
            **self.content.to_document(),
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    # Factory methods
    @classmethod
    def create(cls, content: RecordDraft) -> "LexicalRecord":
        """Factory for creating a new record from a validated draft."""
        now = datetime.now(UTC)
        return cls(
            id=RecordId.generate(),
            content=content.cleaned(),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: RecordId,
        content: RecordDraft,
        created_at: datetime,
        updated_at: datetime,
    ) -> "LexicalRecord":
        """Factory for reconstituting a record from persistence."""
        return cls(id=id, content=content, created_at=created_at, updated_at=updated_at)
