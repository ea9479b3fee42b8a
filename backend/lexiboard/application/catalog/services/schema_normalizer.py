"""
Normalization of the three ingestion sources into one canonical draft.

A record can be typed in by hand, looked up in a dictionary, or pasted as a
JSON document. Each source is a small tagged type, and `SchemaNormalizer`
turns any of them into a `RecordDraft`. Validation is a separate step.
"""

import json
from dataclasses import dataclass, replace
from typing import Final

import structlog

from lexiboard.application.catalog.protocols.dictionary_fetch import DictionaryFetchPort
from lexiboard.domain.catalog.entities.record import Level, RecordDraft, RecordKind
from lexiboard.domain.catalog.exceptions import DictionaryLookupError, JsonParseError
from lexiboard.domain.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)

# Defaults applied to dictionary results, which never carry these fields
FETCH_DEFAULT_LEVEL: Final[str] = Level.INTERMEDIATE.value
FETCH_DEFAULT_BAND: Final[float] = 6.0
FETCH_DEFAULT_TOPICS: Final[tuple[str, ...]] = ("General",)


@dataclass(frozen=True)
class ManualInput:
    """A draft typed into the form; already canonical."""

    draft: RecordDraft


@dataclass(frozen=True)
class DictionaryFetchInput:
    """A word to look up. The result is only ever a draft for review."""

    word: str
    kind: RecordKind = RecordKind.VOCABULARY


@dataclass(frozen=True)
class JsonImportInput:
    """Raw JSON text pasted into the import box."""

    text: str
    kind: RecordKind


IngestionSource = ManualInput | DictionaryFetchInput | JsonImportInput


def parse_json_document(text: str) -> object:
    """
    Parse import text.

    Raises:
        JsonParseError: With the parser's own message when the text is not JSON
    """
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise JsonParseError(str(e)) from e


class SchemaNormalizer:
    """Turns any ingestion source into a canonical `RecordDraft`."""

    def __init__(self, dictionary: DictionaryFetchPort | None = None) -> None:
        """
        Initialize normalizer.

        Args:
            dictionary: Dictionary lookup used for `DictionaryFetchInput`.
                Without one, fetch sources fail with DictionaryLookupError.
        """
        self.dictionary = dictionary

    async def normalize(self, source: IngestionSource) -> RecordDraft:
        """
        Produce the canonical draft for a source.

        Args:
            source: Manual, dictionary or JSON source

        Returns:
            The draft (not yet validated)

        Raises:
            JsonParseError: If JSON import text does not parse
            ValidationError: If a JSON document is not an object, or the word is blank
            DictionaryLookupError: If the dictionary lookup fails
        """
        if isinstance(source, ManualInput):
            return source.draft
        if isinstance(source, JsonImportInput):
            return self._normalize_json(source)
        if isinstance(source, DictionaryFetchInput):
            return await self._normalize_fetch(source)
        raise TypeError(f"Unsupported ingestion source: {type(source).__name__}")

    def _normalize_json(self, source: JsonImportInput) -> RecordDraft:
        document = parse_json_document(source.text)
        return RecordDraft.from_document(document, source.kind)

    async def _normalize_fetch(self, source: DictionaryFetchInput) -> RecordDraft:
        word = source.word.strip()
        if not word:
            raise ValidationError("Word is required", field="word")
        if self.dictionary is None:
            raise DictionaryLookupError(word, "Dictionary lookup is not configured")

        partial = await self.dictionary.lookup(word)
        draft = RecordDraft.from_document(partial, source.kind)

        draft = replace(
            draft,
            headword=draft.headword or word,
            level=draft.level or FETCH_DEFAULT_LEVEL,
            band=draft.band if draft.band is not None else FETCH_DEFAULT_BAND,
            topics=draft.topics or FETCH_DEFAULT_TOPICS,
        )

        logger.info(
            "dictionary_draft_prepared",
            word=word,
            type_count=len(draft.types),
            example_count=len(draft.examples),
        )
        return draft
