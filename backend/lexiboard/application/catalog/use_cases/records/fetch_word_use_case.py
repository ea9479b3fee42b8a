"""Use case for looking a word up in the dictionary."""

import structlog

from lexiboard.application.catalog.services.schema_normalizer import (
    DictionaryFetchInput,
    SchemaNormalizer,
)
from lexiboard.domain.catalog.entities.record import RecordDraft, RecordKind

logger = structlog.get_logger(__name__)


class FetchWordUseCase:
    """Use case for preparing a vocabulary draft from a dictionary lookup."""

    def __init__(self, normalizer: SchemaNormalizer) -> None:
        self.normalizer = normalizer

    async def fetch(self, word: str) -> RecordDraft:
        """
        Look a word up and fill in catalog defaults.

        Nothing is stored; the draft goes back to the caller for review.

        Raises:
            ValidationError: If the word is blank
            DictionaryLookupError: If the dictionary has no entry or fails
        """
        draft = await self.normalizer.normalize(
            DictionaryFetchInput(word=word, kind=RecordKind.VOCABULARY)
        )
        logger.debug("word_fetched", word=word)
        return draft
