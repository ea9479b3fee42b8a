"""Free Dictionary API adapter (https://dictionaryapi.dev/)."""

import time
from collections.abc import Callable, Mapping
from typing import Any, Final
from urllib.parse import quote

import httpx
import structlog

from lexiboard.domain.catalog.exceptions import DictionaryLookupError

logger = structlog.get_logger(__name__)

MAX_MEANINGS_PER_TYPE: Final[int] = 3
MAX_EXAMPLES: Final[int] = 5
MAX_SYNONYMS: Final[int] = 10


def _pick_audio(phonetics: list[Mapping[str, Any]]) -> str:
    # US pronunciation first, then any recording
    with_audio = [p["audio"] for p in phonetics if p.get("audio")]
    for url in with_audio:
        if "-us." in url:
            return url
    return with_audio[0] if with_audio else ""


def transform_dictionary_entry(entry: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert one dictionary API entry into a partial record document.

    Keeps the first three definitions per part of speech, up to five usage
    examples and up to ten distinct synonyms.
    """
    phonetics = [p for p in entry.get("phonetics") or [] if isinstance(p, Mapping)]
    meanings = [m for m in entry.get("meanings") or [] if isinstance(m, Mapping)]
    definitions = [d for m in meanings for d in m.get("definitions") or []]

    phonetic = entry.get("phonetic") or next(
        (p["text"] for p in phonetics if p.get("text")), ""
    )

    types = [
        {
            "partOfSpeech": meaning.get("partOfSpeech", ""),
            "meanings": [
                d["definition"]
                for d in (meaning.get("definitions") or [])[:MAX_MEANINGS_PER_TYPE]
                if d.get("definition")
            ],
        }
        for meaning in meanings
    ]

    examples = [d["example"] for d in definitions if d.get("example")][:MAX_EXAMPLES]

    # dict.fromkeys keeps first-seen order while dropping repeats
    synonyms = list(
        dict.fromkeys(
            [s for m in meanings for s in m.get("synonyms") or []]
            + [s for d in definitions for s in d.get("synonyms") or []]
        )
    )[:MAX_SYNONYMS]

    return {
        "headword": entry.get("word", ""),
        "phonetic": phonetic,
        "audioUrl": _pick_audio(phonetics),
        "types": types,
        "examples": examples,
        "synonyms": synonyms,
        "wordForms": [],
        "grammar": None,
    }


class DictionaryApiService:
    """Looks words up in the Free Dictionary API with an in-memory TTL cache.

    The cache is keyed by the lower-cased word and lives as long as the
    service instance, which the container keeps as a singleton. Expired
    entries are dropped whenever a new one is stored, and past
    `cache_max_entries` the oldest entries are evicted first.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        cache_ttl_seconds: float = 24 * 60 * 60,
        cache_max_entries: int = 1000,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache_ttl_seconds = cache_ttl_seconds
        self.cache_max_entries = cache_max_entries
        self._transport = transport
        self._clock = clock
        self._cache: dict[str, tuple[float, dict[str, Any]]] = {}

    def clear_cache(self) -> None:
        """Forget every cached lookup."""
        self._cache.clear()

    def _store(self, key: str, document: dict[str, Any]) -> None:
        now = self._clock()
        expired = [
            cached_key
            for cached_key, (stored_at, _) in self._cache.items()
            if now - stored_at >= self.cache_ttl_seconds
        ]
        for cached_key in expired:
            del self._cache[cached_key]
        self._cache.pop(key, None)
        while self._cache and len(self._cache) >= self.cache_max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[key] = (now, document)

    def _cached(self, key: str) -> dict[str, Any] | None:
        hit = self._cache.get(key)
        if hit is None:
            return None
        stored_at, document = hit
        if self._clock() - stored_at >= self.cache_ttl_seconds:
            del self._cache[key]
            return None
        return dict(document)

    async def lookup(self, word: str) -> dict[str, Any]:
        """
        Fetch a partial record document for a word.

        Raises:
            DictionaryLookupError: If the word is unknown, the API answers with
                an error status, or the request fails
        """
        key = word.strip().lower()
        cached = self._cached(key)
        if cached is not None:
            logger.debug("dictionary_cache_hit", word=key)
            return cached

        url = f"{self.base_url}/{quote(word.strip())}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("dictionary_request_failed", word=key, error=str(e))
            raise DictionaryLookupError(word, f"Dictionary API request failed: {e}") from e

        if response.status_code == 404:
            raise DictionaryLookupError(word, f'Word "{word}" not found in dictionary')
        if response.is_error:
            logger.warning("dictionary_error_status", word=key, status=response.status_code)
            raise DictionaryLookupError(word, f"Dictionary API error: {response.status_code}")

        try:
            entries = response.json()
        except ValueError as e:
            raise DictionaryLookupError(word, "Dictionary API returned invalid JSON") from e

        if not isinstance(entries, list) or not entries or not isinstance(entries[0], Mapping):
            raise DictionaryLookupError(word, f'No data found for word "{word}"')

        document = transform_dictionary_entry(entries[0])
        self._store(key, document)
        logger.info("dictionary_lookup_completed", word=key, types=len(document["types"]))
        return dict(document)
