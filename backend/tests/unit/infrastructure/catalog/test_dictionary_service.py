"""Tests for DictionaryApiService."""

import httpx
import pytest

from lexiboard.domain.catalog.exceptions import DictionaryLookupError
from lexiboard.infrastructure.catalog.services.dictionary_service import (
    DictionaryApiService,
    transform_dictionary_entry,
)

BASE_URL = "https://dictionary.test/api/v2/entries/en"

RESILIENT_ENTRY = {
    "word": "resilient",
    "phonetics": [
        {"text": "/rɪˈzɪl.i.ənt/", "audio": "https://audio.test/resilient-uk.mp3"},
        {"text": "/rɪˈzɪl.jənt/", "audio": "https://audio.test/resilient-us.mp3"},
    ],
    "meanings": [
        {
            "partOfSpeech": "adjective",
            "definitions": [
                {"definition": "Able to recover quickly.", "example": "Kids are resilient."},
                {"definition": "Springing back into shape.", "synonyms": ["elastic"]},
                {"definition": "Third sense."},
                {"definition": "Fourth sense.", "example": "A resilient material."},
            ],
            "synonyms": ["tough", "hardy", "tough"],
        }
    ],
}


def _found(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=[RESILIENT_ENTRY])


def _not_found(request: httpx.Request) -> httpx.Response:
    return httpx.Response(404, json={"title": "No Definitions Found"})


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestTransformDictionaryEntry:
    def test_keeps_first_three_meanings_per_type(self):
        document = transform_dictionary_entry(RESILIENT_ENTRY)

        assert document["headword"] == "resilient"
        assert document["types"] == [
            {
                "partOfSpeech": "adjective",
                "meanings": [
                    "Able to recover quickly.",
                    "Springing back into shape.",
                    "Third sense.",
                ],
            }
        ]

    def test_collects_examples_from_every_definition(self):
        document = transform_dictionary_entry(RESILIENT_ENTRY)
        assert document["examples"] == ["Kids are resilient.", "A resilient material."]

    def test_synonyms_are_distinct_in_first_seen_order(self):
        document = transform_dictionary_entry(RESILIENT_ENTRY)
        assert document["synonyms"] == ["tough", "hardy", "elastic"]

    def test_prefers_us_audio(self):
        document = transform_dictionary_entry(RESILIENT_ENTRY)
        assert document["audioUrl"] == "https://audio.test/resilient-us.mp3"

    def test_falls_back_to_phonetic_text(self):
        document = transform_dictionary_entry(RESILIENT_ENTRY)
        assert document["phonetic"] == "/rɪˈzɪl.i.ənt/"

    def test_limits(self):
        entry = {
            "word": "set",
            "meanings": [
                {
                    "partOfSpeech": "verb",
                    "definitions": [
                        {"definition": f"sense {i}", "example": f"example {i}"} for i in range(8)
                    ],
                    "synonyms": [f"syn{i}" for i in range(15)],
                }
            ],
        }

        document = transform_dictionary_entry(entry)

        assert len(document["examples"]) == 5
        assert len(document["synonyms"]) == 10

    def test_entry_without_phonetics(self):
        document = transform_dictionary_entry({"word": "x", "meanings": []})

        assert document["phonetic"] == ""
        assert document["audioUrl"] == ""
        assert document["types"] == []


class TestDictionaryApiService:
    @pytest.fixture
    def requests(self) -> list[httpx.Request]:
        return []

    def _service(
        self, handler, requests, clock=None, max_entries=1000
    ) -> DictionaryApiService:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return DictionaryApiService(
            base_url=BASE_URL,
            cache_ttl_seconds=60,
            cache_max_entries=max_entries,
            transport=httpx.MockTransport(recording_handler),
            clock=clock or FakeClock(),
        )

    @pytest.mark.asyncio
    async def test_lookup_success(self, requests):
        service = self._service(_found, requests)

        document = await service.lookup("Resilient")

        assert document["headword"] == "resilient"
        assert str(requests[0].url) == f"{BASE_URL}/Resilient"

    @pytest.mark.asyncio
    async def test_lookup_quotes_the_word(self, requests):
        service = self._service(_found, requests)

        await service.lookup("ice cream")

        assert requests[0].url.raw_path.decode().endswith("/ice%20cream")

    @pytest.mark.asyncio
    async def test_not_found(self, requests):
        service = self._service(_not_found, requests)

        with pytest.raises(DictionaryLookupError) as exc_info:
            await service.lookup("qwertyuiop")

        assert exc_info.value.message == 'Word "qwertyuiop" not found in dictionary'

    @pytest.mark.asyncio
    async def test_server_error(self, requests):
        service = self._service(lambda request: httpx.Response(500), requests)

        with pytest.raises(DictionaryLookupError) as exc_info:
            await service.lookup("resilient")

        assert "500" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_empty_result(self, requests):
        service = self._service(lambda request: httpx.Response(200, json=[]), requests)

        with pytest.raises(DictionaryLookupError):
            await service.lookup("resilient")

    @pytest.mark.asyncio
    async def test_network_failure(self, requests):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        service = self._service(handler, requests)

        with pytest.raises(DictionaryLookupError) as exc_info:
            await service.lookup("resilient")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_results_are_cached_case_insensitively(self, requests):
        service = self._service(_found, requests)

        await service.lookup("resilient")
        await service.lookup("  RESILIENT ")

        assert len(requests) == 1

    @pytest.mark.asyncio
    async def test_cache_entries_expire(self, requests):
        clock = FakeClock()
        service = self._service(_found, requests, clock)

        await service.lookup("resilient")
        clock.now += 59
        await service.lookup("resilient")
        clock.now += 1
        await service.lookup("resilient")

        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_failures_are_not_cached(self, requests):
        responses = [httpx.Response(500), httpx.Response(200, json=[RESILIENT_ENTRY])]
        service = self._service(lambda request: responses.pop(0), requests)

        with pytest.raises(DictionaryLookupError):
            await service.lookup("resilient")
        document = await service.lookup("resilient")

        assert document["headword"] == "resilient"
        assert len(requests) == 2

    @pytest.mark.asyncio
    async def test_cached_documents_are_copies(self, requests):
        service = self._service(_found, requests)

        first = await service.lookup("resilient")
        first["headword"] = "changed"
        second = await service.lookup("resilient")

        assert second["headword"] == "resilient"

    @pytest.mark.asyncio
    async def test_expired_entries_are_dropped_on_insert(self, requests):
        clock = FakeClock()
        service = self._service(_found, requests, clock)

        await service.lookup("resilient")
        await service.lookup("candid")
        clock.now += 60
        await service.lookup("frank")

        assert list(service._cache) == ["frank"]

    @pytest.mark.asyncio
    async def test_oldest_entries_are_evicted_past_the_cap(self, requests):
        service = self._service(_found, requests, max_entries=2)

        for word in ("resilient", "candid", "frank"):
            await service.lookup(word)

        assert list(service._cache) == ["candid", "frank"]
        await service.lookup("resilient")
        assert len(requests) == 4
