"""Tests for the dictionary lookup endpoint."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiboard import models
from tests.conftest import FakeDictionary

RESILIENT_ENTRY = {
    "headword": "resilient",
    "phonetic": "/rɪˈzɪl.i.ənt/",
    "audioUrl": "https://example.com/resilient-us.mp3",
    "types": [{"partOfSpeech": "adjective", "meanings": ["able to recover quickly"]}],
    "examples": ["Children are often very resilient."],
    "synonyms": ["tough"],
    "wordForms": [],
    "grammar": None,
}


class TestFetchWord:
    """Test suite for POST /vocabulary/fetch endpoint."""

    def test_fetch_fills_catalog_defaults(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        """Dictionary results get a level, band and topic the dictionary never provides."""
        fake_dictionary.add("resilient", RESILIENT_ENTRY)

        response = client.post(
            "/api/vocabulary/fetch", json={"word": "resilient"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_200_OK
        draft = response.json()["data"]
        assert draft["headword"] == "resilient"
        assert draft["phonetic"] == "/rɪˈzɪl.i.ənt/"
        assert draft["audioUrl"] == "https://example.com/resilient-us.mp3"
        assert draft["level"] == "intermediate"
        assert draft["band"] == 6.0
        assert draft["topics"] == ["General"]
        assert draft["examples"] == ["Children are often very resilient."]
        assert "id" not in draft

    def test_fetch_stores_nothing(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        """The draft goes back for review; the catalog is unchanged."""
        fake_dictionary.add("resilient", RESILIENT_ENTRY)

        client.post("/api/vocabulary/fetch", json={"word": "resilient"}, headers=admin_headers)

        assert db_session.query(models.LexicalRecord).count() == 0

    def test_fetch_unknown_word(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        """A word the dictionary does not know is an API_FETCH_ERROR."""
        response = client.post(
            "/api/vocabulary/fetch", json={"word": "qwertyuiop"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        data = response.json()
        assert data["success"] is False
        assert data["type"] == "API_FETCH_ERROR"
        assert "qwertyuiop" in data["error"]
        assert fake_dictionary.calls == ["qwertyuiop"]

    def test_fetch_blank_word(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        """A blank word is rejected before any lookup."""
        response = client.post("/api/vocabulary/fetch", json={"word": "   "}, headers=admin_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["type"] == "VALIDATION_ERROR"
        assert data["field"] == "word"
        assert fake_dictionary.calls == []

    def test_fetch_requires_admin(
        self,
        client: TestClient,
        viewer_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        fake_dictionary.add("resilient", RESILIENT_ENTRY)

        anonymous = client.post("/api/vocabulary/fetch", json={"word": "resilient"})
        viewer = client.post(
            "/api/vocabulary/fetch", json={"word": "resilient"}, headers=viewer_headers
        )

        assert anonymous.status_code == status.HTTP_401_UNAUTHORIZED
        assert viewer.status_code == status.HTTP_403_FORBIDDEN
        assert fake_dictionary.calls == []

    def test_fetched_draft_can_be_submitted(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        fake_dictionary: FakeDictionary,
    ) -> None:
        """A reviewed draft is saved through the manual path."""
        fake_dictionary.add("resilient", RESILIENT_ENTRY)
        draft = client.post(
            "/api/vocabulary/fetch", json={"word": "resilient"}, headers=admin_headers
        ).json()["data"]

        response = client.post(
            "/api/vocabulary/create",
            json={"method": "manual", "data": draft},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        record = response.json()["data"]
        assert record["band"] == 6.0
        assert record["synonyms"] == ["tough"]
