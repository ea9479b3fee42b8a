"""Pytest configuration and fixtures."""

import os

# Settings are read once on first import, so the test environment goes first
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-password"

from collections.abc import Generator, Mapping  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from lexiboard import models  # noqa: E402
from lexiboard.core import container  # noqa: E402
from lexiboard.database import Base, create_database_engine, get_db  # noqa: E402
from lexiboard.domain.catalog.exceptions import DictionaryLookupError  # noqa: E402
from lexiboard.domain.identity.entities.principal import Role  # noqa: E402
from lexiboard.infrastructure.identity.routers.auth import limiter  # noqa: E402
from lexiboard.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from lexiboard.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_database_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """The login limiter is process-wide; start every test with a clean slate."""
    limiter.reset()


class FakeDictionary:
    """Stands in for the dictionary API; knows only the words it is given."""

    def __init__(self) -> None:
        self.entries: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    def add(self, word: str, document: Mapping[str, Any]) -> None:
        self.entries[word.lower()] = dict(document)

    async def lookup(self, word: str) -> dict[str, Any]:
        self.calls.append(word)
        document = self.entries.get(word.strip().lower())
        if document is None:
            raise DictionaryLookupError(word, f'Word "{word}" not found in dictionary')
        return dict(document)


@pytest.fixture
def fake_dictionary() -> Generator[FakeDictionary, None, None]:
    """Replace the dictionary service in the container for one test."""
    fake = FakeDictionary()
    with container.dictionary_service.override(providers.Object(fake)):
        yield fake


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header carrying an admin token."""
    return {"Authorization": f"Bearer {create_access_token('admin', Role.ADMIN)}"}


@pytest.fixture
def viewer_headers() -> dict[str, str]:
    """Authorization header for an authenticated caller who is not an admin."""
    return {"Authorization": f"Bearer {create_access_token('reader', Role.VIEWER)}"}


def vocabulary_document(headword: str = "resilient", **overrides: Any) -> dict[str, Any]:
    """A valid manual vocabulary document."""
    document: dict[str, Any] = {
        "headword": headword,
        "phonetic": "/rɪˈzɪl.i.ənt/",
        "band": 7.0,
        "level": "advanced",
        "types": [{"partOfSpeech": "adjective", "meanings": ["able to recover quickly"]}],
        "examples": ["She is a resilient person."],
        "synonyms": ["tough", "hardy"],
        "topics": ["Character"],
    }
    document.update(overrides)
    return document


def expression_document(headword: str = "break the ice", **overrides: Any) -> dict[str, Any]:
    """A valid manual expression document."""
    document: dict[str, Any] = {
        "headword": headword,
        "expressionType": "idiom",
        "meaning": "to make people feel more relaxed",
        "band": 6.5,
        "level": "intermediate",
        "examples": ["He told a joke to break the ice."],
        "relatedWords": ["warm up"],
        "topics": ["Social"],
    }
    document.update(overrides)
    return document


def grammar_document(title: str = "Present perfect", **overrides: Any) -> dict[str, Any]:
    """A valid manual grammar document."""
    document: dict[str, Any] = {
        "title": title,
        "structure": "have/has + past participle",
        "explanation": "An action that started in the past and still matters now",
        "examples": ["I have lived here for ten years."],
        "usage": "Experience, unfinished time, recent news",
        "topics": ["Tenses"],
        "level": "intermediate",
    }
    document.update(overrides)
    return document


def create_test_record(
    client: TestClient,
    headers: dict[str, str],
    resource: str = "vocabulary",
    document: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a record through the API and return its document."""
    if document is None:
        documents = {
            "vocabulary": vocabulary_document,
            "expressions": expression_document,
            "grammar": grammar_document,
        }
        document = documents[resource]()
    response = client.post(
        f"/api/{resource}/create",
        json={"method": "manual", "data": document},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


def create_test_board(
    db_session: Session,
    name: str = "Daily life",
    board_type: str = "vocabulary",
    order: int = 0,
) -> models.Board:
    """Insert a board directly into the database."""
    board = models.Board(name=name, type=board_type, order=order)
    db_session.add(board)
    db_session.commit()
    db_session.refresh(board)
    return board


def create_test_lesson(
    db_session: Session,
    board: models.Board,
    title: str = "Lesson 1",
    order: int = 0,
) -> models.Lesson:
    """Insert a lesson directly into the database."""
    lesson = models.Lesson(board_id=board.id, title=title, order=order)
    db_session.add(lesson)
    db_session.commit()
    db_session.refresh(lesson)
    return lesson


@pytest.fixture
def test_board(db_session: Session) -> models.Board:
    """A vocabulary board."""
    return create_test_board(db_session)
