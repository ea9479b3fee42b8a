"""Tests for lesson API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiboard import models
from tests.conftest import create_test_board, create_test_lesson


class TestListLessons:
    """Test suite for GET /lessons endpoint."""

    def test_list_by_board(
        self, client: TestClient, db_session: Session, test_board: models.Board
    ) -> None:
        """Only the board's own lessons come back, ordered by `order`."""
        other_board = create_test_board(db_session, name="Travel", order=1)
        create_test_lesson(db_session, test_board, title="Second", order=1)
        create_test_lesson(db_session, test_board, title="First", order=0)
        create_test_lesson(db_session, other_board, title="Airports")

        response = client.get("/api/lessons", params={"boardId": test_board.id})

        assert response.status_code == status.HTTP_200_OK
        lessons = response.json()
        assert [lesson["title"] for lesson in lessons] == ["First", "Second"]
        assert all(lesson["boardId"] == test_board.id for lesson in lessons)

    def test_list_empty_board(self, client: TestClient, test_board: models.Board) -> None:
        response = client.get("/api/lessons", params={"boardId": test_board.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_board_id_is_required(self, client: TestClient, db_session: Session) -> None:
        response = client.get("/api/lessons")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["type"] == "VALIDATION_ERROR"
        assert data["field"] == "boardId"

    def test_unknown_board(self, client: TestClient, db_session: Session) -> None:
        response = client.get("/api/lessons", params={"boardId": "missing"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["type"] == "NOT_FOUND_ERROR"

    def test_get_lesson(
        self, client: TestClient, db_session: Session, test_board: models.Board
    ) -> None:
        lesson = create_test_lesson(db_session, test_board, title="Greetings")

        response = client.get(f"/api/lessons/{lesson.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Greetings"

    def test_get_lesson_not_found(self, client: TestClient, db_session: Session) -> None:
        response = client.get("/api/lessons/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestManageLessons:
    """Test suite for lesson create, update and delete endpoints."""

    def test_create_lesson_appends(
        self,
        client: TestClient,
        db_session: Session,
        test_board: models.Board,
        admin_headers: dict[str, str],
    ) -> None:
        """A new lesson's order is the board's current lesson count."""
        create_test_lesson(db_session, test_board, title="First", order=0)
        create_test_lesson(db_session, test_board, title="Second", order=1)

        response = client.post(
            "/api/lessons",
            json={"boardId": test_board.id, "title": "Third", "description": "Small talk"},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        lesson = response.json()
        assert lesson["order"] == 2
        assert lesson["boardId"] == test_board.id
        assert lesson["description"] == "Small talk"

    def test_create_with_explicit_order(
        self, client: TestClient, test_board: models.Board, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/lessons",
            json={"boardId": test_board.id, "title": "Intro", "order": 5},
            headers=admin_headers,
        )

        assert response.json()["order"] == 5

    def test_create_on_unknown_board(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/lessons", json={"boardId": "missing", "title": "Intro"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.Lesson).count() == 0

    def test_create_blank_title(
        self, client: TestClient, test_board: models.Board, admin_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/lessons", json={"boardId": test_board.id, "title": "  "}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "title"

    def test_create_requires_admin(
        self, client: TestClient, test_board: models.Board, viewer_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/lessons",
            json={"boardId": test_board.id, "title": "Intro"},
            headers=viewer_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_update_lesson(
        self,
        client: TestClient,
        db_session: Session,
        test_board: models.Board,
        admin_headers: dict[str, str],
    ) -> None:
        lesson = create_test_lesson(db_session, test_board)

        response = client.put(
            f"/api/lessons/{lesson.id}",
            json={"title": "Renamed", "order": 3},
            headers=admin_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()
        assert updated["title"] == "Renamed"
        assert updated["order"] == 3

    def test_update_negative_order(
        self,
        client: TestClient,
        db_session: Session,
        test_board: models.Board,
        admin_headers: dict[str, str],
    ) -> None:
        lesson = create_test_lesson(db_session, test_board)

        response = client.put(
            f"/api/lessons/{lesson.id}", json={"order": -1}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "order"

    def test_delete_lesson(
        self,
        client: TestClient,
        db_session: Session,
        test_board: models.Board,
        admin_headers: dict[str, str],
    ) -> None:
        lesson = create_test_lesson(db_session, test_board)
        lesson_id = lesson.id

        response = client.delete(f"/api/lessons/{lesson_id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Lesson deleted successfully"
        assert client.get(f"/api/lessons/{lesson_id}").status_code == 404
        assert client.get(f"/api/boards/{test_board.id}").status_code == 200

    def test_delete_lesson_not_found(
        self, client: TestClient, db_session: Session, admin_headers: dict[str, str]
    ) -> None:
        response = client.delete("/api/lessons/missing", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
