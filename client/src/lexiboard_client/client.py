"""lexiboard REST API client with JWT authentication."""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from lexiboard.domain.catalog.entities.record import RecordDraft, RecordKind
from lexiboard_client.errors import (
    DatabaseError,
    UnauthorizedError,
    error_from_body,
    error_from_response,
)

logger = logging.getLogger(__name__)


def manual_payload(draft: RecordDraft) -> dict[str, Any]:
    """Write body for a draft typed into the form."""
    return {"method": "manual", "data": draft.to_document()}


def json_payload(text: str) -> dict[str, Any]:
    """Write body for pasted JSON; the service parses and validates it again."""
    return {"method": "json", "json": text}


def _data(body: Any) -> Any:
    """The `data` member of a success envelope; None when the reply has none."""
    if isinstance(body, Mapping):
        return body.get("data")
    return None


class CatalogGateway(Protocol):
    """The catalog operations the ingestion form and navigation tree depend on."""

    async def fetch_word(self, word: str) -> dict[str, Any]: ...

    async def create_record(
        self, kind: RecordKind, payload: Mapping[str, Any]
    ) -> dict[str, Any]: ...

    async def update_record(
        self, kind: RecordKind, record_id: str, payload: Mapping[str, Any]
    ) -> dict[str, Any]: ...

    async def delete_record(self, kind: RecordKind, record_id: str) -> None: ...

    async def add_board_item(self, board_id: str, item_id: str) -> dict[str, Any]: ...

    async def list_boards(self, board_type: str | None = None) -> list[dict[str, Any]]: ...

    async def list_lessons(self, board_id: str) -> list[dict[str, Any]]: ...


class LexiboardClient:
    """HTTP client for the lexiboard REST API.

    Reads are anonymous. Writes carry a bearer token, obtained by logging in
    with the configured admin credentials the first time one is needed. A
    401 on a write triggers one re-login and retry.

    Failures are raised as `CatalogError` subclasses built from the error
    envelope; transport failures propagate as `httpx.HTTPError`.
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        api_prefix: str = "/api",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        prefix = api_prefix.strip("/")
        self.api_prefix = f"/{prefix}" if prefix else ""
        self._access_token: str | None = None
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "LexiboardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    async def login(self) -> str:
        """Authenticate with the admin credentials and store the access token."""
        if not self.has_credentials:
            raise UnauthorizedError("No credentials configured", status_code=401)
        response = await self._client.post(
            self._url("/auth/login"),
            data={"username": self.username, "password": self.password},
        )
        if response.is_error:
            raise error_from_response(response)
        self._access_token = response.json()["access_token"]
        logger.info("Authenticated with lexiboard API")
        return self._access_token

    async def _send(self, method: str, path: str, auth: bool, **kwargs: Any) -> httpx.Response:
        headers = {}
        if auth and self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return await self._client.request(method, self._url(path), headers=headers, **kwargs)

    async def _request(self, method: str, path: str, auth: bool = False, **kwargs: Any) -> Any:
        """Make an API request and return the decoded body."""
        if auth and not self._access_token and self.has_credentials:
            await self.login()

        response = await self._send(method, path, auth, **kwargs)

        # Token expired or was issued by a restarted server
        if response.status_code == 401 and auth and self.has_credentials:
            await self.login()
            response = await self._send(method, path, auth, **kwargs)

        if response.is_error:
            raise error_from_response(response)

        try:
            body = response.json()
        except ValueError as e:
            raise DatabaseError(
                f"Unreadable response from {method} {path}", status_code=response.status_code
            ) from e
        if isinstance(body, Mapping) and body.get("success") is False:
            raise error_from_body(response.status_code, body)
        return body

    # --- Record endpoints ---

    async def fetch_word(self, word: str) -> dict[str, Any]:
        """Look a word up in the dictionary; returns a draft document for review."""
        body = await self._request("POST", "/vocabulary/fetch", auth=True, json={"word": word})
        return _data(body) or {}

    async def create_record(self, kind: RecordKind, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Create a record from a manual or JSON write body; returns the stored record."""
        body = await self._request(
            "POST", f"/{kind.resource}/create", auth=True, json=dict(payload)
        )
        return _data(body) or {}

    async def update_record(
        self, kind: RecordKind, record_id: str, payload: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Replace a record's content; returns the stored record."""
        body = await self._request(
            "PUT", f"/{kind.resource}/{record_id}", auth=True, json=dict(payload)
        )
        return _data(body) or {}

    async def delete_record(self, kind: RecordKind, record_id: str) -> None:
        """Delete a record and its board memberships."""
        await self._request("DELETE", f"/{kind.resource}/delete/{record_id}", auth=True)

    async def get_record(self, kind: RecordKind, record_id: str) -> dict[str, Any]:
        """Get a single record."""
        body = await self._request("GET", f"/{kind.resource}/{record_id}")
        return _data(body) or {}

    async def search_records(
        self,
        kind: RecordKind,
        letter: str | None = None,
        topic: str | None = None,
        level: str | None = None,
        band: float | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> dict[str, Any]:
        """Search records; returns `{items, total, page, totalPages}`."""
        params: dict[str, str | int | float] = {"page": page, "limit": limit}
        for name, value in (
            ("letter", letter),
            ("topic", topic),
            ("level", level),
            ("band", band),
            ("search", search),
        ):
            if value is not None:
                params[name] = value
        body = await self._request("GET", f"/{kind.resource}", params=params)
        return _data(body) or {}

    async def get_records_by_ids(
        self, kind: RecordKind, record_ids: list[str]
    ) -> list[dict[str, Any]]:
        """Get several records at once, in the order asked; unknown ids are skipped."""
        if not record_ids:
            return []
        body = await self._request(
            "GET", f"/{kind.resource}/by-ids", params={"ids": ",".join(record_ids)}
        )
        return _data(body) or []

    # --- Board endpoints ---

    async def list_boards(self, board_type: str | None = None) -> list[dict[str, Any]]:
        """List boards ordered by `order`."""
        params = {"type": board_type} if board_type else None
        return await self._request("GET", "/boards", params=params)

    async def get_board(self, board_id: str) -> dict[str, Any]:
        """Get a board with its `itemIds`."""
        return await self._request("GET", f"/boards/{board_id}")

    async def add_board_item(self, board_id: str, item_id: str) -> dict[str, Any]:
        """Link a record to a board; returns the board."""
        body = await self._request(
            "POST", f"/boards/{board_id}/items", auth=True, json={"itemId": item_id}
        )
        return _data(body) or {}

    async def remove_board_item(self, board_id: str, item_id: str) -> dict[str, Any]:
        """Unlink a record from a board; returns the board."""
        body = await self._request("DELETE", f"/boards/{board_id}/items/{item_id}", auth=True)
        return _data(body) or {}

    # --- Lesson endpoints ---

    async def list_lessons(self, board_id: str) -> list[dict[str, Any]]:
        """List a board's lessons ordered by `order`."""
        return await self._request("GET", "/lessons", params={"boardId": board_id})
