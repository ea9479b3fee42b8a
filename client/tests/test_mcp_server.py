"""Tests for the MCP server setup and catalog tools."""

import json

import httpx
import pytest
from mcp.server.fastmcp import FastMCP

from lexiboard.domain.catalog.entities.record import RecordKind
from lexiboard_client.client import LexiboardClient
from lexiboard_client.errors import ErrorClassifier
from lexiboard_client.server import create_server
from lexiboard_client.tools.catalog import parse_kind, register_catalog_tools


@pytest.fixture
def catalog_env(monkeypatch):
    monkeypatch.setenv("LEXIBOARD_URL", "http://catalog.test")
    monkeypatch.setenv("LEXIBOARD_USERNAME", "admin")
    monkeypatch.setenv("LEXIBOARD_PASSWORD", "secret")
    monkeypatch.delenv("LEXIBOARD_LOCALE", raising=False)


class TestParseKind:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("vocabulary", RecordKind.VOCABULARY),
            ("expression", RecordKind.EXPRESSION),
            ("expressions", RecordKind.EXPRESSION),
            ("grammar", RecordKind.GRAMMAR),
        ],
    )
    def test_accepts_kind_or_resource(self, value, expected):
        assert parse_kind(value) is expected

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            parse_kind("idioms")


class TestCreateServer:
    @pytest.mark.asyncio
    async def test_registers_catalog_tools(self, catalog_env):
        server, client = create_server()

        tools = {tool.name for tool in await server.list_tools()}

        assert tools == {
            "list_boards",
            "list_lessons",
            "list_board_records",
            "remove_from_board",
            "fetch_word",
            "create_record",
            "delete_record",
        }
        assert client.base_url == "http://catalog.test"
        assert client.has_credentials
        await client.close()

    def test_url_is_required(self, catalog_env, monkeypatch, capsys):
        monkeypatch.delenv("LEXIBOARD_URL")

        with pytest.raises(SystemExit):
            create_server()

        assert "LEXIBOARD_URL" in capsys.readouterr().err

    def test_unsupported_locale(self, catalog_env, monkeypatch, capsys):
        monkeypatch.setenv("LEXIBOARD_LOCALE", "fr")

        with pytest.raises(SystemExit):
            create_server()

        assert "LEXIBOARD_LOCALE" in capsys.readouterr().err


class TestBoardTools:
    @pytest.fixture
    def api_requests(self) -> list[httpx.Request]:
        return []

    @pytest.fixture
    def catalog(self, api_requests) -> tuple[FastMCP, LexiboardClient]:
        def handler(request: httpx.Request) -> httpx.Response:
            api_requests.append(request)
            path = request.url.path
            if path == "/api/auth/login":
                return httpx.Response(200, json={"access_token": "token", "token_type": "bearer"})
            if path == "/api/boards/b1":
                return httpx.Response(
                    200,
                    json={
                        "id": "b1",
                        "name": "Tenses",
                        "type": "grammar",
                        "itemIds": ["g2", "g1"],
                    },
                )
            if path == "/api/grammar/by-ids":
                return httpx.Response(
                    200,
                    json={"success": True, "data": [{"id": "g2"}, {"id": "g1"}]},
                )
            if path == "/api/boards/b1/items/g1":
                return httpx.Response(
                    200, json={"success": True, "data": {"id": "b1", "itemIds": ["g2"]}}
                )
            return httpx.Response(
                404, json={"success": False, "error": "Board with id b9 not found"}
            )

        client = LexiboardClient(
            "http://catalog.test",
            username="admin",
            password="secret",
            transport=httpx.MockTransport(handler),
        )
        server = FastMCP("lexiboard-test")
        register_catalog_tools(server, client, ErrorClassifier())
        return server, client

    @pytest.mark.asyncio
    async def test_list_board_records(self, catalog, api_requests):
        server, client = catalog
        tool = server._tool_manager.get_tool("list_board_records")

        result = json.loads(await tool.fn(board_id="b1"))

        assert result["board"] == "Tenses"
        assert [record["id"] for record in result["records"]] == ["g2", "g1"]
        assert api_requests[-1].url.params["ids"] == "g2,g1"
        await client.close()

    @pytest.mark.asyncio
    async def test_remove_from_board(self, catalog):
        server, client = catalog
        tool = server._tool_manager.get_tool("remove_from_board")

        result = json.loads(await tool.fn(board_id="b1", record_id="g1"))

        assert result == {"id": "b1", "itemIds": ["g2"]}
        await client.close()

    @pytest.mark.asyncio
    async def test_unknown_board(self, catalog):
        server, client = catalog
        tool = server._tool_manager.get_tool("list_board_records")

        message = await tool.fn(board_id="b9")

        assert message == "Not found: Board with id b9 not found"
        await client.close()
