"""Catalog MCP tools."""

import json
from typing import Any

import httpx
from mcp.server.fastmcp import FastMCP

from lexiboard.domain.catalog.entities.board import BoardType
from lexiboard.domain.catalog.entities.record import RecordKind
from lexiboard_client.client import LexiboardClient
from lexiboard_client.errors import CatalogError, ErrorClassifier
from lexiboard_client.ingestion import IngestionForm, SubmissionStatus


def parse_kind(value: str) -> RecordKind:
    """Accept a kind (`expression`) or its URL segment (`expressions`)."""
    try:
        return RecordKind(value)
    except ValueError:
        return RecordKind.from_resource(value)


def _dump(result: Any) -> str:
    return json.dumps(result, indent=2, default=str, ensure_ascii=False)


def register_catalog_tools(
    server: FastMCP, client: LexiboardClient, classifier: ErrorClassifier
) -> None:
    """Register catalog tools with the MCP server."""

    @server.tool()
    async def list_boards(board_type: str | None = None) -> str:
        """List learning boards in display order.

        Args:
            board_type: One of vocabulary, grammar, idioms (default: all)
        """
        try:
            return _dump(await client.list_boards(board_type))
        except (CatalogError, httpx.HTTPError) as e:
            return classifier.message_for(e)

    @server.tool()
    async def list_lessons(board_id: str) -> str:
        """List the lessons of a board in order.

        Args:
            board_id: The ID of the board
        """
        try:
            return _dump(await client.list_lessons(board_id))
        except (CatalogError, httpx.HTTPError) as e:
            return classifier.message_for(e)

    @server.tool()
    async def list_board_records(board_id: str) -> str:
        """List the records on a board, in board order.

        Args:
            board_id: The ID of the board
        """
        try:
            board = await client.get_board(board_id)
            kind = BoardType(board.get("type")).record_kind
            records = await client.get_records_by_ids(kind, list(board.get("itemIds") or []))
        except ValueError as e:
            return str(e)
        except (CatalogError, httpx.HTTPError) as e:
            return classifier.message_for(e)
        return _dump({"board": board.get("name"), "records": records})

    @server.tool()
    async def remove_from_board(board_id: str, record_id: str) -> str:
        """Take a record off a board. The record itself is kept.

        Args:
            board_id: The ID of the board
            record_id: The ID of the record
        """
        try:
            board = await client.remove_board_item(board_id, record_id)
        except (CatalogError, httpx.HTTPError) as e:
            return classifier.message_for(e)
        return _dump(board)

    @server.tool()
    async def fetch_word(word: str) -> str:
        """Look a word up in the dictionary and return a draft vocabulary record.

        The draft is not saved. Review it, then pass it to create_record.

        Args:
            word: The English word to look up
        """
        form = IngestionForm(client, RecordKind.VOCABULARY, classifier=classifier)
        outcome = await form.fetch(word)
        if outcome.status is not SubmissionStatus.SUCCEEDED:
            return outcome.message or outcome.status.value
        return _dump(outcome.record)

    @server.tool()
    async def create_record(kind: str, json_text: str, board_id: str | None = None) -> str:
        """Create a vocabulary, expression or grammar record from a JSON document.

        Args:
            kind: vocabulary, expression or grammar
            json_text: The record as a JSON object (headword or title, level, examples...)
            board_id: Optional board to add the new record to
        """
        try:
            record_kind = parse_kind(kind)
        except ValueError as e:
            return str(e)

        form = IngestionForm(client, record_kind, board_id=board_id, classifier=classifier)
        outcome = await form.submit_json(json_text)
        if outcome.status is SubmissionStatus.SUCCEEDED:
            return _dump({"record": outcome.record, "addedToBoard": outcome.associated})
        return outcome.message or outcome.status.value

    @server.tool()
    async def delete_record(kind: str, record_id: str) -> str:
        """Delete a record; it is also removed from every board.

        Args:
            kind: vocabulary, expression or grammar
            record_id: The ID of the record
        """
        try:
            record_kind = parse_kind(kind)
            await client.delete_record(record_kind, record_id)
        except ValueError as e:
            return str(e)
        except (CatalogError, httpx.HTTPError) as e:
            return classifier.message_for(e)
        return _dump({"deleted": record_id})
