"""Tests for BoardAssociator."""

import logging
from unittest.mock import AsyncMock

import httpx
import pytest

from lexiboard_client.board_associator import BoardAssociator
from lexiboard_client.errors import NotFoundError


@pytest.fixture
def gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.add_board_item.return_value = {"id": "b1", "itemIds": ["r1"]}
    return gateway


class TestAssociate:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("board_id", [None, ""])
    async def test_no_board_is_a_no_op(self, gateway, board_id):
        associator = BoardAssociator(gateway)

        assert await associator.associate(board_id, "r1") is False
        gateway.add_board_item.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_links_the_record(self, gateway):
        associator = BoardAssociator(gateway)

        assert await associator.associate("b1", "r1") is True
        gateway.add_board_item.assert_awaited_once_with("b1", "r1")

    @pytest.mark.asyncio
    async def test_gateway_error_is_logged_and_dropped(self, gateway, caplog):
        gateway.add_board_item.side_effect = NotFoundError(
            "Board with id b1 not found", status_code=404
        )
        associator = BoardAssociator(gateway)

        with caplog.at_level(logging.WARNING, logger="lexiboard_client.board_associator"):
            linked = await associator.associate("b1", "r1")

        assert linked is False
        assert "Failed to add record r1 to board b1" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_error_is_dropped(self, gateway):
        gateway.add_board_item.side_effect = httpx.ConnectError("connection refused")
        associator = BoardAssociator(gateway)

        assert await associator.associate("b1", "r1") is False

    @pytest.mark.asyncio
    async def test_unexpected_error_is_logged_and_dropped(self, gateway, caplog):
        gateway.add_board_item.side_effect = KeyError("data")
        associator = BoardAssociator(gateway)

        with caplog.at_level(logging.WARNING, logger="lexiboard_client.board_associator"):
            linked = await associator.associate("b1", "r1")

        assert linked is False
        assert caplog.records[-1].exc_info is not None
