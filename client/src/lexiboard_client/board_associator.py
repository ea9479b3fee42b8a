"""Best-effort linking of a newly created record to a board."""

import logging

from lexiboard_client.client import CatalogGateway

logger = logging.getLogger(__name__)


class BoardAssociator:
    """Adds a freshly created record to the board the form was opened from.

    The link is a secondary step outside the create transaction. When it
    fails the failure is logged and dropped: the record stays created and the
    form still reports success. This keeps the long-standing behavior even
    though it can leave a record on no board without the user noticing.
    """

    def __init__(self, gateway: CatalogGateway) -> None:
        self.gateway = gateway

    async def associate(self, board_id: str | None, record_id: str) -> bool:
        """
        Link a record to a board.

        Args:
            board_id: Target board; None means there is nothing to do
            record_id: Id of the record that was just created

        Returns:
            True if the link was written (or already existed)
        """
        if not board_id:
            return False

        try:
            await self.gateway.add_board_item(board_id, record_id)
        except Exception as e:
            logger.warning(
                f"Failed to add record {record_id} to board {board_id}: {e!s}", exc_info=True
            )
            return False

        logger.info(f"Added record {record_id} to board {board_id}")
        return True
