"""Protocol for Board repository in catalog context."""

from typing import Protocol

from lexiboard.domain.catalog.entities.board import Board, BoardType
from lexiboard.domain.common.value_objects.ids import BoardId, RecordId


class BoardRepositoryProtocol(Protocol):
    """Protocol for Board repository operations."""

    def find_all(self, board_type: BoardType | None = None) -> list[Board]:
        """
        List boards ordered by `order`, then name.

        Args:
            board_type: Only boards of this type; None lists every board

        Returns:
            List of board entities
        """
        ...

    def find_by_id(self, board_id: BoardId) -> Board | None:
        """Find a board by id."""
        ...

    def save(self, board: Board) -> Board:
        """
        Insert a new board or update an existing one.

        Membership is not written here; use `add_item` and `remove_item`.
        """
        ...

    def delete(self, board: Board) -> None:
        """Delete a board together with its lessons and membership links."""
        ...

    def add_item(self, board_id: BoardId, record_id: RecordId) -> None:
        """Link a record to a board at the end of its membership order."""
        ...

    def remove_item(self, board_id: BoardId, record_id: RecordId) -> None:
        """Unlink a record from a board."""
        ...

    def remove_record_from_all_boards(self, record_id: RecordId) -> int:
        """
        Unlink a record from every board.

        Returns:
            Number of links removed
        """
        ...
