from typing import Annotated

from fastapi import APIRouter, Depends, Query
from starlette import status

from lexiboard.application.catalog.use_cases.boards.board_items_use_case import BoardItemsUseCase
from lexiboard.application.catalog.use_cases.boards.board_management_use_case import (
    BoardManagementUseCase,
)
from lexiboard.core import container
from lexiboard.domain.catalog.entities.board import BoardType
from lexiboard.infrastructure.catalog.schemas import (
    BoardCreateRequest,
    BoardItemRequest,
    BoardResponse,
    BoardUpdateRequest,
)
from lexiboard.infrastructure.common.di import inject_use_case
from lexiboard.infrastructure.common.schemas import DataResponse, SuccessResponse
from lexiboard.infrastructure.identity.dependencies import AdminUser


router = APIRouter(prefix="/boards", tags=["boards"])


@router.get("", response_model=list[BoardResponse])
def list_boards(
    board_type: Annotated[BoardType | None, Query(alias="type")] = None,
    use_case: BoardManagementUseCase = Depends(
        inject_use_case(container.board_management_use_case)
    ),
) -> list[BoardResponse]:
    """List boards in display order, optionally of one type."""
    return [BoardResponse.from_entity(board) for board in use_case.list_boards(board_type)]


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(
    board_id: str,
    use_case: BoardManagementUseCase = Depends(
        inject_use_case(container.board_management_use_case)
    ),
) -> BoardResponse:
    """Get a board with its membership."""
    return BoardResponse.from_entity(use_case.get_board(board_id))


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    request: BoardCreateRequest,
    _admin: AdminUser,
    use_case: BoardManagementUseCase = Depends(
        inject_use_case(container.board_management_use_case)
    ),
) -> BoardResponse:
    """Create a board. Without `order` it goes after the boards of its type."""
    board = use_case.create_board(
        name=request.name,
        board_type=request.type,
        order=request.order,
        description=request.description,
        color=request.color,
        icon=request.icon,
    )
    return BoardResponse.from_entity(board)


@router.put("/{board_id}", response_model=BoardResponse)
def update_board(
    board_id: str,
    request: BoardUpdateRequest,
    _admin: AdminUser,
    use_case: BoardManagementUseCase = Depends(
        inject_use_case(container.board_management_use_case)
    ),
) -> BoardResponse:
    """Update the given fields of a board."""
    board = use_case.update_board(
        board_id,
        name=request.name,
        order=request.order,
        description=request.description,
        color=request.color,
        icon=request.icon,
    )
    return BoardResponse.from_entity(board)


@router.delete("/{board_id}", response_model=SuccessResponse)
def delete_board(
    board_id: str,
    _admin: AdminUser,
    use_case: BoardManagementUseCase = Depends(
        inject_use_case(container.board_management_use_case)
    ),
) -> SuccessResponse:
    """Delete a board together with its lessons and membership links."""
    use_case.delete_board(board_id)
    return SuccessResponse(message="Board deleted successfully")


@router.post("/{board_id}/items", response_model=DataResponse[BoardResponse])
def add_board_item(
    board_id: str,
    request: BoardItemRequest,
    _admin: AdminUser,
    use_case: BoardItemsUseCase = Depends(inject_use_case(container.board_items_use_case)),
) -> DataResponse[BoardResponse]:
    """Link a record to a board. Linking an existing member is a no-op."""
    board = use_case.add_item(board_id, request.item_id)
    return DataResponse(data=BoardResponse.from_entity(board))


@router.delete("/{board_id}/items/{item_id}", response_model=DataResponse[BoardResponse])
def remove_board_item(
    board_id: str,
    item_id: str,
    _admin: AdminUser,
    use_case: BoardItemsUseCase = Depends(inject_use_case(container.board_items_use_case)),
) -> DataResponse[BoardResponse]:
    """Unlink a record from a board."""
    board = use_case.remove_item(board_id, item_id)
    return DataResponse(data=BoardResponse.from_entity(board))
