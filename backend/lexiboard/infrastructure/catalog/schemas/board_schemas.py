"""Pydantic schemas for board API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lexiboard.domain.catalog.entities.board import Board, BoardType


class BoardResponse(BaseModel):
    """Board as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    type: BoardType
    order: int
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    item_ids: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, board: Board) -> "BoardResponse":
        return cls(
            id=board.id.value,
            name=board.name,
            type=board.type,
            order=board.order,
            description=board.description,
            color=board.color,
            icon=board.icon,
            item_ids=[item_id.value for item_id in board.item_ids],
            created_at=board.created_at,
            updated_at=board.updated_at,
        )


class BoardCreateRequest(BaseModel):
    """Body of a board create request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    type: BoardType
    order: int | None = Field(default=None, ge=0)
    description: str | None = None
    color: str | None = Field(default=None, max_length=50)
    icon: str | None = Field(default=None, max_length=50)


class BoardUpdateRequest(BaseModel):
    """Body of a board update request. Omitted fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    order: int | None = Field(default=None, ge=0)
    description: str | None = None
    color: str | None = Field(default=None, max_length=50)
    icon: str | None = Field(default=None, max_length=50)


class BoardItemRequest(BaseModel):
    """Body of an add-to-board request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    item_id: str = Field(..., min_length=1)
