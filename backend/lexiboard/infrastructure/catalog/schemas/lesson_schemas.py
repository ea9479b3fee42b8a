"""Pydantic schemas for lesson API requests and responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lexiboard.domain.catalog.entities.lesson import Lesson


class LessonResponse(BaseModel):
    """Lesson as returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    board_id: str
    title: str
    order: int
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, lesson: Lesson) -> "LessonResponse":
        return cls(
            id=lesson.id.value,
            board_id=lesson.board_id.value,
            title=lesson.title,
            order=lesson.order,
            description=lesson.description,
            created_at=lesson.created_at,
            updated_at=lesson.updated_at,
        )


class LessonCreateRequest(BaseModel):
    """Body of a lesson create request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    board_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(default=None, ge=0)


class LessonUpdateRequest(BaseModel):
    """Body of a lesson update request. Omitted fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(default=None, ge=0)
