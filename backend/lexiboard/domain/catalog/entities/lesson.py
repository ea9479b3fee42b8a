"""Lesson entity: an ordered sub-unit of a board."""

from dataclasses import dataclass
from datetime import UTC, datetime

from lexiboard.domain.common.entity import Entity
from lexiboard.domain.common.exceptions import ValidationError
from lexiboard.domain.common.value_objects.ids import BoardId, LessonId


@dataclass
class Lesson(Entity[LessonId]):
    """
    Lesson entity.

    A lesson belongs to exactly one board and is removed with it.
    """

    # Identity
    id: LessonId
    board_id: BoardId

    # Content
    title: str
    order: int

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Optional fields
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Lesson title cannot be empty", field="title")

        if self.order < 0:
            raise ValidationError("Lesson order cannot be negative", field="order")

    # Command methods
    def update_details(
        self,
        title: str | None = None,
        order: int | None = None,
        description: str | None = None,
    ) -> None:
        """Update the fields that were given."""
        if title is not None:
            if not title.strip():
                raise ValidationError("Lesson title cannot be empty", field="title")
            self.title = title.strip()
        if order is not None:
            if order < 0:
                raise ValidationError("Lesson order cannot be negative", field="order")
            self.order = order
        if description is not None:
            self.description = description
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        board_id: BoardId,
        title: str,
        order: int,
        description: str | None = None,
    ) -> "Lesson":
        """Factory for creating new lesson."""
        now = datetime.now(UTC)
        return cls(
            id=LessonId.generate(),
            board_id=board_id,
            title=title.strip(),
            order=order,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LessonId,
        board_id: BoardId,
        title: str,
        order: int,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
    ) -> "Lesson":
        """Factory for reconstituting lesson from persistence."""
        return cls(
            id=id,
            board_id=board_id,
            title=title,
            order=order,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )
