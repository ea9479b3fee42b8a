"""Board entity: a topical collection of records."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from lexiboard.domain.catalog.entities.record import RecordKind
from lexiboard.domain.common.entity import Entity
from lexiboard.domain.common.exceptions import ValidationError
from lexiboard.domain.common.value_objects.ids import BoardId, RecordId


class BoardType(StrEnum):
    """Catalog section a board belongs to."""

    VOCABULARY = "vocabulary"
    GRAMMAR = "grammar"
    IDIOMS = "idioms"

    @property
    def record_kind(self) -> RecordKind:
        """Kind of record the boards of this type collect."""
        if self is BoardType.IDIOMS:
            return RecordKind.EXPRESSION
        return RecordKind(self.value)


@dataclass
class Board(Entity[BoardId]):
    """
    Board entity.

    Boards group records and own lessons. `item_ids` is the ordered
    membership projection; links are stored separately and maintained by
    the repository.
    """

    # Identity
    id: BoardId

    # Content
    name: str
    type: BoardType
    order: int

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Optional fields
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    item_ids: list[RecordId] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise ValidationError("Board name cannot be empty", field="name")

        if self.order < 0:
            raise ValidationError("Board order cannot be negative", field="order")

    # Query methods
    def contains(self, record_id: RecordId) -> bool:
        return record_id in self.item_ids

    # Command methods
    def add_item(self, record_id: RecordId) -> bool:
        """Append a record. Returns False when it was already on the board."""
        if self.contains(record_id):
            return False
        self.item_ids.append(record_id)
        self.updated_at = datetime.now(UTC)
        return True

    def remove_item(self, record_id: RecordId) -> bool:
        """Drop a record. Returns False when it was not on the board."""
        if not self.contains(record_id):
            return False
        self.item_ids = [item_id for item_id in self.item_ids if item_id != record_id]
        self.updated_at = datetime.now(UTC)
        return True

    def update_details(
        self,
        name: str | None = None,
        order: int | None = None,
        description: str | None = None,
        color: str | None = None,
        icon: str | None = None,
    ) -> None:
        """Update the fields that were given."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Board name cannot be empty", field="name")
            self.name = name.strip()
        if order is not None:
            if order < 0:
                raise ValidationError("Board order cannot be negative", field="order")
            self.order = order
        if description is not None:
            self.description = description
        if color is not None:
            self.color = color
        if icon is not None:
            self.icon = icon
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str,
        type: BoardType,
        order: int = 0,
        description: str | None = None,
        color: str | None = None,
        icon: str | None = None,
    ) -> "Board":
        """Factory for creating new board."""
        now = datetime.now(UTC)
        return cls(
            id=BoardId.generate(),
            name=name.strip(),
            type=type,
            order=order,
            description=description,
            color=color,
            icon=icon,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BoardId,
        name: str,
        type: BoardType,
        order: int,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
        color: str | None = None,
        icon: str | None = None,
        item_ids: list[RecordId] | None = None,
    ) -> "Board":
        """Factory for reconstituting board from persistence."""
        return cls(
            id=id,
            name=name,
            type=type,
            order=order,
            description=description,
            color=color,
            icon=icon,
            item_ids=list(item_ids or []),
            created_at=created_at,
            updated_at=updated_at,
        )
