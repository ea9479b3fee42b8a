"""Database models."""

from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    JSON,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lexiboard.database import Base


def generate_id() -> str:
    """Opaque string id for new rows."""
    return uuid4().hex


class LexicalRecord(Base):
    """Vocabulary, expression and grammar entries, told apart by `kind`."""

    __tablename__ = "lexical_records"
    __table_args__ = (
        UniqueConstraint("kind", "headword_key", name="uq_lexical_records_kind_headword_key"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    kind: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    headword: Mapped[str] = mapped_column(String(255), nullable=False)
    # Trimmed, case-folded headword; the uniqueness key
    headword_key: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    phonetic: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    meaning: Mapped[str] = mapped_column(Text, nullable=False, default="")
    audio_url: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    band: Mapped[float | None] = mapped_column(Float, nullable=True)
    level: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    examples: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    synonyms: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    topics: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    types: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    word_forms: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    grammar: Mapped[str | None] = mapped_column(Text, nullable=True)
    expression_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True)
    # Grammar entries only; their title and explanation live in headword and meaning
    structure: Mapped[str] = mapped_column(Text, nullable=False, default="")
    usage: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of LexicalRecord."""
        return f"<LexicalRecord(id={self.id}, kind='{self.kind}', headword='{self.headword}')>"


class Board(Base):
    """Topical collection of records."""

    __tablename__ = "boards"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    icon: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    items: Mapped[list["BoardItem"]] = relationship(
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BoardItem.position",
    )
    lessons: Mapped[list["Lesson"]] = relationship(
        back_populates="board",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Lesson.order",
    )

    def __repr__(self) -> str:
        """String representation of Board."""
        return f"<Board(id={self.id}, name='{self.name}', type='{self.type}')>"


class Lesson(Base):
    """Ordered sub-unit of a board."""

    __tablename__ = "lessons"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_id)
    board_id: Mapped[str] = mapped_column(
        ForeignKey("boards.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    board: Mapped["Board"] = relationship(back_populates="lessons")

    def __repr__(self) -> str:
        """String representation of Lesson."""
        return f"<Lesson(id={self.id}, board_id={self.board_id}, title='{self.title}')>"


class BoardItem(Base):
    """Membership link between a board and a record."""

    __tablename__ = "board_items"

    board_id: Mapped[str] = mapped_column(
        ForeignKey("boards.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    record_id: Mapped[str] = mapped_column(
        ForeignKey("lexical_records.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    board: Mapped["Board"] = relationship(back_populates="items")

    def __repr__(self) -> str:
        """String representation of BoardItem."""
        return f"<BoardItem(board_id={self.board_id}, record_id={self.record_id})>"
