"""Repository for LexicalRecord domain entity."""

import json

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexiboard.application.catalog.protocols.record_repository import RecordFilters
from lexiboard.application.common.pagination import Pagination
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordKind
from lexiboard.domain.catalog.exceptions import DuplicateRecordError
from lexiboard.domain.common.value_objects.ids import RecordId
from lexiboard.infrastructure.catalog.mappers.record_mapper import RecordMapper
from lexiboard.models import LexicalRecord as LexicalRecordORM


class RecordRepository:
    """Domain-centric repository for LexicalRecord persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = RecordMapper()

    def _get_orm(
        self, record_id: RecordId, kind: RecordKind | None = None
    ) -> LexicalRecordORM | None:
        stmt = select(LexicalRecordORM).where(LexicalRecordORM.id == record_id.value)
        if kind is not None:
            stmt = stmt.where(LexicalRecordORM.kind == kind.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(
        self, record_id: RecordId, kind: RecordKind | None = None
    ) -> LexicalRecord | None:
        """Find record by ID, optionally restricted to one kind."""
        orm_model = self._get_orm(record_id, kind)
        if not orm_model:
            return None
        return self.mapper.to_domain(orm_model)

    def find_by_ids(self, kind: RecordKind, record_ids: list[RecordId]) -> list[LexicalRecord]:
        """Find records of one kind by id, in the order the ids are given."""
        if not record_ids:
            return []
        stmt = select(LexicalRecordORM).where(
            LexicalRecordORM.kind == kind.value,
            LexicalRecordORM.id.in_([record_id.value for record_id in record_ids]),
        )
        by_id = {orm.id: orm for orm in self.db.execute(stmt).scalars().all()}
        return [
            self.mapper.to_domain(by_id[record_id.value])
            for record_id in record_ids
            if record_id.value in by_id
        ]

    def find_by_headword(self, kind: RecordKind, headword: str) -> LexicalRecord | None:
        """Find record by headword, ignoring case and surrounding whitespace."""
        stmt = select(LexicalRecordORM).where(
            LexicalRecordORM.kind == kind.value,
            LexicalRecordORM.headword_key == headword.strip().casefold(),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return None
        return self.mapper.to_domain(orm_model)

    def save(self, record: LexicalRecord) -> LexicalRecord:
        """
        Persist record to database.

        Raises:
            DuplicateRecordError: If the unique (kind, headword) index rejects the row
        """
        try:
            if not record.is_persisted:
                # Create new
                orm_model = self.mapper.to_orm(record)
                self.db.add(orm_model)
                self.db.flush()
                return self.mapper.to_domain(orm_model)

            # Update existing
            existing_orm = self._get_orm(record.id)
            if existing_orm is None:
                raise ValueError(f"Record {record.id} is not in the store")
            self.mapper.to_orm(record, existing_orm)
            self.db.flush()
            return self.mapper.to_domain(existing_orm)
        except IntegrityError as e:
            raise DuplicateRecordError(record.kind.value, record.headword) from e

    def delete(self, record: LexicalRecord) -> None:
        """
        Hard delete a record from the database.

        Board links are removed by the caller; the foreign key cascade covers
        any that remain.
        """
        orm_model = self._get_orm(record.id)
        if orm_model is not None:
            self.db.delete(orm_model)
            self.db.flush()

    def search(
        self, kind: RecordKind, filters: RecordFilters, pagination: Pagination
    ) -> tuple[list[LexicalRecord], int]:
        """
        List records of one kind, ordered by headword.

        Args:
            kind: Record kind
            filters: Listing filters
            pagination: Page to return

        Returns:
            Tuple of (records on the page, total matching records)
        """
        stmt = select(LexicalRecordORM).where(LexicalRecordORM.kind == kind.value)

        if filters.letter:
            stmt = stmt.where(
                LexicalRecordORM.headword_key.startswith(filters.letter.casefold(), autoescape=True)
            )
        if filters.topic:
            # Topics are a JSON array; match the quoted element in its text form
            quoted = json.dumps(filters.topic, ensure_ascii=False)
            stmt = stmt.where(
                cast(LexicalRecordORM.topics, String).contains(quoted, autoescape=True)
            )
        if filters.level:
            stmt = stmt.where(LexicalRecordORM.level == filters.level)
        if filters.min_band is not None:
            stmt = stmt.where(LexicalRecordORM.band >= filters.min_band)
        if filters.search:
            term = filters.search.lower()
            stmt = stmt.where(
                or_(
                    LexicalRecordORM.headword_key.contains(
                        filters.search.casefold(), autoescape=True
                    ),
                    func.lower(LexicalRecordORM.phonetic).contains(term, autoescape=True),
                    func.lower(LexicalRecordORM.meaning).contains(term, autoescape=True),
                    func.lower(LexicalRecordORM.structure).contains(term, autoescape=True),
                    func.lower(cast(LexicalRecordORM.examples, String)).contains(
                        term, autoescape=True
                    ),
                )
            )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = self.db.execute(count_stmt).scalar_one()

        page_stmt = (
            stmt.order_by(LexicalRecordORM.headword_key)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(page_stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total
