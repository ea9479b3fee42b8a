"""Use case for listing lexical records with filters."""

from lexiboard.application.catalog.protocols.record_repository import (
    RecordFilters,
    RecordRepositoryProtocol,
)
from lexiboard.application.common.pagination import PaginatedResult, Pagination
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordKind


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class SearchRecordsUseCase:
    """Use case for paginated record listings."""

    def __init__(self, record_repository: RecordRepositoryProtocol) -> None:
        self.record_repository = record_repository

    def search(
        self,
        kind: RecordKind,
        filters: RecordFilters,
        pagination: Pagination,
    ) -> PaginatedResult[LexicalRecord]:
        """
        List one page of records of a kind.

        Blank filter values are ignored and `letter` only uses its first
        character.
        """
        letter = _blank_to_none(filters.letter)
        cleaned = RecordFilters(
            letter=letter[0] if letter else None,
            topic=_blank_to_none(filters.topic),
            level=_blank_to_none(filters.level),
            min_band=filters.min_band,
            search=_blank_to_none(filters.search),
        )
        items, total = self.record_repository.search(kind, cleaned, pagination)
        return PaginatedResult(items=items, total=total, pagination=pagination)
