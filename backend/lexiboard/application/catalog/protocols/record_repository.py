"""Protocol for LexicalRecord repository in catalog context."""

from dataclasses import dataclass
from typing import Protocol

from lexiboard.application.common.pagination import Pagination
from lexiboard.domain.catalog.entities.record import LexicalRecord, RecordKind
from lexiboard.domain.common.value_objects.ids import RecordId


@dataclass(frozen=True)
class RecordFilters:
    """
    Filters for record listings.

    Attributes:
        letter: First letter of the headword (case-insensitive)
        topic: Exact topic the record must carry
        level: Exact level
        min_band: Lowest band to include
        search: Free text matched against headword, phonetic, meaning, structure
            and examples
    """

    letter: str | None = None
    topic: str | None = None
    level: str | None = None
    min_band: float | None = None
    search: str | None = None


class RecordRepositoryProtocol(Protocol):
    """Protocol for LexicalRecord repository operations."""

    def find_by_id(
        self, record_id: RecordId, kind: RecordKind | None = None
    ) -> LexicalRecord | None:
        """
        Find a record by id.

        Args:
            record_id: The record ID
            kind: Restrict the lookup to one kind; None matches any kind

        Returns:
            Record entity or None if not found
        """
        ...

    def find_by_ids(self, kind: RecordKind, record_ids: list[RecordId]) -> list[LexicalRecord]:
        """
        Find records of one kind by id.

        Returns:
            The records found, in the order of `record_ids`; unknown ids are skipped
        """
        ...

    def find_by_headword(self, kind: RecordKind, headword: str) -> LexicalRecord | None:
        """
        Find a record by headword, ignoring case and surrounding whitespace.

        Args:
            kind: Record kind
            headword: Headword to look up

        Returns:
            Record entity or None if not found
        """
        ...

    def save(self, record: LexicalRecord) -> LexicalRecord:
        """
        Insert a new record or update an existing one.

        Args:
            record: Record entity; an empty id means insert

        Returns:
            The record with its store-assigned id
        """
        ...

    def delete(self, record: LexicalRecord) -> None:
        """Delete a record."""
        ...

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
        ...
