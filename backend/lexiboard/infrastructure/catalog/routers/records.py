"""Vocabulary, expression and grammar endpoints.

All kinds share one set of routes; `{resource}` selects the kind. This
router must be included after every router with a fixed first path segment.
"""

import logging
from enum import StrEnum
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiboard.application.catalog.protocols.record_repository import RecordFilters
from lexiboard.application.catalog.use_cases.records.create_record_use_case import (
    CreateRecordUseCase,
)
from lexiboard.application.catalog.use_cases.records.delete_record_use_case import (
    DeleteRecordUseCase,
)
from lexiboard.application.catalog.use_cases.records.fetch_word_use_case import FetchWordUseCase
from lexiboard.application.catalog.use_cases.records.get_record_use_case import GetRecordUseCase
from lexiboard.application.catalog.use_cases.records.search_records_use_case import (
    SearchRecordsUseCase,
)
from lexiboard.application.catalog.use_cases.records.update_record_use_case import (
    UpdateRecordUseCase,
)
from lexiboard.application.common.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Pagination
from lexiboard.core import container
from lexiboard.domain.catalog.entities.record import RecordKind
from lexiboard.domain.common.exceptions import DomainError
from lexiboard.infrastructure.catalog.schemas import FetchWordRequest, RecordWriteRequest
from lexiboard.infrastructure.common.di import inject_use_case
from lexiboard.infrastructure.common.schemas import (
    DataResponse,
    PaginatedResponse,
    SuccessResponse,
)
from lexiboard.infrastructure.identity.dependencies import AdminUser

logger = logging.getLogger(__name__)

router = APIRouter(tags=["records"])


class RecordResource(StrEnum):
    """URL segment for each record kind."""

    VOCABULARY = "vocabulary"
    EXPRESSIONS = "expressions"
    GRAMMAR = "grammar"

    @property
    def kind(self) -> RecordKind:
        return RecordKind.from_resource(self.value)


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("/vocabulary/fetch", response_model=DataResponse[dict[str, Any]])
async def fetch_word(
    request: FetchWordRequest,
    _admin: AdminUser,
    use_case: FetchWordUseCase = Depends(inject_use_case(container.fetch_word_use_case)),
) -> DataResponse[dict[str, Any]]:
    """
    Look a word up in the dictionary and return a draft for review.

    Nothing is stored.
    """
    draft = await use_case.fetch(request.word)
    return DataResponse(data=draft.to_document())


@router.post(
    "/{resource}/create",
    response_model=DataResponse[dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    resource: RecordResource,
    request: RecordWriteRequest,
    _admin: AdminUser,
    use_case: CreateRecordUseCase = Depends(inject_use_case(container.create_record_use_case)),
) -> DataResponse[dict[str, Any]]:
    """
    Create a record from manual data or JSON import text.

    Raises:
        HTTPException: 400 on validation or JSON errors, 409 on duplicates
    """
    try:
        record = await use_case.create(resource.kind, request.to_source(resource.kind))
        return DataResponse(data=record.to_document())
    except DomainError:
        # Re-raise domain exceptions - handled by exception handlers
        raise
    except Exception as e:
        raise _unexpected(f"create {resource.kind.value}", e) from e


@router.put("/{resource}/{record_id}", response_model=DataResponse[dict[str, Any]])
async def update_record(
    resource: RecordResource,
    record_id: str,
    request: RecordWriteRequest,
    _admin: AdminUser,
    use_case: UpdateRecordUseCase = Depends(inject_use_case(container.update_record_use_case)),
) -> DataResponse[dict[str, Any]]:
    """
    Replace a record's content through the ingestion pipeline.

    Raises:
        HTTPException: 400 on validation errors, 404 if missing, 409 on duplicates
    """
    try:
        record = await use_case.update(
            resource.kind, record_id, request.to_source(resource.kind)
        )
        return DataResponse(data=record.to_document())
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"update {resource.kind.value} {record_id}", e) from e


@router.delete("/{resource}/delete/{record_id}", response_model=SuccessResponse)
def delete_record(
    resource: RecordResource,
    record_id: str,
    _admin: AdminUser,
    use_case: DeleteRecordUseCase = Depends(inject_use_case(container.delete_record_use_case)),
) -> SuccessResponse:
    """
    Delete a record and remove it from every board.

    Raises:
        HTTPException: 404 if the record does not exist
    """
    try:
        use_case.delete(resource.kind, record_id)
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected(f"delete {resource.kind.value} {record_id}", e) from e

    return SuccessResponse(message=f"{resource.kind.value.capitalize()} deleted successfully")


@router.get("/{resource}/by-ids", response_model=DataResponse[list[dict[str, Any]]])
def get_records_by_ids(
    resource: RecordResource,
    ids: Annotated[str, Query(description="Comma-separated record ids")],
    use_case: GetRecordUseCase = Depends(inject_use_case(container.get_record_use_case)),
) -> DataResponse[list[dict[str, Any]]]:
    """
    Get several records at once, in the order of `ids`.

    Unknown ids are skipped; an empty `ids` returns an empty list.
    """
    records = use_case.get_many(resource.kind, ids.split(","))
    return DataResponse(data=[record.to_document() for record in records])


@router.get("/{resource}/{record_id}", response_model=DataResponse[dict[str, Any]])
def get_record(
    resource: RecordResource,
    record_id: str,
    use_case: GetRecordUseCase = Depends(inject_use_case(container.get_record_use_case)),
) -> DataResponse[dict[str, Any]]:
    """Get one record by id."""
    record = use_case.get(resource.kind, record_id)
    return DataResponse(data=record.to_document())


@router.get("/{resource}", response_model=DataResponse[PaginatedResponse[dict[str, Any]]])
def list_records(
    resource: RecordResource,
    letter: Annotated[str | None, Query(max_length=1)] = None,
    topic: str | None = None,
    level: str | None = None,
    band: Annotated[float | None, Query(ge=1.0, le=9.0)] = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
    use_case: SearchRecordsUseCase = Depends(inject_use_case(container.search_records_use_case)),
) -> DataResponse[PaginatedResponse[dict[str, Any]]]:
    """
    List records of one kind, ordered by headword.

    Args:
        letter: First letter of the headword
        topic: Topic the record must carry
        level: beginner, intermediate or advanced
        band: Minimum band
        search: Text matched against headword, phonetic, meaning, structure and examples
        page: Page number (1-indexed)
        limit: Page size
    """
    result = use_case.search(
        resource.kind,
        RecordFilters(letter=letter, topic=topic, level=level, min_band=band, search=search),
        Pagination(page=page, page_size=limit),
    )
    return DataResponse(
        data=PaginatedResponse(
            items=[record.to_document() for record in result.items],
            total=result.total,
            page=result.page,
            total_pages=result.total_pages,
        )
    )
