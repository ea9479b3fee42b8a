import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from starlette import status

from lexiboard.application.catalog.use_cases.lessons.lesson_management_use_case import (
    LessonManagementUseCase,
)
from lexiboard.core import container
from lexiboard.infrastructure.catalog.schemas import (
    LessonCreateRequest,
    LessonResponse,
    LessonUpdateRequest,
)
from lexiboard.infrastructure.common.di import inject_use_case
from lexiboard.infrastructure.common.schemas import SuccessResponse
from lexiboard.infrastructure.identity.dependencies import AdminUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.get("", response_model=list[LessonResponse])
def list_lessons(
    board_id: Annotated[str, Query(alias="boardId", min_length=1)],
    use_case: LessonManagementUseCase = Depends(
        inject_use_case(container.lesson_management_use_case)
    ),
) -> list[LessonResponse]:
    """List a board's lessons ordered by `order`."""
    return [LessonResponse.from_entity(lesson) for lesson in use_case.list_lessons(board_id)]


@router.get("/{lesson_id}", response_model=LessonResponse)
def get_lesson(
    lesson_id: str,
    use_case: LessonManagementUseCase = Depends(
        inject_use_case(container.lesson_management_use_case)
    ),
) -> LessonResponse:
    """Get a lesson by id."""
    return LessonResponse.from_entity(use_case.get_lesson(lesson_id))


@router.post("", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    request: LessonCreateRequest,
    _admin: AdminUser,
    use_case: LessonManagementUseCase = Depends(
        inject_use_case(container.lesson_management_use_case)
    ),
) -> LessonResponse:
    """Create a lesson. Without `order` it is placed after the board's existing lessons."""
    lesson = use_case.create_lesson(
        board_id=request.board_id,
        title=request.title,
        description=request.description,
        order=request.order,
    )
    logger.info(f"Created lesson {lesson.id} on board {request.board_id}")
    return LessonResponse.from_entity(lesson)


@router.put("/{lesson_id}", response_model=LessonResponse)
def update_lesson(
    lesson_id: str,
    request: LessonUpdateRequest,
    _admin: AdminUser,
    use_case: LessonManagementUseCase = Depends(
        inject_use_case(container.lesson_management_use_case)
    ),
) -> LessonResponse:
    """Update the given fields of a lesson."""
    lesson = use_case.update_lesson(
        lesson_id, title=request.title, description=request.description, order=request.order
    )
    return LessonResponse.from_entity(lesson)


@router.delete("/{lesson_id}", response_model=SuccessResponse)
def delete_lesson(
    lesson_id: str,
    _admin: AdminUser,
    use_case: LessonManagementUseCase = Depends(
        inject_use_case(container.lesson_management_use_case)
    ),
) -> SuccessResponse:
    """Delete a lesson."""
    use_case.delete_lesson(lesson_id)
    return SuccessResponse(message="Lesson deleted successfully")
