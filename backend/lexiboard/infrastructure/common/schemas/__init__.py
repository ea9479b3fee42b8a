from .response_wrappers import (
    DataResponse,
    ErrorResponse,
    PaginatedResponse,
    SuccessResponse,
)

__all__ = ["DataResponse", "ErrorResponse", "PaginatedResponse", "SuccessResponse"]
