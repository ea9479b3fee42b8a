"""
Application common module.

Contains base classes for application layer:
- UnitOfWork: Transaction boundary for write use cases
- Pagination: Page parameters for list queries
"""

from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination
from .unit_of_work import UnitOfWork

__all__ = [
    "MAX_PAGE_SIZE",
    "PaginatedResult",
    "Pagination",
    "UnitOfWork",
]
