"""
Unit of Work interface.

The Unit of Work marks the transaction boundary of a write use case. Every
repository call made inside one use case is committed together or not at
all.

Example:
    class DeleteRecordUseCase:
        def __init__(self, repo: RecordRepositoryProtocol, uow: UnitOfWork) -> None:
            self._repo = repo
            self._uow = uow

        def delete(self, kind: RecordKind, record_id: str) -> None:
            with self._uow:
                self._repo.remove_from_all_boards(...)
                self._repo.delete(...)
                self._uow.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        This persists all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
