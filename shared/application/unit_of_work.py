"""
Unit of work interface.
"""
from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    All-or-nothing boundary around a group of writes.

    Used as a context manager. Leaving the block commits unless
    ``rollback()`` was called or an exception escaped, in which case every
    write made inside the block is discarded.
    """

    @abstractmethod
    def __enter__(self) -> 'UnitOfWork':
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard the writes of this unit of work when the block exits."""
        pass
