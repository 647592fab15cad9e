"""
Django transaction backed unit of work.
"""
from typing import Optional

from django.db import transaction

from shared.application.unit_of_work import UnitOfWork


class DjangoUnitOfWork(UnitOfWork):
    """Wraps ``transaction.atomic``; nested use becomes a savepoint."""

    def __init__(self, using: Optional[str] = None):
        self.using = using
        self._atomic = None

    def __enter__(self) -> 'DjangoUnitOfWork':
        self._atomic = transaction.atomic(using=self.using)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        atomic, self._atomic = self._atomic, None
        return atomic.__exit__(exc_type, exc_value, traceback)

    def rollback(self) -> None:
        transaction.set_rollback(True, using=self.using)
