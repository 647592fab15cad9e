"""
Inventory ledger interface.
"""
from abc import ABC, abstractmethod
from uuid import UUID

from shared.application import UseCaseResult


class InventoryLedger(ABC):
    """Atomic stock decrements, one call per order line."""

    @abstractmethod
    def decrement(self, product_id: UUID, quantity: int, product_name: str = None) -> UseCaseResult[int]:
        """
        Subtract ``quantity`` only if at least that much is available.

        The check and the write are one indivisible operation. A failed
        result carries a StockConflictError and leaves stock untouched.
        """
        pass
