"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List
from uuid import UUID

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def find_by_ids(self, product_ids: Iterable[UUID]) -> List[Product]:
        """Find every product whose ID is in the given set."""
        pass
