"""
Cart storage interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..cart import CartLine


class CartStorage(ABC):
    """Durable client-side home of the cart between sessions."""

    @abstractmethod
    def load(self) -> Optional[List[dict]]:
        """
        Return the persisted line payloads, or None if nothing was saved.

        May raise OSError or ValueError when the stored data is unreadable.
        """
        pass

    @abstractmethod
    def save(self, lines: Sequence[CartLine]) -> None:
        """Replace the persisted cart with ``lines``."""
        pass
