"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order header and its lines."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_for_customer(self, order_id: UUID, customer_id: UUID) -> Optional[Order]:
        """Find an order only if it belongs to the customer."""
        pass

    @abstractmethod
    def save_status(self, order: Order, expected_status: OrderStatus) -> bool:
        """
        Persist a status change only if the stored status is still
        ``expected_status``. Returns False when another writer got there first.
        """
        pass

    @abstractmethod
    def contains_product_of(self, order_id: UUID, producer_id: UUID) -> bool:
        """Whether any line of the order is for one of the producer's products."""
        pass
