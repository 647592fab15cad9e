"""
Order gateway interface.
"""
from abc import ABC, abstractmethod


class OrderGateway(ABC):
    """
    Client view of the order service.

    Implementations raise OrderGatewayError on any failure.
    """

    @abstractmethod
    def place_order(self, payload: dict) -> dict:
        """Submit an order; returns the body with ``orderId`` and ``total``."""
        pass

    @abstractmethod
    def list_orders(self, page: int = 1) -> dict:
        """Fetch one page of the caller's orders."""
        pass

    @abstractmethod
    def get_order(self, order_id: str) -> dict:
        """Fetch one of the caller's orders."""
        pass
