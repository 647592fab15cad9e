"""
Order status value object.
"""
from enum import Enum
from typing import FrozenSet


class OrderStatus(str, Enum):
    """Lifecycle of a placed order."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def choices(cls):
        return [(status.value, status.name.title()) for status in cls]

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def allowed_next(self) -> FrozenSet['OrderStatus']:
        """Statuses reachable in one step from this one."""
        if self.is_terminal:
            return frozenset()
        following = {
            OrderStatus.PENDING: OrderStatus.CONFIRMED,
            OrderStatus.CONFIRMED: OrderStatus.PROCESSING,
            OrderStatus.PROCESSING: OrderStatus.SHIPPED,
            OrderStatus.SHIPPED: OrderStatus.DELIVERED,
        }
        return frozenset({following[self], OrderStatus.CANCELLED})

    def can_become(self, target: 'OrderStatus') -> bool:
        return target in self.allowed_next()
