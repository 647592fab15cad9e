"""
Order placed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    """Event raised when a new order is placed."""
    order_id: UUID
    order_number: str
    customer_id: UUID
    total: Decimal
