"""
Stock value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject


@dataclass(frozen=True)
class Stock(ValueObject):
    """Available quantity of a product."""
    quantity: int

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError("Stock quantity cannot be negative")

    def covers(self, requested: int) -> bool:
        """Check if the requested quantity can be supplied."""
        return self.quantity >= requested
