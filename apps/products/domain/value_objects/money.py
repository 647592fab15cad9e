"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from shared.domain import ValueObject

CENT = Decimal('0.01')


@dataclass(frozen=True)
class Money(ValueObject):
    """Money value object with currency."""
    amount: Decimal
    currency: str = "INR"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        object.__setattr__(self, 'amount', self.amount.quantize(CENT, rounding=ROUND_HALF_UP))

    @classmethod
    def zero(cls, currency: str = "INR") -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise ValueError("Cannot add different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> 'Money':
        """Multiply money by a factor."""
        return Money(amount=self.amount * factor, currency=self.currency)
