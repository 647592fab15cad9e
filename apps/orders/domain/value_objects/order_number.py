"""
Order number value object.
"""
import random
import string
from dataclasses import dataclass
from datetime import datetime

from shared.domain import ValueObject


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human-readable order reference shown to customers and producers."""
    value: str

    @classmethod
    def generate(cls) -> 'OrderNumber':
        """Generate a new order number."""
        date_part = datetime.now().strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=8))
        return cls(value=f"FM-{date_part}-{random_part}")
