"""
Payment method value object.
"""
from enum import Enum


class PaymentMethod(str, Enum):
    """How the customer pays. Only cash on delivery is wired end to end."""
    COD = 'cod'
    ONLINE = 'online'

    @property
    def is_accepted(self) -> bool:
        return self in ACCEPTED_PAYMENT_METHODS


ACCEPTED_PAYMENT_METHODS = frozenset({PaymentMethod.COD})
