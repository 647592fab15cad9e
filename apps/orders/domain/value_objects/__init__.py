# Value objects
from .order_status import OrderStatus
from .payment_method import PaymentMethod, ACCEPTED_PAYMENT_METHODS
from .customer_details import CustomerDetails
from .order_number import OrderNumber

__all__ = [
    'OrderStatus',
    'PaymentMethod',
    'ACCEPTED_PAYMENT_METHODS',
    'CustomerDetails',
    'OrderNumber',
]
