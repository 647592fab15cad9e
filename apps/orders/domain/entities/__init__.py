# Domain entities
from .order import Order
from .order_line import OrderLine

__all__ = ['Order', 'OrderLine']
