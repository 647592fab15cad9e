from .cart_storage import CartStorage
from .order_gateway import OrderGateway

__all__ = ['CartStorage', 'OrderGateway']
