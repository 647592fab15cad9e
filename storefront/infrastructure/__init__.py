# Storefront infrastructure
from .cart_storage import DEFAULT_CART_FILE, InMemoryCartStorage, JsonFileCartStorage
from .order_gateway import HttpOrderGateway

__all__ = [
    'DEFAULT_CART_FILE',
    'InMemoryCartStorage',
    'JsonFileCartStorage',
    'HttpOrderGateway',
]
