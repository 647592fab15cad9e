# Value objects
from .money import Money
from .stock import Stock
from .product_status import ProductStatus

__all__ = ['Money', 'Stock', 'ProductStatus']
