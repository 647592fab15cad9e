"""
Product status value object.
"""
from enum import Enum


class ProductStatus(str, Enum):
    """Listing status owned by the catalog."""
    ACTIVE = 'active'
    INACTIVE = 'inactive'
    OUT_OF_STOCK = 'out_of_stock'

    @classmethod
    def choices(cls):
        return [(status.value, status.name.replace('_', ' ').title()) for status in cls]
