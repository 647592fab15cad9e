"""
Product domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    StateConflictError,
    InsufficientStockError,
)


class ProductNotFoundError(DomainException):
    """Raised when a product is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Product {identifier} not found",
            code="PRODUCT_NOT_FOUND"
        )
        self.identifier = identifier


class ProductUnavailableError(StateConflictError):
    """Raised when a product exists but is not listed for sale."""

    def __init__(self, product_id: str, product_name: str, status: str):
        super().__init__(
            message=f"Product {product_name} is not available for purchase",
            code="PRODUCT_UNAVAILABLE"
        )
        self.product_id = product_id
        self.product_name = product_name
        self.status = status


class StockConflictError(InsufficientStockError):
    """
    Raised when the atomic decrement finds less stock than the advisory
    check did, i.e. a concurrent order took the remaining units first.
    """

    def __init__(self, product_id: str, requested: int, available: int, product_name: str = None):
        super().__init__(
            product_id=product_id,
            requested=requested,
            available=available,
            product_name=product_name,
        )
        self.code = "STOCK_CONFLICT"


# Re-export for convenience
__all__ = [
    'ProductNotFoundError',
    'ProductUnavailableError',
    'StockConflictError',
    'InsufficientStockError',
]
