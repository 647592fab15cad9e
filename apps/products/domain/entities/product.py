"""
Product entity (Aggregate Root).

Products are owned by the catalog; ordering only reads them and, through the
inventory ledger, decrements their available quantity.
"""
from dataclasses import dataclass, field
from typing import List
from uuid import UUID

from shared.domain import AggregateRoot
from ..value_objects.money import Money
from ..value_objects.product_status import ProductStatus
from ..value_objects.stock import Stock


@dataclass(kw_only=True, eq=False)
class Product(AggregateRoot):
    """Product entity representing a sellable item."""
    producer_id: UUID
    name: str
    unit: str
    price: Money
    stock: Stock
    status: ProductStatus = ProductStatus.ACTIVE
    is_organic: bool = False
    images: List[str] = field(default_factory=list)

    @property
    def is_purchasable(self) -> bool:
        """Only active listings can be ordered."""
        return self.status == ProductStatus.ACTIVE

    def can_supply(self, quantity: int) -> bool:
        return self.stock.covers(quantity)
