"""
Order line entity.
"""
from dataclasses import dataclass
from uuid import UUID

from apps.products.domain.value_objects.money import Money
from shared.domain import BaseEntity


@dataclass(kw_only=True, eq=False)
class OrderLine(BaseEntity):
    """One product within a placed order, priced at purchase time."""
    order_id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    unit_price: Money

    @property
    def line_total(self) -> Money:
        """Calculate the line total."""
        return self.unit_price.multiply(self.quantity)
