"""
Django ORM implementation of ProductRepository.
"""
from decimal import Decimal
from typing import Iterable, List
from uuid import UUID

from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.money import Money
from ...domain.value_objects.product_status import ProductStatus
from ...domain.value_objects.stock import Stock
from ..models.product_model import ProductModel


class DjangoProductRepository(ProductRepository):
    """Django ORM based product repository implementation."""

    def find_by_ids(self, product_ids: Iterable[UUID]) -> List[Product]:
        """Find every product whose ID is in the given set."""
        models = ProductModel.objects.filter(id__in=list(product_ids))
        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            producer_id=model.producer_id,
            name=model.name,
            unit=model.unit,
            price=Money(amount=Decimal(str(model.price_per_unit))),
            stock=Stock(quantity=model.available_quantity),
            status=ProductStatus(model.status),
            is_organic=model.is_organic,
            images=list(model.images or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
