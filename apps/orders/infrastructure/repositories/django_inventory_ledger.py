"""
Django ORM implementation of InventoryLedger.
"""
import logging
from uuid import UUID

from django.db.models import F
from django.utils import timezone

from apps.products.domain.exceptions import StockConflictError
from apps.products.infrastructure.models.product_model import ProductModel
from shared.application import UseCaseResult
from ...domain.repositories.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class DjangoInventoryLedger(InventoryLedger):
    """
    Compare-and-decrement on ``products.available_quantity``.

    Issues ``UPDATE products SET available_quantity = available_quantity - q
    WHERE id = ? AND available_quantity >= q`` and inspects the row count.
    The database evaluates the predicate against the row it locks for the
    write, so two concurrent decrements cannot both pass on the same units.
    """

    def decrement(self, product_id: UUID, quantity: int, product_name: str = None) -> UseCaseResult[int]:
        updated = ProductModel.objects.filter(
            id=product_id,
            available_quantity__gte=quantity,
        ).update(
            available_quantity=F('available_quantity') - quantity,
            updated_at=timezone.now(),
        )

        if updated == 1:
            return UseCaseResult.ok(quantity)

        available = (
            ProductModel.objects.filter(id=product_id)
            .values_list('available_quantity', flat=True)
            .first()
        )
        logger.warning(
            f"Stock conflict on product {product_id}: requested {quantity}, available {available}"
        )
        return UseCaseResult.fail_with(
            StockConflictError(
                product_id=str(product_id),
                requested=quantity,
                available=available or 0,
                product_name=product_name,
            )
        )
