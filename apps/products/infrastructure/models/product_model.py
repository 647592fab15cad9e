"""
Product Django ORM model.
"""
import uuid

from django.conf import settings
from django.db import models

from ...domain.value_objects.product_status import ProductStatus


class ProductModel(models.Model):
    """Product listed by a producer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    producer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='products',
    )
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    unit = models.CharField(max_length=50)
    price_per_unit = models.DecimalField(max_digits=10, decimal_places=2)
    available_quantity = models.PositiveIntegerField(default=0)
    is_organic = models.BooleanField(default=False)
    images = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices(),
        default=ProductStatus.ACTIVE.value,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['producer', 'status'], name='products_producer_status_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_quantity__gte=0),
                name='product_available_quantity_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.unit})"
