"""
Order Django ORM models.
"""
import uuid

from django.conf import settings
from django.db import models

from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment_method import PaymentMethod


class OrderModel(models.Model):
    """Order header."""

    PAYMENT_METHOD_CHOICES = [(method.value, method.name) for method in PaymentMethod]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='orders',
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.PENDING.value,
        db_index=True,
    )
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    delivery_charge = models.DecimalField(max_digits=10, decimal_places=2)
    total = models.DecimalField(max_digits=12, decimal_places=2)
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES)
    delivery_date = models.DateField()

    # Contact and delivery information
    contact_name = models.CharField(max_length=100)
    email = models.EmailField()
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    pincode = models.CharField(max_length=10)
    delivery_notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['customer', 'created_at'], name='orders_customer_created_idx'),
        ]

    def __str__(self):
        return self.order_number


class OrderLineModel(models.Model):
    """Order line; immutable once written."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='lines')
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='order_lines',
    )
    product_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    unit_price_at_purchase = models.DecimalField(max_digits=10, decimal_places=2)
    line_total = models.DecimalField(max_digits=12, decimal_places=2)
    position = models.PositiveSmallIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_lines'
        ordering = ['position']
        constraints = [
            models.UniqueConstraint(fields=['order', 'product'], name='order_line_unique_product'),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"
