"""
Read-side order queries.

These build querysets for the listing endpoints. They only read, and they
sit outside the placement transaction.
"""
from typing import Optional

from django.db.models import Prefetch, QuerySet

from ..domain.value_objects.order_status import OrderStatus
from .models.order_model import OrderLineModel, OrderModel


def orders_for_customer(customer_id) -> QuerySet:
    """The customer's own orders, newest first."""
    return OrderModel.objects.filter(customer_id=customer_id).order_by('-created_at')


def orders_for_producer(producer_id, status: Optional[str] = None) -> QuerySet:
    """
    Orders containing at least one of the producer's products, newest first.

    Each order's ``producer_lines`` holds only the producer's lines, with the
    product joined in for display fields. An unrecognised ``status`` filter
    is ignored.
    """
    queryset = (
        OrderModel.objects
        .filter(lines__product__producer_id=producer_id)
        .select_related('customer')
        .prefetch_related(
            Prefetch(
                'lines',
                queryset=OrderLineModel.objects
                .filter(product__producer_id=producer_id)
                .select_related('product'),
                to_attr='producer_lines',
            )
        )
        .distinct()
        .order_by('-created_at')
    )
    if status and status in {choice.value for choice in OrderStatus}:
        queryset = queryset.filter(status=status)
    return queryset
