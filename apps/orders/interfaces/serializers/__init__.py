# Serializers
from .order_serializer import (
    CustomerDetailsSerializer,
    OrderCreateSerializer,
    OrderItemRequestSerializer,
    OrderLineSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
    OrderSummarySerializer,
    ProducerOrderLineSerializer,
    ProducerOrderSerializer,
)

__all__ = [
    'CustomerDetailsSerializer',
    'OrderCreateSerializer',
    'OrderItemRequestSerializer',
    'OrderLineSerializer',
    'OrderSerializer',
    'OrderStatusUpdateSerializer',
    'OrderSummarySerializer',
    'ProducerOrderLineSerializer',
    'ProducerOrderSerializer',
]
