"""
Order serializers.

The wire format is camelCase; fields map onto snake_case attributes via
``source``.
"""
from rest_framework import serializers


class OrderLineSerializer(serializers.Serializer):
    """Serializer for order line output."""
    id = serializers.UUIDField(read_only=True)
    productId = serializers.UUIDField(source='product_id', read_only=True)
    productName = serializers.CharField(source='product_name', read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unitPrice = serializers.DecimalField(
        source='unit_price', max_digits=10, decimal_places=2, read_only=True
    )
    lineTotal = serializers.DecimalField(
        source='line_total', max_digits=12, decimal_places=2, read_only=True
    )


class OrderSummarySerializer(serializers.Serializer):
    """Header fields of an order."""
    id = serializers.UUIDField(read_only=True)
    orderNumber = serializers.CharField(source='order_number', read_only=True)
    status = serializers.CharField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    deliveryCharge = serializers.DecimalField(
        source='delivery_charge', max_digits=10, decimal_places=2, read_only=True
    )
    total = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    paymentMethod = serializers.CharField(source='payment_method', read_only=True)
    deliveryDate = serializers.DateField(source='delivery_date', read_only=True)
    contactName = serializers.CharField(source='contact_name', read_only=True)
    address = serializers.CharField(read_only=True)
    city = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)


class OrderSerializer(OrderSummarySerializer):
    """Serializer for a full order with its lines."""
    email = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    pincode = serializers.CharField(read_only=True)
    deliveryNotes = serializers.CharField(source='delivery_notes', read_only=True)
    itemCount = serializers.IntegerField(source='item_count', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    lines = OrderLineSerializer(many=True, read_only=True)


class OrderItemRequestSerializer(serializers.Serializer):
    """A requested product and quantity. Price fields are not accepted."""
    productId = serializers.UUIDField(source='product_id')
    quantity = serializers.IntegerField(min_value=1)


class CustomerDetailsSerializer(serializers.Serializer):
    """Contact and delivery details for an order."""
    contactName = serializers.CharField(source='contact_name', max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=20)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    pincode = serializers.CharField(max_length=10)
    deliveryNotes = serializers.CharField(
        source='delivery_notes', required=False, allow_blank=True, default=''
    )
    deliveryDate = serializers.DateField(source='delivery_date')


class OrderCreateSerializer(serializers.Serializer):
    """
    Serializer for order submission.

    Unknown keys such as ``pricePerUnit``, ``subtotal``, ``deliveryCharge``
    or ``total`` are dropped during validation.
    """
    items = OrderItemRequestSerializer(many=True, allow_empty=True)
    customerDetails = CustomerDetailsSerializer(source='customer_details')
    paymentMethod = serializers.CharField(source='payment_method', max_length=20)


class ProducerOrderLineSerializer(serializers.Serializer):
    """A producer's line joined with product display fields."""
    id = serializers.UUIDField(read_only=True)
    productId = serializers.UUIDField(source='product_id', read_only=True)
    productName = serializers.CharField(source='product.name', read_only=True)
    productImages = serializers.JSONField(source='product.images', read_only=True)
    productIsOrganic = serializers.BooleanField(source='product.is_organic', read_only=True)
    productUnit = serializers.CharField(source='product.unit', read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    unitPrice = serializers.DecimalField(
        source='unit_price_at_purchase', max_digits=10, decimal_places=2, read_only=True
    )
    lineTotal = serializers.DecimalField(
        source='line_total', max_digits=12, decimal_places=2, read_only=True
    )


class ProducerOrderSerializer(OrderSummarySerializer):
    """Order as seen by a producer: only their lines, plus customer contact."""
    email = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True)
    pincode = serializers.CharField(read_only=True)
    deliveryNotes = serializers.CharField(source='delivery_notes', read_only=True)
    customerId = serializers.UUIDField(source='customer_id', read_only=True)
    customerName = serializers.CharField(source='customer.display_name', read_only=True)
    customerEmail = serializers.CharField(source='customer.email', read_only=True)
    items = ProducerOrderLineSerializer(source='producer_lines', many=True, read_only=True)


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Serializer for a producer status change."""
    status = serializers.CharField(max_length=20)
