"""
Django ORM implementation of OrderRepository.
"""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from apps.products.domain.value_objects.money import Money
from apps.users.domain.value_objects import Email, PhoneNumber
from ...domain.entities.order import Order
from ...domain.entities.order_line import OrderLine
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.customer_details import CustomerDetails
from ...domain.value_objects.order_number import OrderNumber
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.payment_method import PaymentMethod
from ..models.order_model import OrderModel, OrderLineModel


class DjangoOrderRepository(OrderRepository):
    """
    Django ORM based order repository implementation.

    Writes join whatever transaction is open on the default connection;
    transaction boundaries belong to the caller.
    """

    def add(self, order: Order) -> Order:
        """Persist a new order header and its lines."""
        customer = order.customer
        model = OrderModel.objects.create(
            id=order.id,
            order_number=order.order_number.value,
            customer_id=order.customer_id,
            status=order.status.value,
            subtotal=order.subtotal.amount,
            delivery_charge=order.delivery_charge.amount,
            total=order.total.amount,
            payment_method=order.payment_method.value,
            delivery_date=order.delivery_date,
            contact_name=customer.contact_name,
            email=customer.email.value,
            phone=customer.phone.value,
            address=customer.address,
            city=customer.city,
            pincode=customer.pincode,
            delivery_notes=customer.delivery_notes,
        )
        OrderLineModel.objects.bulk_create([
            OrderLineModel(
                id=line.id,
                order=model,
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price_at_purchase=line.unit_price.amount,
                line_total=line.line_total.amount,
                position=position,
            )
            for position, line in enumerate(order.lines)
        ])
        order.created_at = model.created_at
        order.updated_at = model.updated_at
        return order

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = OrderModel.objects.prefetch_related('lines').get(id=order_id)
        except OrderModel.DoesNotExist:
            return None
        return self._to_entity(model)

    def find_for_customer(self, order_id: UUID, customer_id: UUID) -> Optional[Order]:
        """Find an order only if it belongs to the customer."""
        try:
            model = OrderModel.objects.prefetch_related('lines').get(
                id=order_id,
                customer_id=customer_id,
            )
        except OrderModel.DoesNotExist:
            return None
        return self._to_entity(model)

    def save_status(self, order: Order, expected_status: OrderStatus) -> bool:
        """Compare-and-set the status column."""
        updated = OrderModel.objects.filter(id=order.id, status=expected_status.value).update(
            status=order.status.value,
            updated_at=order.updated_at,
        )
        return updated == 1

    def contains_product_of(self, order_id: UUID, producer_id: UUID) -> bool:
        """Whether any line of the order is for one of the producer's products."""
        return OrderLineModel.objects.filter(
            order_id=order_id,
            product__producer_id=producer_id,
        ).exists()

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        order = Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            customer_id=model.customer_id,
            lines=[
                OrderLine(
                    id=line.id,
                    order_id=model.id,
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=Money(amount=Decimal(str(line.unit_price_at_purchase))),
                    created_at=line.created_at,
                    updated_at=line.created_at,
                )
                for line in model.lines.all()
            ],
            customer=CustomerDetails.restore(
                contact_name=model.contact_name,
                email=Email.restore(value=model.email),
                phone=PhoneNumber.restore(value=model.phone),
                address=model.address,
                city=model.city,
                pincode=model.pincode,
                delivery_notes=model.delivery_notes,
            ),
            delivery_date=model.delivery_date,
            payment_method=PaymentMethod(model.payment_method),
            delivery_charge=Money(amount=Decimal(str(model.delivery_charge))),
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        return order
